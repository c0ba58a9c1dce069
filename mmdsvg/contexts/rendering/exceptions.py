"""Custom exceptions for rendering context with the failing session step."""

from typing import Optional


def describe_error(error: Exception) -> str:
    """
    Short description of an underlying error.

    WebDriver exceptions append a "Stacktrace:" section to str(); only
    their message is used.
    """
    return getattr(error, "msg", None) or str(error)


class RenderingError(Exception):
    """Base class for every headless browser or MermaidJS failure."""

    pass


class SessionStartError(RenderingError):
    """
    Exception raised when a render session cannot be brought up.

    Attributes:
        message: Error description
        step: Session setup step that failed (e.g., 'launch', 'load library')
        original_error: The underlying WebDriver, network or file error
    """

    step = "start"

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error

        parts = [f"{self.step}: {message}"]
        if original_error:
            parts.append(describe_error(original_error))

        super().__init__(": ".join(parts))


class EngineLaunchError(SessionStartError):
    """Headless browser could not be launched."""

    step = "set up headless browser"


class LibraryLoadError(SessionStartError):
    """MermaidJS source could not be obtained or evaluated."""

    step = "load mermaid"


class ConfigureError(SessionStartError):
    """mermaid.initialize() failed."""

    step = "initialize mermaid"


class HelperRegistrationError(SessionStartError):
    """The renderSVG helper could not be injected."""

    step = "inject additional JavaScript"


class RenderError(RenderingError):
    """A single render call failed, timed out or returned something other than SVG text."""

    pass


class SessionStateError(RenderingError):
    """Session used out of order (render before start, render after stop, second start)."""

    pass
