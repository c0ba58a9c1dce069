"""
Render Session

One headless browser hosting MermaidJS for a whole run: start once, render
many documents, stop once. There is no per-document browser startup.

Usage:
    session = RenderSession(initialize_config={"theme": "dark", "startOnLoad": False})
    session.start()
    try:
        svg = session.render("graph TD; A-->B")
    finally:
        session.stop()

    # or, equivalently
    with RenderSession() as session:
        svg = session.render("graph TD; A-->B")
"""

import time
from typing import Any, Callable, Dict, Optional

from requests import RequestException
from selenium.common.exceptions import WebDriverException

from mmdsvg.contexts.rendering.browser import ChromeEngine, Engine
from mmdsvg.contexts.rendering.config import DEFAULT_INITIALIZE_CONFIG, read_mermaid_source
from mmdsvg.contexts.rendering.exceptions import (
    ConfigureError,
    EngineLaunchError,
    HelperRegistrationError,
    LibraryLoadError,
    RenderError,
    SessionStateError,
    describe_error,
)
from mmdsvg.contexts.rendering.javascript import (
    EXTRAS_JS_SOURCE,
    initialize_expression,
    render_expression,
)
from mmdsvg.contexts.rendering.logger import (
    _log_debug,
    _log_warning,
    log_render_call,
    log_session_starting,
    log_session_step,
    log_session_stopped,
)

# Session states
NEW = "new"
STARTING = "starting"
STARTED = "started"
STOPPED = "stopped"


class RenderSession:
    """
    Lifecycle owner of one rendering engine.

    Setup runs four steps, each fatal on failure: launch the browser, load
    the MermaidJS bundle, call mermaid.initialize(), and inject the
    renderSVG helper. A session whose start failed is never usable for
    rendering, but stop() still releases whatever was launched.

    Attributes:
        initialize_config: Object passed to mermaid.initialize()
        state: One of 'new', 'starting', 'started', 'stopped'
    """

    def __init__(
        self,
        initialize_config: Optional[Dict[str, Any]] = None,
        engine_factory: Callable[[], Engine] = ChromeEngine,
        source_loader: Callable[[], str] = read_mermaid_source,
    ):
        self.initialize_config = dict(initialize_config or DEFAULT_INITIALIZE_CONFIG)
        self._engine_factory = engine_factory
        self._source_loader = source_loader
        self._engine: Optional[Engine] = None
        self.state = NEW

    @property
    def started(self) -> bool:
        return self.state == STARTED

    def start(self) -> "RenderSession":
        """
        Launch the browser and set up MermaidJS.

        Returns:
            self, for chaining

        Raises:
            SessionStateError: If start() was already called
            EngineLaunchError: Browser could not be launched
            LibraryLoadError: MermaidJS could not be read, downloaded or evaluated
            ConfigureError: mermaid.initialize() failed
            HelperRegistrationError: renderSVG helper could not be injected
        """
        if self.state != NEW:
            raise SessionStateError(f"render session cannot start from state '{self.state}'")

        log_session_starting()
        self.state = STARTING

        try:
            self._engine = self._engine_factory()
        except WebDriverException as e:
            raise EngineLaunchError("couldn't launch headless Chrome", e) from e
        log_session_step("launch")

        try:
            mermaid_source = self._source_loader()
        except (OSError, RequestException) as e:
            raise LibraryLoadError("couldn't obtain MermaidJS source", e) from e
        try:
            self._engine.load(mermaid_source)
        except WebDriverException as e:
            raise LibraryLoadError("couldn't evaluate MermaidJS source", e) from e
        log_session_step("load mermaid")

        try:
            self._engine.evaluate(initialize_expression(self.initialize_config))
        except WebDriverException as e:
            raise ConfigureError("mermaid.initialize() failed", e) from e
        log_session_step("initialize mermaid")

        try:
            self._engine.load(EXTRAS_JS_SOURCE)
        except WebDriverException as e:
            raise HelperRegistrationError("couldn't register renderSVG", e) from e
        log_session_step("inject additional JavaScript")

        self.state = STARTED
        return self

    def render(self, source: str) -> str:
        """
        Render one MermaidJS document to SVG.

        Blocks until the in-page render promise settles.

        Args:
            source: MermaidJS document text

        Returns:
            SVG document as a single string

        Raises:
            SessionStateError: If the session is not started
            RenderError: If the call fails, times out or returns a non-string
        """
        if self.state != STARTED:
            raise SessionStateError(f"cannot render: render session is '{self.state}'")

        start_time = time.time()
        try:
            result = self._engine.evaluate(render_expression(source))
        except WebDriverException as e:
            raise RenderError(f"couldn't render: {describe_error(e)}") from e

        if not isinstance(result, str):
            raise RenderError(f"couldn't render: expected SVG text, got {type(result).__name__}")

        log_render_call(source, time.time() - start_time)
        return result

    def stop(self) -> None:
        """
        Release the browser.

        Safe after a failed start. Calling it again after the session is
        stopped does nothing.
        """
        if self.state == STOPPED:
            _log_debug("render session already stopped")
            return

        engine, self._engine = self._engine, None
        self.state = STOPPED

        if engine is not None:
            try:
                engine.close()
            except WebDriverException as e:
                _log_warning(f"headless browser did not shut down cleanly: {describe_error(e)}")

        log_session_stopped()

    def __enter__(self) -> "RenderSession":
        # __exit__ is not called when __enter__ raises
        try:
            return self.start()
        except Exception:
            self.stop()
            raise

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()
