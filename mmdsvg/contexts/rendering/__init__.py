"""
Rendering Context

Responsibilities:
- Launches and tears down the headless browser
- Loads and configures MermaidJS inside it
- Renders one MermaidJS document to SVG per call

Owns: RenderSession lifecycle, JavaScript call encoding
Never: Reads or writes files
"""

from mmdsvg.contexts.rendering.config import build_initialize_config
from mmdsvg.contexts.rendering.exceptions import (
    ConfigureError,
    EngineLaunchError,
    HelperRegistrationError,
    LibraryLoadError,
    RenderError,
    RenderingError,
    SessionStartError,
    SessionStateError,
)
from mmdsvg.contexts.rendering.session import RenderSession

__all__ = [
    "ConfigureError",
    "EngineLaunchError",
    "HelperRegistrationError",
    "LibraryLoadError",
    "RenderError",
    "RenderSession",
    "RenderingError",
    "SessionStartError",
    "SessionStateError",
    "build_initialize_config",
]
