"""
Rendering context logger.

Lifecycle milestones are logged verbatim ("starting headless browser",
"stopped headless browser"); step-level detail goes to DEBUG with an
automatic [render] prefix. All rendering modules should import from this
module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


# High-level session milestones


def log_session_starting() -> None:
    logger.info("starting headless browser")


def log_session_stopped() -> None:
    logger.info("stopped headless browser")


def log_session_step(step: str) -> None:
    """Log one completed setup step."""
    _log_debug(f"{step}: ok")


def log_render_call(source: str, elapsed_time: float) -> None:
    """Log size and duration of a render call."""
    _log_debug(f"rendered {len(source)} characters ({elapsed_time:.2f}s)")
