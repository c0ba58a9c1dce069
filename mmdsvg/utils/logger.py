"""
Generic logger setup utilities.

Provides the process-wide loguru configuration. Logging is silent unless
explicitly enabled; fatal errors always force it on for the error message.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY/MM/DD HH:mm:ss} {message}"
ERROR_PREFIX = "error: "

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<white>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

_sink_id: Optional[int] = None


def setup_logger(enabled: bool = False, level: str = "INFO") -> None:
    """
    Configure loguru for a command-line run.

    Removes every existing sink. When enabled, adds a single stderr sink
    that prints one timestamped line per event.

    Args:
        enabled: Whether log events are written to stderr (default: silent)
        level: Minimum level for the stderr sink

    Example:
        from mmdsvg.utils.logger import setup_logger

        setup_logger(enabled=True, level="DEBUG")
    """
    global _sink_id

    # Remove default logger
    logger.remove()
    _sink_id = None

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    if enabled:
        enable_logging(level)


def enable_logging(level: str = "INFO") -> None:
    """Add the stderr sink if it is not already installed."""
    global _sink_id

    if _sink_id is not None:
        return
    _sink_id = logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=False)


def logging_enabled() -> bool:
    """Return True when the stderr sink is installed."""
    return _sink_id is not None


def format_fatal(message: str) -> str:
    """
    Turn message into a single 'error: '-prefixed line.

    Embedded line breaks (e.g., MermaidJS parse errors) are collapsed into
    '; '-separated parts. The sink adds the terminating newline.

    Examples:
        >>> format_fatal("couldn't render: Parse error on line 1:\\n^\\nExpecting 'NEWLINE'\\n")
        "error: couldn't render: Parse error on line 1:; ^; Expecting 'NEWLINE'"
    """
    lines = [line.strip() for line in message.splitlines()]
    message = "; ".join(line for line in lines if line)
    if not message.startswith(ERROR_PREFIX):
        message = ERROR_PREFIX + message
    return message


def fatal(message: str) -> None:
    """
    Report a fatal error on stderr.

    Logging is force-enabled for this one message regardless of the
    user's --log setting. Exiting is left to the caller so that resources
    owned further up the stack are released first.

    Args:
        message: Error description, with or without the 'error: ' prefix
    """
    enable_logging()
    logger.error(format_fatal(message))
