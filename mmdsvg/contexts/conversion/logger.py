"""
Conversion context logger.

Provides the batch and watch loop milestones ("rendered <path>",
"watching...", "done") plus [convert]-prefixed debug detail.
All conversion modules should import from this module, not from loguru directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

CONTEXT_PREFIX = "[convert]"


def _log_debug(message: str) -> None:
    """Log debug message with [convert] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_rendered(output_path: Path) -> None:
    """Log one completed render-and-write."""
    logger.info(f"rendered {output_path}")


def log_watching(num_files: int, interval: float) -> None:
    logger.info("watching...")
    _log_debug(f"polling {num_files} file(s) every {interval * 1000:.0f}ms")


def log_watch_done() -> None:
    logger.info("done")


def log_change_detected(source_path: Path, previous_ns: Optional[int], current_ns: int) -> None:
    """Log a source whose modification time advanced."""
    _log_debug(f"changed: {source_path} ({previous_ns} -> {current_ns})")

