"""
Shared utilities for mmdsvg.

Common functionality used across contexts:
- Logger configuration
- Fatal error reporting
"""

from mmdsvg.utils.logger import enable_logging, fatal, setup_logger

__all__ = ["enable_logging", "fatal", "setup_logger"]
