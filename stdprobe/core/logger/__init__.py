"""Logging utilities."""

from stdprobe.core.logger.logger import LOGGER_NAMESPACE, get_console, get_logger, setup_logging

__all__ = ["LOGGER_NAMESPACE", "get_console", "get_logger", "setup_logging"]
