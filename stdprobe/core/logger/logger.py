"""Logging for stdprobe.

Library code only asks for loggers. Handlers are attached by
``setup_logging``, which the CLI calls once its settings are loaded, so
importing or calling the detector never reads configuration.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from stdprobe.core.config.settings import LoggingSettings

# Every stdprobe logger lives under this name
LOGGER_NAMESPACE = "stdprobe"

_console: Console | None = None


def setup_logging(settings: LoggingSettings) -> logging.Logger:
    """Attach handlers to the stdprobe logger tree.

    Calling it again replaces the handlers from the previous call.

    Args:
        settings: Logging settings.

    Returns:
        The configured namespace logger.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(getattr(logging, settings.level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if settings.use_rich:
        logger.addHandler(
            RichHandler(
                console=get_console(),
                show_path=False,
                show_time=False,
                rich_tracebacks=True,
                markup=False,
            )
        )
    else:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(logging.Formatter(settings.format))
        logger.addHandler(stream_handler)

    if settings.file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    # Handled here; keep records away from whatever the host app set on root
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the stdprobe namespace.

    Names outside the namespace are nested under it, so
    ``get_logger("CMakeSource")`` returns ``stdprobe.CMakeSource``.

    Args:
        name: Logger name (typically __name__ or a class name).

    Returns:
        Logger instance. No handlers are attached here.
    """
    if name != LOGGER_NAMESPACE and not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)


def get_console() -> Console:
    """Get the Rich console used for log output (stderr)."""
    global _console
    if _console is None:
        _console = Console(stderr=True)
    return _console
