"""Console and logging helpers for create-domus-app."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from create_domus_app.config import LoggingConfig

__all__ = ("configure_logging", "console")

console = Console()
"""Shared console for operator-facing output."""


def configure_logging(config: "LoggingConfig | None" = None) -> logging.Logger:
    """Attach the rich handler to the package logger and apply the level.

    HTTP client loggers are held at WARNING unless verbose output is requested,
    since they log every registry request.

    Args:
        config: Logging settings. Defaults to ``LoggingConfig()``.

    Returns:
        The configured package logger.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger("create_domus_app")
    logger.setLevel(config.python_level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False, show_time=False))

    http_level = logging.DEBUG if config.level == "verbose" else logging.WARNING
    for logger_name in ("httpx", "httpcore"):
        logging.getLogger(logger_name).setLevel(http_level)
    return logger
