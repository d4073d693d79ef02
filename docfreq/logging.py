"""Logging setup for the docfreq service and CLI."""

from __future__ import annotations

import logging
from typing import List

from .config import LoggingConfig

_LOGGER_NAME = "docfreq"
# pypdf reports recoverable damage in uploads through its own logger.
_EXTRACTOR_LOGGERS = ("pypdf",)

_CONSOLE_FORMAT = "[docfreq] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the docfreq hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    settings: LoggingConfig | None = None, *, verbose: bool = False
) -> logging.Logger:
    """Install handlers described by ``settings`` on the docfreq logger.

    ``verbose`` forces DEBUG output regardless of ``settings.verbose``.
    Extraction library loggers share the handlers at WARNING so damaged
    uploads show up next to the ingest log lines.
    """
    settings = settings or LoggingConfig()
    level = logging.DEBUG if verbose or settings.verbose else logging.INFO
    handlers = _build_handlers(settings, level)

    logger = logging.getLogger(_LOGGER_NAME)
    _install(logger, handlers, level)
    for name in _EXTRACTOR_LOGGERS:
        _install(logging.getLogger(name), handlers, logging.WARNING)
    return logger


def _build_handlers(settings: LoggingConfig, level: int) -> List[logging.Handler]:
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [stream_handler]

    if settings.file is not None:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)
    return handlers


def _install(logger: logging.Logger, handlers: List[logging.Handler], level: int) -> None:
    # Repeated CLI invocations replace handlers instead of stacking them.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = False
    for handler in handlers:
        logger.addHandler(handler)


__all__ = ["configure_logging", "get_logger"]
