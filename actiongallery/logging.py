"""Logging setup shared by the build, list and serve commands.

Console lines are prefixed with the emitting component (``remote``,
``collector``, ``pipeline``) so a slow or failing walk of the connector tree
is easy to follow. Request lines from ``httpx`` are routed through the same
handlers but only surface with ``--verbose``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

ROOT_LOGGER = "actiongallery"

CONSOLE_FORMAT = "[%(component)s] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    full_name = f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER
    return logging.getLogger(full_name)


class ComponentFilter(logging.Filter):
    """Attach ``record.component``: the logger name below ``actiongallery``."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = f"{ROOT_LOGGER}."
        if record.name.startswith(prefix):
            record.component = record.name[len(prefix):]
        else:
            record.component = record.name
        return True


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install console (and optional file) handlers for actiongallery and httpx.

    ``verbose`` lowers the package level to DEBUG and lets ``httpx`` report
    each request at INFO. ``httpcore`` connection chatter stays at WARNING.
    """
    handlers = _build_handlers(log_file)

    logger = _install(ROOT_LOGGER, logging.DEBUG if verbose else logging.INFO, handlers)
    _install("httpx", logging.INFO if verbose else logging.WARNING, handlers)
    _install("httpcore", logging.WARNING, handlers)
    return logger


def _build_handlers(log_file: Path | None) -> List[logging.Handler]:
    component = ComponentFilter()

    console = logging.StreamHandler()
    console.addFilter(component)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)
    return handlers


def _install(name: str, level: int, handlers: Iterable[logging.Handler]) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    # Repeated CLI invocations in one process replace rather than stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    return logger


__all__ = [
    "ROOT_LOGGER",
    "ComponentFilter",
    "configure_logging",
    "get_logger",
]
