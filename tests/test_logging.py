"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from actiongallery.logging import ROOT_LOGGER, configure_logging, get_logger

_CONFIGURED = (ROOT_LOGGER, "httpx", "httpcore")


@pytest.fixture(autouse=True)
def _restore_loggers():
    saved = {
        name: (logging.getLogger(name).level, logging.getLogger(name).propagate)
        for name in _CONFIGURED
    }
    yield
    for name, (level, propagate) in saved.items():
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(level)
        logger.propagate = propagate


def test_console_lines_name_the_component(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging()

    get_logger("remote").warning("rate limited")
    get_logger().info("starting")

    err = capsys.readouterr().err
    assert "[remote] WARNING rate limited\n" in err
    assert "[actiongallery] INFO starting\n" in err


def test_httpx_requests_only_surface_when_verbose() -> None:
    configure_logging()
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger(ROOT_LOGGER).level == logging.INFO

    configure_logging(verbose=True)
    assert logging.getLogger("httpx").level == logging.INFO
    assert logging.getLogger("httpcore").level == logging.WARNING
    assert logging.getLogger(ROOT_LOGGER).level == logging.DEBUG


def test_repeated_configuration_replaces_handlers() -> None:
    configure_logging()
    configure_logging(verbose=True)

    root_handlers = logging.getLogger(ROOT_LOGGER).handlers
    assert len(root_handlers) == 1
    assert logging.getLogger("httpx").handlers == root_handlers


def test_log_file_receives_full_logger_names(tmp_path: Path) -> None:
    log_file = tmp_path / "gallery.log"
    configure_logging(log_file=log_file)

    get_logger("pipeline").info("Rendered 3 actions")
    logging.getLogger("httpx").warning("retrying request")

    text = log_file.read_text(encoding="utf-8")
    assert "INFO actiongallery.pipeline: Rendered 3 actions" in text
    assert "WARNING httpx: retrying request" in text
