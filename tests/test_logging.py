"""Tests for docfreq.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from docfreq.config import LoggingConfig, load_config
from docfreq.logging import configure_logging, get_logger


def test_get_logger_nests_under_docfreq() -> None:
    assert get_logger().name == "docfreq"
    assert get_logger("ingestion").name == "docfreq.ingestion"


def test_configure_logging_defaults_to_info_console_only() -> None:
    logger = configure_logging()

    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_verbose_settings_or_flag_enable_debug() -> None:
    assert configure_logging(LoggingConfig(verbose=True)).level == logging.DEBUG
    assert configure_logging(LoggingConfig(), verbose=True).level == logging.DEBUG


def test_configured_log_file_receives_ingest_messages(tmp_path: Path) -> None:
    (tmp_path / ".docfreq.yml").write_text(
        "logging:\n  file: logs/docfreq.log\n", encoding="utf-8"
    )
    settings = load_config(tmp_path).logging

    configure_logging(settings)
    get_logger("ingestion").info("Stored analysis %s", "abc")
    for handler in logging.getLogger("docfreq").handlers:
        handler.flush()

    contents = (tmp_path / "logs" / "docfreq.log").read_text(encoding="utf-8")
    assert "docfreq.ingestion: Stored analysis abc" in contents


def test_reconfiguring_replaces_handlers() -> None:
    configure_logging()
    configure_logging()

    assert len(logging.getLogger("docfreq").handlers) == 1


def test_extractor_logger_shares_handlers_at_warning() -> None:
    logger = configure_logging(verbose=True)
    pypdf_logger = logging.getLogger("pypdf")

    assert pypdf_logger.level == logging.WARNING
    assert pypdf_logger.handlers == logger.handlers
    assert pypdf_logger.propagate is False
