"""Unit tests for jitterplot logging helpers."""

import logging
import sys

import jitterplot
from jitterplot.utils.logging import LOGGER_NAME, configure_logging, get_logger


def _stderr_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr]


def test_package_logger_has_null_handler():
    logger = logging.getLogger(LOGGER_NAME)
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert jitterplot.get_logger() is logger


def test_get_logger_by_name():
    assert get_logger("jitterplot.pipeline.plotting").name == "jitterplot.pipeline.plotting"


def test_configure_logging_is_idempotent(monkeypatch):
    logger = logging.getLogger(LOGGER_NAME)
    monkeypatch.setattr(logger, "handlers", list(logger.handlers))
    monkeypatch.setattr(logger, "level", logger.level)
    configure_logging(level="DEBUG", force=True)
    configure_logging(level="DEBUG")
    assert len(_stderr_handlers(logger)) == 1
    assert logger.level == logging.DEBUG


def test_configure_logging_reads_env(monkeypatch):
    logger = logging.getLogger(LOGGER_NAME)
    monkeypatch.setattr(logger, "handlers", list(logger.handlers))
    monkeypatch.setattr(logger, "level", logger.level)
    monkeypatch.setenv("JITTERPLOT_LOG_LEVEL", "WARNING")
    configure_logging(force=True)
    assert logger.level == logging.WARNING


def test_pipeline_does_not_attach_handlers():
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)
    jitterplot.build_layout([1, 2, 3], ["a", "b", "a"])
    assert logger.handlers == before


def test_pipeline_debug_records_are_preformatted(caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        jitterplot.jitterplot([1, 2, 3], ["a", "b", "a"], surface=jitterplot.RecordingSurface())
    records = [r for r in caplog.records if r.name.startswith(f"{LOGGER_NAME}.pipeline")]
    assert records
    assert all(not r.args for r in records)
    messages = [r.getMessage() for r in records]
    assert "validated 3 samples (colorgroup=False, color rows=None)" in messages
    assert "resolved 3 samples into 2 categories (explicit order=False): ['a', 'b']" in messages
    assert "drew 2 median markers" in messages
