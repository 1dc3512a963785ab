"""Tests for the logging helpers."""

from __future__ import annotations

import logging

from satfit.utils import logger as satfit_logger


def test_setup_logger_without_directory_writes_no_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log = satfit_logger.setup_logger()

    assert log.name == 'satfit'
    assert not any(isinstance(h, logging.FileHandler) for h in log.handlers)
    assert list(tmp_path.iterdir()) == []


def test_setup_logger_with_directory(tmp_path):
    log_dir = tmp_path / 'logs'
    try:
        log = satfit_logger.setup_logger(log_dir=str(log_dir), log_level=logging.DEBUG)
        satfit_logger.log_debug("debug message")
        for handler in log.handlers:
            handler.flush()

        files = list(log_dir.glob('satfit_*.log'))
        assert len(files) == 1
        assert "debug message" in files[0].read_text()
    finally:
        satfit_logger.setup_logger()


def test_setup_logger_replaces_handlers():
    satfit_logger.setup_logger()
    log = satfit_logger.setup_logger()
    assert len(log.handlers) == 1
    assert satfit_logger.get_logger() is log


def test_log_error_includes_exception(caplog):
    satfit_logger.setup_logger()
    with caplog.at_level(logging.ERROR, logger='satfit'):
        satfit_logger.log_error("Fit failed", ValueError("bad input"))
    assert "Fit failed: bad input" in caplog.text
