"""
Tests for logging configuration.
"""
import logging
from logging.handlers import RotatingFileHandler

from utils.logger_setup import LOG_FORMAT, log_file_for, setup_logging


def test_handlers_and_format(tmp_path):
    logger = setup_logging("content_admin.test_handlers", log_dir=tmp_path / "logs")

    kinds = {type(h) for h in logger.handlers}
    assert kinds == {logging.StreamHandler, RotatingFileHandler}
    file_handler = next(h for h in logger.handlers if isinstance(h, RotatingFileHandler))
    assert file_handler.maxBytes == 10 * 1024 * 1024
    assert file_handler.backupCount == 5
    assert file_handler.formatter._fmt == LOG_FORMAT
    assert (tmp_path / "logs").is_dir()


def test_idempotent_across_reruns(tmp_path):
    first = setup_logging("content_admin.test_rerun", log_dir=tmp_path)
    second = setup_logging("content_admin.test_rerun", log_level=logging.DEBUG, log_dir=tmp_path)

    assert first is second
    assert len(second.handlers) == 2
    assert second.level == logging.DEBUG


def test_console_output_disabled(tmp_path):
    logger = setup_logging("content_admin.test_quiet", log_dir=tmp_path, console_output=False)
    assert [type(h) for h in logger.handlers] == [RotatingFileHandler]


def test_log_file_name_sanitized(tmp_path):
    assert log_file_for("content admin/ui", tmp_path) == tmp_path / "content_admin_ui.log"
