import logging

from double_slit import config
from double_slit.logging_config import setup_logging


def test_repeated_setup_does_not_stack_handlers():
    setup_logging(logging.INFO)
    logger = setup_logging(logging.DEBUG)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "double_slit.log"
    logger = setup_logging(logging.INFO, str(log_file))
    try:
        logging.getLogger("double_slit.storage").info("stored something")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in text
        assert "double_slit.storage - INFO - stored something" in text
    finally:
        setup_logging(logging.INFO)


def test_log_file_from_environment(monkeypatch, tmp_path):
    monkeypatch.delenv("DOUBLE_SLIT_LOG_FILE", raising=False)
    assert config.get_log_file() is None
    monkeypatch.setenv("DOUBLE_SLIT_LOG_FILE", str(tmp_path / "x.log"))
    assert config.get_log_file() == str(tmp_path / "x.log")
