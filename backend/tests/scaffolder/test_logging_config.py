"""Tests for scaffolder.logging_config."""

import logging

import pytest

from scaffolder import logging_config


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Send log files to tmp_path and drop any loggers a test configured."""
    monkeypatch.setattr(logging_config, "LOG_DIR", tmp_path / "logs")
    before = set(logging_config._configured)
    yield tmp_path / "logs"
    for name in set(logging_config._configured) - before:
        logger = logging_config._configured.pop(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


# ---------------------------------------------------------------------------
# setup_logger
# ---------------------------------------------------------------------------


class TestSetupLogger:

    def test_writes_to_log_file(self, log_dir):
        logger = logging_config.setup_logger("test_logging.file", "file.log")
        logger.info("imported %s", "ABC123")
        for handler in logger.handlers:
            handler.flush()

        text = (log_dir / "file.log").read_text(encoding="utf-8")
        assert "[test_logging.file] [INFO] imported ABC123" in text

    def test_second_call_adds_no_handlers(self, log_dir):
        first = logging_config.setup_logger("test_logging.once", "once.log")
        count = len(first.handlers)
        second = logging_config.setup_logger("test_logging.once", "once.log")
        assert second is first
        assert len(second.handlers) == count == 2

    def test_does_not_propagate(self, log_dir):
        logger = logging_config.setup_logger("test_logging.root", "root.log")
        assert logger.propagate is False

    def test_children_reach_root_handlers(self, log_dir):
        logging_config.setup_logger("test_logging.parent", "parent.log")
        logging.getLogger("test_logging.parent.child").warning("from child")
        for handler in logging.getLogger("test_logging.parent").handlers:
            handler.flush()

        text = (log_dir / "parent.log").read_text(encoding="utf-8")
        assert "[test_logging.parent.child] [WARNING] from child" in text

    def test_level_argument(self, log_dir):
        logger = logging_config.setup_logger("test_logging.debug", "debug.log", level="debug")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)

    def test_level_defaults_to_setting(self, log_dir, monkeypatch):
        monkeypatch.setattr(logging_config.settings, "LOG_LEVEL", "WARNING")
        logger = logging_config.setup_logger("test_logging.default", "default.log")
        assert logger.level == logging.WARNING

    def test_unknown_level_rejected(self, log_dir):
        with pytest.raises(ValueError, match="Unknown log level"):
            logging_config.setup_logger("test_logging.bad", "bad.log", level="LOUD")
        assert "test_logging.bad" not in logging_config._configured


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------


class TestConfigureLogging:

    def test_configures_every_root(self, log_dir, monkeypatch):
        monkeypatch.setattr(logging_config, "LOG_ROOTS", {
            "test_logging.svc": "svc.log",
            "test_logging.http": "http.log",
        })
        loggers = logging_config.configure_logging()
        assert set(loggers) == {"test_logging.svc", "test_logging.http"}
        assert (log_dir / "svc.log").exists()
        assert (log_dir / "http.log").exists()

    def test_is_idempotent(self, log_dir, monkeypatch):
        monkeypatch.setattr(logging_config, "LOG_ROOTS", {"test_logging.again": "again.log"})
        first = logging_config.configure_logging()
        second = logging_config.configure_logging()
        assert first == second
        assert len(second["test_logging.again"].handlers) == 2
