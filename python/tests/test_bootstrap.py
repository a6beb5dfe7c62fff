"""
Test module for clog.bootstrap
"""

import pytest

import clog
from clog import ConfigError, Level, Logger, OutputFormat, PrintSource
from clog.logging import _writer_lock


class TestInit:

    def test_init_configures_default(self, default_logger, buf):
        log = clog.init(level="info", prefix="svc", output_format="json", pid=True)
        assert log is default_logger
        assert log.level is Level.INFO
        assert log.prefix == "svc"
        assert log.output_format is OutputFormat.JSON
        assert log._print_pid is True

    def test_none_leaves_setting_alone(self, logger):
        logger.set_prefix("keep")
        clog.init(logger=logger, color=True)
        assert logger.prefix == "keep"
        assert logger._color is True
        clog.init(logger=logger, color=False)
        assert logger._color is False

    def test_own_lock(self, logger):
        clog.init(logger=logger, own_lock=True)
        assert logger._lock is not _writer_lock

    def test_bad_level(self, logger):
        with pytest.raises(ConfigError):
            clog.init(logger=logger, level="verbose")


class TestConfigureFromEnv:

    def test_reads_clog_vars(self, logger, buf):
        env = {
            "CLOG_LEVEL": "warn",
            "CLOG_FORMAT": "json",
            "CLOG_PREFIX": "api",
            "CLOG_DIFFS": "yes",
            "CLOG_PID": "0",
            "CLOG_UUID": "trace-1",
            "CLOG_SOURCE": "full",
            "UNRELATED": "x",
        }
        log = clog.configure_from_env(logger=logger, environ=env)
        assert log is logger
        assert logger.level is Level.WARN
        assert logger.output_format is OutputFormat.JSON
        assert logger.prefix == "api"
        assert logger.uuid == "trace-1"
        assert logger._print_diffs is True
        assert logger._print_pid is False
        assert logger._print_source is PrintSource.FULL_PATH

    def test_empty_environment_changes_nothing(self, logger):
        before = vars(logger).copy()
        clog.configure_from_env(logger=logger, environ={})
        assert vars(logger) == before

    def test_bad_boolean(self, logger):
        with pytest.raises(ConfigError, match="CLOG_COLOR"):
            clog.configure_from_env(logger=logger, environ={"CLOG_COLOR": "maybe"})

    def test_defaults_to_os_environ(self, default_logger, monkeypatch):
        monkeypatch.setenv("CLOG_TIME_FORMAT", "%H")
        monkeypatch.setenv("CLOG_COLOR", "on")
        clog.configure_from_env()
        assert default_logger._time_format == "%H"
        assert default_logger._color is True

    def test_fresh_logger_ignores_environment(self, monkeypatch):
        monkeypatch.setenv("CLOG_LEVEL", "error")
        assert Logger().level is Level.DEBUG
