"""Tests for logger configuration and builder"""

import sys

import pytest

from leveled_logger import (
    ConsoleLogger,
    FileLogger,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    NilLogger,
)
from leveled_logger.formatters import TextFormatter

from tests.helpers import RecordingLogger


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.console_output is True
        assert config.console_stream == "stdout"
        assert config.include_timestamp is False
        assert config.log_file is None

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.console_stream == "stderr"
        assert config.include_timestamp is True

    def test_quiet_config(self):
        assert LoggerConfig.quiet_config().console_output is False

    def test_log_file_converted_to_path(self, tmp_path):
        config = LoggerConfig(log_file=str(tmp_path / "app.log"))
        assert config.log_file == tmp_path / "app.log"

    def test_invalid_stream(self):
        with pytest.raises(ValueError):
            LoggerConfig(console_stream="stdlog")

    def test_invalid_file_mode(self):
        with pytest.raises(ValueError):
            LoggerConfig(file_mode="r")

    def test_empty_timestamp_format(self):
        with pytest.raises(ValueError):
            LoggerConfig(include_timestamp=True, timestamp_format="")


class TestLoggerBuilder:
    """Test LoggerBuilder."""

    def test_default_build(self, capsys):
        logger = LoggerBuilder().build()
        assert isinstance(logger, Logger)
        assert len(logger.loggers) == 1
        logger.debug("built")
        assert capsys.readouterr().out == "[Debug] built\n"

    def test_stderr_console(self, capsys):
        LoggerBuilder().with_console("stderr").build().error("oops")
        captured = capsys.readouterr()
        assert captured.err == "[Error] oops\n"
        assert captured.out == ""

    def test_invalid_console_stream_leaves_builder_unchanged(self, capsys):
        builder = LoggerBuilder().with_console("stderr")
        with pytest.raises(ValueError):
            builder.with_console("stdlog")

        builder.build().error("still stderr")
        captured = capsys.readouterr()
        assert captured.err == "[Error] still stderr\n"
        assert captured.out == ""

    def test_invalid_file_mode_leaves_builder_unchanged(self, tmp_path):
        builder = LoggerBuilder().without_console()
        with pytest.raises(ValueError):
            builder.with_file(tmp_path / "app.log", mode="r")

        logger = builder.build()
        assert isinstance(logger.loggers[0], NilLogger)
        assert not (tmp_path / "app.log").exists()

    def test_close_keeps_console_streams_open(self):
        LoggerBuilder().build().close()
        LoggerBuilder().with_console("stderr").build().close()
        assert sys.stdout.closed is False
        assert sys.stderr.closed is False

    def test_quiet_build_is_nil(self, capsys):
        logger = LoggerBuilder(LoggerConfig.quiet_config()).build()
        assert isinstance(logger.loggers[0], NilLogger)
        logger.emergency("silent")
        assert capsys.readouterr().out == ""

    def test_config_not_mutated(self):
        config = LoggerConfig.default()
        LoggerBuilder(config).without_console().with_timestamps()
        assert config.console_output is True
        assert config.include_timestamp is False

    def test_children_order(self, tmp_path):
        custom = RecordingLogger()
        logger = (LoggerBuilder()
            .with_file(tmp_path / "app.log")
            .add_logger(custom)
            .build())

        assert [type(child) for child in logger.loggers] == [
            ConsoleLogger, FileLogger, RecordingLogger
        ]
        logger.close()

    def test_file_and_custom_receive_call(self, tmp_path):
        path = tmp_path / "app.log"
        custom = RecordingLogger()
        logger = (LoggerBuilder()
            .without_console()
            .with_file(path, mode="w")
            .add_logger(custom)
            .build())

        logger.warning("low memory", ["free=12MB"])
        logger.close()

        assert path.read_text(encoding="utf-8") == "[Warning] low memory, free=12MB\n"
        assert len(custom.calls) == 1

    def test_timestamps(self, tmp_path):
        logger = (LoggerBuilder()
            .without_console()
            .with_file(tmp_path / "app.log")
            .with_timestamps("%Y")
            .build())

        formatter = logger.loggers[0].formatter
        assert isinstance(formatter, TextFormatter)
        assert formatter.timestamp_format == "%Y"
        logger.close()
