import logging
import os
import sys

import pytest
import yaml

import vieta.logging
from vieta.logging import (
    LOG_DIR_ENV,
    LOGGING_CONFIG,
    TerminalFormatter,
    TimestampedFileHandler,
)


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setattr(vieta.logging, "_stderr_is_tty", lambda: False)


def _record(level, message, exc_info=None):
    return logging.LogRecord(
        "vieta.pipeline", level, __file__, 1, message, None, exc_info
    )


@pytest.mark.parametrize(
    "level, prefix",
    [
        (logging.ERROR, "[ERROR]"),
        (logging.WARNING, "[ WARN]"),
        (logging.INFO, "[ INFO]"),
        (logging.DEBUG, "[DEBUG]"),
    ],
)
def test_terminal_formatter_prefixes_level(level, prefix):
    assert TerminalFormatter().format(_record(level, "message")).endswith(
        f"{prefix} message"
    )


def test_that_terminal_formatter_hides_tracebacks():
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()
    formatted = TerminalFormatter().format(
        _record(logging.ERROR, "crashed", exc_info)
    )
    assert "Traceback" not in formatted
    assert "crashed" in formatted


def test_timestamped_file_handler_uses_log_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path / "logs"))
    handler = TimestampedFileHandler("vieta-log.txt", use_log_dir_from_env=True)
    try:
        filename = os.path.basename(handler.baseFilename)
        assert os.path.dirname(handler.baseFilename) == str(tmp_path / "logs")
        assert filename.startswith("vieta-log-")
        assert filename.endswith(".txt")
    finally:
        handler.close()


def test_that_logging_config_is_valid_yaml_with_file_and_terminal_handlers():
    with open(LOGGING_CONFIG, encoding="utf-8") as conf_file:
        config_dict = yaml.safe_load(conf_file)
    assert set(config_dict["handlers"]) == {"file", "terminal"}
    assert config_dict["handlers"]["terminal"]["level"] == "WARNING"
    assert config_dict["root"]["handlers"] == ["file", "terminal"]
