import logging
import os
import pathlib
import sys
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import Any

LOGGING_CONFIG = pathlib.Path(__file__).parent.resolve() / "logger.conf"
LOG_DIR_ENV = "VIETA_LOG_DIR"

_FORMATS_ANSI = {
    logging.FATAL: "\033[31m[FATAL]\033[0m {message}",
    logging.ERROR: "\033[31m[ERROR]\033[0m {message}",
    logging.WARNING: "\033[33m[ WARN]\033[0m {message}",
    logging.INFO: "\033[34m[ INFO]\033[0m {message}",
    logging.DEBUG: "\033[36m[DEBUG]\033[0m {message}",
    logging.NOTSET: "\033[0m        {message}",
}

_FORMATS_NO_COLOR = {
    logging.FATAL: "[FATAL] {message}",
    logging.ERROR: "[ERROR] {message}",
    logging.WARNING: "[ WARN] {message}",
    logging.INFO: "[ INFO] {message}",
    logging.DEBUG: "[DEBUG] {message}",
    logging.NOTSET: "        {message}",
}


def _stderr_is_tty() -> bool:
    try:
        return os.isatty(sys.stderr.fileno())
    except (AttributeError, OSError, ValueError):
        # pytest and other captures replace stderr with objects without a fd
        return False


class TimestampedFileHandler(logging.FileHandler):
    """File handler writing to <name>-<timestamp><ext>, placed in the
    directory given by VIETA_LOG_DIR when use_log_dir_from_env is set."""

    def __init__(self, filename: str, *args: Any, **kwargs: Any) -> None:
        timestamp = f"{datetime.now().isoformat(timespec='minutes')}"
        filename, extension = os.path.splitext(filename)
        filename = f"{filename}-{timestamp}{extension}"

        if kwargs.pop("use_log_dir_from_env", False) and LOG_DIR_ENV in os.environ:
            log_dir = os.environ[LOG_DIR_ENV]
            filename = log_dir + "/" + filename
            Path(filename).parent.mkdir(exist_ok=True, parents=True)

        super().__init__(filename, *args, **kwargs)


class TerminalFormatter(logging.Formatter):
    """Formats for terminal output

    Specifically, do not output information that is useless or scary for the
    user, like exception tracebacks.

    """

    def __init__(self) -> None:
        super().__init__("%(message)s")
        self._formats = _FORMATS_ANSI if _stderr_is_tty() else _FORMATS_NO_COLOR

    def formatMessage(self, record: logging.LogRecord) -> str:
        fmt = self._formats.get(record.levelno, self._formats[logging.NOTSET])
        return fmt.format(message=record.message)

    @staticmethod
    def formatException(
        _: tuple[type[BaseException], BaseException, TracebackType | None]
        | tuple[None, None, None],
    ) -> str:
        return ""


__all__ = [
    "LOGGING_CONFIG",
    "LOG_DIR_ENV",
    "TerminalFormatter",
    "TimestampedFileHandler",
]
