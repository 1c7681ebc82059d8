"""Process-wide logging to the console and, optionally, to a file.

Messages use ``%``-style formatting: ``info("found %d checks", 3)``.
Two output formats are supported: a human readable ``normal`` format and
one JSON object per line.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

NORMAL_FORMAT = "normal"
JSON_FORMAT = "json"

_TRACE = 5
_PANIC = 60

logging.addLevelName(_TRACE, "TRACE")
logging.addLevelName(_PANIC, "PANIC")


class LogLevel(StrEnum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    PANIC = "panic"


# Names accepted by set_log_level, compared upper-cased.
_LEVELS = {
    "TRACE": _TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "PANIC": _PANIC,
}

_JSON_NAMES = {
    _TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
    _PANIC: "panic",
}

_ABBREVIATIONS = {
    _TRACE: "TRC",
    logging.DEBUG: "DBG",
    logging.INFO: "INF",
    logging.WARNING: "WRN",
    logging.ERROR: "ERR",
    _PANIC: "PNC",
}

_BOLD_RED = "\x1b[1m\x1b[31m"
_COLORS = {
    _TRACE: "\x1b[35m",
    logging.DEBUG: "\x1b[33m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[31m",
    logging.ERROR: _BOLD_RED,
    _PANIC: _BOLD_RED,
}
_DARK_GRAY = "\x1b[90m"
_CYAN = "\x1b[36m"
_RESET = "\x1b[0m"

_logger = logging.getLogger("chainbench")
_logger.propagate = False
_logger.addHandler(logging.NullHandler())


def _console_time(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def _rfc3339(moment: datetime) -> str:
    return moment.isoformat(timespec="seconds")


def _record_time(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created).astimezone()


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "fields", None) or {}


class _ConsoleFormatter(logging.Formatter):
    """Single-line ``<time> <LVL> <message> key=value`` output."""

    def __init__(self, time_format: Callable[[datetime], str], no_color: bool) -> None:
        super().__init__()
        self._time_format = time_format
        self._no_color = no_color

    def _paint(self, text: str, color: str) -> str:
        if self._no_color or not color:
            return text
        return f"{color}{text}{_RESET}"

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            self._paint(self._time_format(_record_time(record)), _DARK_GRAY),
            self._paint(_ABBREVIATIONS.get(record.levelno, "???"), _COLORS.get(record.levelno, "")),
            record.getMessage(),
        ]
        for key, value in _record_fields(record).items():
            color = _BOLD_RED if key == "error" else _CYAN
            parts.append(f"{self._paint(key + '=', color)}{value}")
        return " ".join(parts)


class _JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {"level": _JSON_NAMES.get(record.levelno, record.levelname.lower())}
        payload.update(_record_fields(record))
        payload["time"] = _rfc3339(_record_time(record))
        payload["message"] = record.getMessage()
        return json.dumps(payload, ensure_ascii=False, default=str)


def _render(msg: str, args: tuple[Any, ...]) -> str:
    return msg % args if args else msg


def _log(level: int, msg: str, args: tuple[Any, ...], fields: dict[str, Any] | None = None) -> None:
    _logger.log(level, msg, *args, extra={"fields": fields or {}})


def _replace_handlers(handlers: list[logging.Handler]) -> None:
    for old in list(_logger.handlers):
        _logger.removeHandler(old)
        old.close()
    for handler in handlers:
        _logger.addHandler(handler)


def set_log_level(level_name: LogLevel | str) -> None:
    """Set the minimum level that is emitted.

    Accepted names (any case): trace, debug, info, warning, error, panic.
    """
    level = _LEVELS.get(str(level_name).upper())
    if level is None:
        raise ValueError(f"log level '{level_name}' does not exist")
    _logger.setLevel(level)


def init_logger(log_level: LogLevel | str, log_format: str, file_path: str, no_color: bool) -> None:
    """Configure the global logger's level, format and outputs."""
    file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8") if file_path else None
    try:
        set_log_level(log_level)
        console_formatter: logging.Formatter
        file_formatter: logging.Formatter
        if log_format == NORMAL_FORMAT:
            console_formatter = _ConsoleFormatter(_console_time, no_color)
            file_formatter = _ConsoleFormatter(_rfc3339, True)
        elif log_format == JSON_FORMAT:
            console_formatter = _JsonFormatter()
            file_formatter = _JsonFormatter()
        else:
            raise ValueError(f"log format '{log_format}' is not supported (json, normal)")
    except Exception:
        if file_handler is not None:
            file_handler.close()
        raise

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    handlers: list[logging.Handler] = [console_handler]
    if file_handler is not None:
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)
    _replace_handlers(handlers)


def debug(msg: str, *args: Any) -> None:
    _log(logging.DEBUG, msg, args)


def info(msg: str, *args: Any) -> None:
    _log(logging.INFO, msg, args)


def warn(msg: str, *args: Any) -> None:
    _log(logging.WARNING, msg, args)


def error(err: BaseException | None, msg: str, *args: Any) -> BaseException | None:
    """Log ``msg`` as an error, the error itself at debug level; return ``err``."""
    _log(logging.ERROR, msg, args)
    if err is not None:
        _log(logging.DEBUG, msg, args, {"error": str(err)})
    return err


def warn_error(err: BaseException | None, msg: str) -> BaseException | None:
    """Log ``msg`` as a warning, the error itself at debug level; return ``err``."""
    _log(logging.WARNING, msg, ())
    if err is not None:
        _log(logging.DEBUG, msg, (), {"error": str(err)})
    return err


def panic(msg: str, *args: Any) -> None:
    """Log ``msg`` at panic level and raise ``RuntimeError`` with it."""
    _log(_PANIC, msg, args)
    raise RuntimeError(_render(msg, args))


def fetching_finished(msg: str, icon: str) -> None:
    info("%s\tFetching %s Finished", icon, msg)


@dataclass(frozen=True)
class ContextLogger:
    """Logger that tags every record with a ``context`` field."""

    context: str

    def _fields(self, err: BaseException | None = None) -> dict[str, Any]:
        fields: dict[str, Any] = {"context": self.context}
        if err is not None:
            fields["error"] = str(err)
        return fields

    def debug(self, msg: str, *args: Any) -> None:
        _log(logging.DEBUG, msg, args, self._fields())

    def info(self, msg: str, *args: Any) -> None:
        _log(logging.INFO, msg, args, self._fields())

    def warn(self, msg: str, *args: Any) -> None:
        _log(logging.WARNING, msg, args, self._fields())

    def error(self, err: BaseException | None, msg: str, *args: Any) -> BaseException | None:
        _log(logging.ERROR, msg, args, self._fields(err))
        return err

    def panic(self, msg: str, *args: Any) -> None:
        _log(_PANIC, msg, args, self._fields())
        raise RuntimeError(_render(msg, args))