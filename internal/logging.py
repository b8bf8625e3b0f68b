import json
import sys
import threading
from enum import IntEnum

from core.errors import ConfigError
from utils.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


_ALIASES = {"WARNING": LogLevel.WARN}

_logger = None
_logger_lock = threading.Lock()


def parse_level(name):
    """Map a config level name onto LogLevel, case-insensitively."""
    key = str(name).upper()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return LogLevel[key]
    except KeyError:
        raise ConfigError(f"unknown log level {name!r}", key="logging.level", value=name) from None


class StructuredLogger:
    """One JSON object per line. Writes to stderr unless given a stream."""

    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self._stream = stream

    def enabled(self, level):
        return level >= self.level

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str, ensure_ascii=False), file=self._stream or sys.stderr, flush=True)
        except Exception:
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)
        return _logger


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
