# itemguard/utils/logger.py
import datetime
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional

from itemguard.config import LOG_DEFAULT_LEVEL, LOG_MAX_RECORDS

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4 # Only fatal errors

LEVEL_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT"
}

class Logger:
    """
    Process-wide logger.
    Every entry that passes the level filter is printed, kept as a structured
    record in a bounded buffer, and handed to any registered sinks.
    """
    _instance = None
    _level = LOG_DEFAULT_LEVEL
    _records: Deque[Dict[str, Any]] = deque(maxlen=LOG_MAX_RECORDS)
    _sinks: List[Callable[[Dict[str, Any]], None]] = []

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def add_sink(cls, sink: Callable[[Dict[str, Any]], None]) -> None:
        if sink not in cls._sinks:
            cls._sinks.append(sink)

    @classmethod
    def remove_sink(cls, sink: Callable[[Dict[str, Any]], None]) -> None:
        if sink in cls._sinks:
            cls._sinks.remove(sink)

    @classmethod
    def get_records(cls, source: Optional[str] = None, level: Optional[int] = None) -> List[Dict[str, Any]]:
        """Returns buffered records, optionally filtered by source and exact level."""
        return [
            record for record in cls._records
            if (source is None or record["source"] == source)
            and (level is None or record["level"] == level)
        ]

    @classmethod
    def clear_records(cls) -> None:
        cls._records.clear()

    @classmethod
    def _log(cls, level: int, source: str, message: str, fields: Dict[str, Any]):
        if level < cls._level:
            return

        now = datetime.datetime.now()
        level_name = LEVEL_NAMES.get(level, "LOG")
        record = {
            "time": now.isoformat(timespec="seconds"),
            "level": level,
            "level_name": level_name,
            "source": source,
            "message": message,
            "fields": dict(fields),
        }
        cls._records.append(record)

        # Format: [TIME] [LEVEL] [Source] Message key=value ...
        line = f"[{now.strftime('%H:%M:%S')}] [{level_name:<5}] [{source}] {message}"
        if fields:
            line += " " + " ".join(f"{key}={value!r}" if isinstance(value, str) else f"{key}={value}"
                                   for key, value in fields.items())
        print(line)

        for sink in list(cls._sinks):
            try:
                sink(record)
            except Exception as e:
                print(f"[Logger] Error in log sink {sink!r}: {e}")

    @classmethod
    def debug(cls, source: str, message: str, **fields: Any):
        cls._log(LogLevel.DEBUG, source, message, fields)

    @classmethod
    def info(cls, source: str, message: str, **fields: Any):
        cls._log(LogLevel.INFO, source, message, fields)

    @classmethod
    def warning(cls, source: str, message: str, **fields: Any):
        cls._log(LogLevel.WARNING, source, message, fields)

    @classmethod
    def error(cls, source: str, message: str, **fields: Any):
        cls._log(LogLevel.ERROR, source, message, fields)

