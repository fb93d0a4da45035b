"""
core/log.py - In-memory activity log

Append-only log shown in the console's log panel. Every entry is mirrored to
the ``ddbconsole.activity`` Python logger, so a ``--log-file`` run keeps a
copy on disk.

Writers and readers never block the main loop: a contended lock drops the
write or returns no entries for this frame.

Usage:
    log = AppLog()
    log.info("Loading tables in us-east-1...")
    for entry in log.tail(5):
        print(entry.timestamp, entry.level.value, entry.message)
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

activity_logger = logging.getLogger("ddbconsole.activity")

# Seconds a writer waits for the lock before dropping the entry
WRITE_LOCK_TIMEOUT = 0.05


class LogLevel(Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def logging_level(self) -> int:
        return {
            LogLevel.INFO: logging.INFO,
            LogLevel.WARNING: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
        }[self]


@dataclass(frozen=True)
class LogEntry:
    """Single log line"""

    level: LogLevel
    message: str
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S"))


class AppLog:
    """Bounded append-only activity log

    Args:
        capacity: Oldest entries are discarded beyond this size
    """

    def __init__(self, capacity: int = 500):
        self._entries: deque[LogEntry] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def append(self, level: LogLevel, message: str) -> bool:
        """Record an entry

        Returns:
            False when the lock could not be acquired and the entry was dropped
        """
        activity_logger.log(level.logging_level, message)

        if not self._lock.acquire(timeout=WRITE_LOCK_TIMEOUT):
            return False
        try:
            self._entries.append(LogEntry(level=level, message=message))
        finally:
            self._lock.release()
        return True

    def info(self, message: str) -> bool:
        return self.append(LogLevel.INFO, message)

    def warning(self, message: str) -> bool:
        return self.append(LogLevel.WARNING, message)

    def error(self, message: str) -> bool:
        return self.append(LogLevel.ERROR, message)

    def snapshot(self) -> tuple[LogEntry, ...]:
        """All entries, or an empty tuple if the log is busy right now"""
        if not self._lock.acquire(blocking=False):
            return ()
        try:
            return tuple(self._entries)
        finally:
            self._lock.release()

    def tail(self, count: int) -> tuple[LogEntry, ...]:
        """Most recent ``count`` entries (oldest first)"""
        if count <= 0:
            return ()
        entries = self.snapshot()
        return entries[-count:]

    def __len__(self) -> int:
        return len(self.snapshot())
