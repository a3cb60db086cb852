"""Simulation log — a structured record of what each run did.

The engine never keeps state between calls, so it never owns a log
either.  A caller that wants an audit trail passes in a ``Logger`` and
the engine appends to it:

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source).
- **Logger** — an append-only log with filtering and clearing.  Given a
  capacity, it keeps only the newest entries, so a long-lived caller
  such as the web app holds a bounded amount of history.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Filter returns a list, not a generator** — the log is typically
      small and callers usually want to iterate multiple times.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The part of the simulator that produced it (e.g. "SSTF").

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly view of the entry."""
        return {"level": self.level.name, "message": self.message, "source": self.source}


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self, *, capacity: int | None = None) -> None:
        """Create an empty logger.

        Args:
            capacity: Most entries to keep; older ones are dropped
                first.  ``None`` keeps everything.

        """
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int | None:
        """Return the entry limit, or None if unbounded."""
        return self._entries.maxlen

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry to the log."""
        self._entries.append(LogEntry(level=level, message=message, source=source))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()

    def render(self, *, min_level: LogLevel = LogLevel.DEBUG) -> str:
        """Return entries at or above *min_level*, one per line."""
        return "\n".join(str(e) for e in self.filter(min_level=min_level))

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
