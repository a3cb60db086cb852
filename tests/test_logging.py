"""Tests for the simulation log.

The log records structured entries for each run.  It is owned by the
caller and handed to the engine, never kept by it.
"""

from disk_sim.logging import LogEntry, Logger, LogLevel


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_str(self) -> None:
        """String form is ``[LEVEL] source: message``."""
        entry = LogEntry(level=LogLevel.WARNING, message="zero seek", source="SSTF")
        assert str(entry) == "[WARNING] SSTF: zero seek"

    def test_entry_dict(self) -> None:
        """The dict view names the level."""
        entry = LogEntry(level=LogLevel.INFO, message="done", source="SCAN")
        assert entry.to_dict() == {"level": "INFO", "message": "done", "source": "SCAN"}


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries(self) -> None:
        """Logged entries should be retrievable in order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="FCFS")
        logger.log(LogLevel.INFO, "second", source="SSTF")
        assert [e.message for e in logger.entries] == ["first", "second"]
        assert len(logger) == 2

    def test_entries_is_a_copy(self) -> None:
        """Mutating the returned list does not touch the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="FCFS")
        logger.entries.clear()
        assert len(logger) == 1

    def test_filter_by_level(self) -> None:
        """min_level keeps entries at or above the level."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "quiet", source="SCAN")
        logger.log(LogLevel.ERROR, "loud", source="engine")
        assert [e.message for e in logger.filter(min_level=LogLevel.WARNING)] == ["loud"]

    def test_filter_by_source(self) -> None:
        """source keeps entries from one policy only."""
        logger = Logger()
        logger.log(LogLevel.INFO, "a", source="SCAN")
        logger.log(LogLevel.INFO, "b", source="C-SCAN")
        assert [e.message for e in logger.filter(source="C-SCAN")] == ["b"]

    def test_render(self) -> None:
        """Render joins the formatted entries with newlines."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "a", source="SCAN")
        logger.log(LogLevel.INFO, "b", source="SCAN")
        assert logger.render() == "[DEBUG] SCAN: a\n[INFO] SCAN: b"
        assert logger.render(min_level=LogLevel.INFO) == "[INFO] SCAN: b"

    def test_clear(self) -> None:
        """Clear empties the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="FCFS")
        logger.clear()
        assert logger.entries == []


class TestLoggerCapacity:
    """A capped logger keeps only its newest entries."""

    def test_unbounded_by_default(self) -> None:
        """Without a capacity nothing is dropped."""
        logger = Logger()
        for i in range(50):
            logger.log(LogLevel.INFO, str(i), source="FCFS")
        assert logger.capacity is None
        assert len(logger) == 50

    def test_oldest_entries_dropped(self) -> None:
        """Past the capacity, the oldest entries go first."""
        logger = Logger(capacity=3)
        for i in range(5):
            logger.log(LogLevel.INFO, str(i), source="FCFS")
        assert len(logger) == 3
        assert [e.message for e in logger.entries] == ["2", "3", "4"]

    def test_filter_respects_capacity(self) -> None:
        """Dropped entries are gone from filters too."""
        logger = Logger(capacity=2)
        logger.log(LogLevel.ERROR, "old", source="engine")
        logger.log(LogLevel.INFO, "a", source="SCAN")
        logger.log(LogLevel.INFO, "b", source="SCAN")
        assert logger.filter(min_level=LogLevel.ERROR) == []
