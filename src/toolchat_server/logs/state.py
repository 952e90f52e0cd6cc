"""Log loading, filtering, and aggregation for the dashboard."""

import json
import logging
import math
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from toolchat_server.logs.types import (
    LOG_LEVELS,
    LogEntry,
    LogFilter,
    LogStats,
    LogTypeShare,
    LogVolumeBucket,
)

logger = logging.getLogger(__name__)

LEVEL_NAMES = {"INFO": "Info", "WARN": "Warning", "ERROR": "Error", "DEBUG": "Debug"}
LEVEL_COLORS = {
    "INFO": "bg-blue-500",
    "WARN": "bg-yellow-500",
    "ERROR": "bg-red-500",
    "DEBUG": "bg-gray-500",
}

_entries_adapter = TypeAdapter(list[LogEntry])


class LogLoadError(Exception):
    """Raised when a log file exists but cannot be parsed."""


def load_log_entries(path: Path) -> list[LogEntry]:
    """Load log entries from a JSON file holding a list of entries.

    Args:
        path: Path to the JSON file

    Returns:
        list[LogEntry]: The entries, or an empty list if the file is missing

    Raises:
        LogLoadError: If the file cannot be read, is not valid UTF-8 JSON, or
            entries are malformed
    """
    if not path.exists():
        logger.warning(f"Log file not found: {path}, starting with no logs")
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        entries = _entries_adapter.validate_python(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise LogLoadError(f"Failed to load logs from {path}: {e}") from e

    logger.info(f"Loaded {len(entries)} log entries from {path}")
    return entries


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class LogsState:
    """The log dataset and the filter currently applied to it.

    All aggregates are computed from the filtered entries.
    """

    def __init__(self, entries: list[LogEntry] | None = None) -> None:
        self._entries: list[LogEntry] = list(entries or [])
        self._filter = LogFilter()

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    @property
    def filter(self) -> LogFilter:
        return self._filter

    def apply_filter(self, log_filter: LogFilter) -> None:
        """Replace the current filter. An empty filter shows all logs."""
        self._filter = log_filter
        logger.info(
            f"Applied log filter: {log_filter.model_dump(exclude_none=True) or 'none'}"
        )

    def filtered_logs(self) -> list[LogEntry]:
        if self._filter.is_empty():
            return list(self._entries)
        return [entry for entry in self._entries if self._filter.matches(entry)]

    def log_volume(self) -> list[LogVolumeBucket]:
        """Count filtered entries per hour of the day, all 24 hours included."""
        counts = {f"{hour:02d}": 0 for hour in range(24)}
        for entry in self.filtered_logs():
            counts[f"{entry.timestamp.hour:02d}"] += 1
        return [
            LogVolumeBucket(hour=hour, count=count) for hour, count in counts.items()
        ]

    def log_types(self) -> list[LogTypeShare]:
        """Share of each log level, highest percentage first."""
        counts = {level: 0 for level in LOG_LEVELS}
        for entry in self.filtered_logs():
            counts[entry.level] += 1

        total = sum(counts.values())
        shares = [
            LogTypeShare(
                level=level,
                name=LEVEL_NAMES[level],
                percentage=_round_half_up(count / total * 100) if total else 0,
                color=LEVEL_COLORS[level],
            )
            for level, count in counts.items()
        ]
        return sorted(shares, key=lambda share: share.percentage, reverse=True)

    def stats(self) -> LogStats:
        logs = self.filtered_logs()
        total = len(logs)
        errors = sum(1 for entry in logs if entry.level == "ERROR")
        warnings = sum(1 for entry in logs if entry.level == "WARN")
        success_rate = (total - errors) / total * 100 if total else 0.0

        return LogStats(
            total_logs=total,
            errors=errors,
            warnings=warnings,
            success_rate=_round_half_up(success_rate * 10) / 10,
        )

    def recent_logs(self, limit: int = 10) -> list[LogEntry]:
        """Newest filtered entries first."""
        logs = sorted(
            self.filtered_logs(), key=lambda entry: entry.timestamp, reverse=True
        )
        return logs[:limit]
