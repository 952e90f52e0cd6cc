"""Log dashboard state and the tools that filter it.

This package loads log entries from a JSON file, keeps the active filter,
and derives the dashboard aggregates (hourly volume, level distribution,
stats, recent entries) from the filtered entries.
"""

from toolchat_server.logs.state import LogLoadError, LogsState, load_log_entries
from toolchat_server.logs.tools import register_log_tools
from toolchat_server.logs.types import (
    LOG_LEVELS,
    LogEntry,
    LogFilter,
    LogStats,
    LogTypeShare,
    LogVolumeBucket,
)

__all__ = [
    "LOG_LEVELS",
    "LogEntry",
    "LogFilter",
    "LogLoadError",
    "LogStats",
    "LogTypeShare",
    "LogVolumeBucket",
    "LogsState",
    "load_log_entries",
    "register_log_tools",
]
