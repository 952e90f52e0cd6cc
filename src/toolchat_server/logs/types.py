"""Data types for log entries, filters, and dashboard aggregates."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["INFO", "WARN", "ERROR", "DEBUG"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


def _as_utc(value: datetime) -> datetime:
    # Timestamps without an offset are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class LogEntry(BaseModel):
    """A single log line.

    Timestamps are accepted as epoch milliseconds, epoch seconds, or
    ISO 8601 strings and are normalized to UTC.
    """

    timestamp: datetime
    level: LogLevel
    service: str
    message: str

    model_config = ConfigDict(frozen=True)

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return _as_utc(value)


class LogFilter(BaseModel):
    """Constraints applied to the log dashboard.

    level, service and timestamp must match exactly; message matches any
    entry whose message contains the text, ignoring case. Unset fields do
    not constrain.
    """

    level: LogLevel | None = Field(default=None, description="Exact log level")
    service: str | None = Field(default=None, description="Exact service name")
    message: str | None = Field(
        default=None, description="Case-insensitive substring of the message"
    )
    timestamp: datetime | None = Field(default=None, description="Exact timestamp")

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value) if value is not None else None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    def matches(self, entry: LogEntry) -> bool:
        """Check whether a log entry satisfies every set constraint."""
        if self.level is not None and entry.level != self.level:
            return False
        if self.service is not None and entry.service != self.service:
            return False
        if self.timestamp is not None and entry.timestamp != self.timestamp:
            return False
        if (
            self.message is not None
            and self.message.lower() not in entry.message.lower()
        ):
            return False
        return True


@dataclass
class LogVolumeBucket:
    """Number of log entries within one hour of the day (UTC)."""

    hour: str
    count: int


@dataclass
class LogTypeShare:
    """Share of one log level among the filtered entries."""

    level: str
    name: str
    percentage: int
    color: str


@dataclass
class LogStats:
    """Headline numbers for the filtered entries."""

    total_logs: int
    errors: int
    warnings: int
    success_rate: float
