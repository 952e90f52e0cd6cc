"""Pydantic models for the log dashboard endpoints."""

from pydantic import BaseModel, Field

from toolchat_server.logs import LogEntry, LogFilter


class LogStatsResponse(BaseModel):
    total_logs: int
    errors: int
    warnings: int
    success_rate: float = Field(description="Share of non-error logs, in percent")


class LogVolumeResponse(BaseModel):
    hour: str = Field(description="Hour of the day (UTC), '00' to '23'")
    count: int


class LogTypeResponse(BaseModel):
    level: str
    name: str
    percentage: int
    color: str = Field(description="CSS color class used by the dashboard")


class LogDashboardResponse(BaseModel):
    """Everything the log dashboard displays, computed from filtered logs."""

    filter: LogFilter
    stats: LogStatsResponse
    volume: list[LogVolumeResponse]
    types: list[LogTypeResponse]
    recent: list[LogEntry]
