"""Log dashboard endpoints.

The dashboard is computed from the filtered logs, so every endpoint returns
the full dashboard after applying its change.
"""

import logging

from fastapi import APIRouter, Depends

from toolchat_server.dependencies import get_logs_state
from toolchat_server.logs import LogFilter, LogsState
from toolchat_server.models.logs import (
    LogDashboardResponse,
    LogStatsResponse,
    LogTypeResponse,
    LogVolumeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/logs", tags=["logs"])


def build_dashboard(logs_state: LogsState) -> LogDashboardResponse:
    stats = logs_state.stats()
    return LogDashboardResponse(
        filter=logs_state.filter,
        stats=LogStatsResponse(
            total_logs=stats.total_logs,
            errors=stats.errors,
            warnings=stats.warnings,
            success_rate=stats.success_rate,
        ),
        volume=[
            LogVolumeResponse(hour=bucket.hour, count=bucket.count)
            for bucket in logs_state.log_volume()
        ],
        types=[
            LogTypeResponse(
                level=share.level,
                name=share.name,
                percentage=share.percentage,
                color=share.color,
            )
            for share in logs_state.log_types()
        ],
        recent=logs_state.recent_logs(),
    )


@router.get("", response_model=LogDashboardResponse)
async def get_dashboard(
    logs_state: LogsState = Depends(get_logs_state),
) -> LogDashboardResponse:
    """Get stats, hourly volume, level distribution and recent logs."""
    return build_dashboard(logs_state)


@router.put("/filter", response_model=LogDashboardResponse)
async def set_filter(
    log_filter: LogFilter,
    logs_state: LogsState = Depends(get_logs_state),
) -> LogDashboardResponse:
    """Replace the active filter. Fields left out do not constrain."""
    logs_state.apply_filter(log_filter)
    return build_dashboard(logs_state)


@router.delete("/filter", response_model=LogDashboardResponse)
async def clear_filter(
    logs_state: LogsState = Depends(get_logs_state),
) -> LogDashboardResponse:
    """Remove the active filter."""
    logs_state.apply_filter(LogFilter())
    return build_dashboard(logs_state)
