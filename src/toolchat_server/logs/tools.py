"""Tools that let the model filter the log dashboard."""

from typing import Any

from toolchat_server.logs.state import LogsState
from toolchat_server.logs.types import LOG_LEVELS, LogFilter
from toolchat_server.tools import (
    ParameterSpec,
    ToolDefinition,
    ToolParameters,
    ToolRegistry,
)


def register_log_tools(registry: ToolRegistry, logs_state: LogsState) -> None:
    """Register the log filtering tools.

    Each filter tool replaces the whole filter, so filtering by service
    drops an earlier level filter.

    Args:
        registry: The registry to add the tools to
        logs_state: The log state the tools filter
    """

    def filter_by_level(args: dict[str, Any]) -> str:
        logs_state.apply_filter(LogFilter(level=args["level"]))
        return f"Filtered logs to show only {args['level']} level logs"

    def filter_by_service(args: dict[str, Any]) -> str:
        logs_state.apply_filter(LogFilter(service=args["service"]))
        return f"Filtered logs to show only logs from service: {args['service']}"

    def filter_by_message(args: dict[str, Any]) -> str:
        logs_state.apply_filter(LogFilter(message=args["message"]))
        return f'Filtered logs to show only logs containing: "{args["message"]}"'

    def clear_filter(args: dict[str, Any]) -> str:
        logs_state.apply_filter(LogFilter())
        return "Cleared all log filters. All logs are now visible."

    tools = [
        ToolDefinition(
            name="filter_logs_by_level",
            description=(
                "Filter logs by log level. Only logs matching the specified level "
                "will be shown. This affects all log statistics, charts, and recent "
                "logs display."
            ),
            execute=filter_by_level,
            parameters=ToolParameters(
                (
                    ParameterSpec(
                        name="level",
                        description=(
                            "The log level to filter by. Must be one of: "
                            "INFO, WARN, ERROR, or DEBUG."
                        ),
                        enum=LOG_LEVELS,
                    ),
                )
            ),
        ),
        ToolDefinition(
            name="filter_logs_by_service",
            description=(
                "Filter logs by service name. Only logs from the specified service "
                "will be shown. This affects all log statistics, charts, and recent "
                'logs display. Use exact service name (e.g., "api-service", '
                '"db-service", "cache-service").'
            ),
            execute=filter_by_service,
            parameters=ToolParameters(
                (
                    ParameterSpec(
                        name="service",
                        description=(
                            "The exact service name to filter by (e.g., "
                            '"api-service", "db-service", "cache-service", '
                            '"worker-service")'
                        ),
                    ),
                )
            ),
        ),
        ToolDefinition(
            name="filter_logs_by_message",
            description=(
                "Filter logs by message content. Only logs whose message contains "
                "the specified text will be shown. The search is case-insensitive "
                "and matches partial text. This affects all log statistics, charts, "
                "and recent logs display."
            ),
            execute=filter_by_message,
            parameters=ToolParameters(
                (
                    ParameterSpec(
                        name="message",
                        description=(
                            "The text to search for in log messages. "
                            "Case-insensitive partial match. Only provide actual "
                            "search terms, not placeholder text."
                        ),
                    ),
                )
            ),
        ),
        ToolDefinition(
            name="clear_log_filter",
            description=(
                "Clear all log filters. This will reset the log view to show all "
                "logs without any filtering applied. Use this when you want to see "
                "the complete log dataset."
            ),
            execute=clear_filter,
        ),
    ]

    for tool in tools:
        registry.register_tool(tool.name, tool)
