"""Tools that let the model change the theme."""

from typing import Any

from toolchat_server.theme.service import THEMES, ThemeService
from toolchat_server.tools import (
    ParameterSpec,
    ToolDefinition,
    ToolParameters,
    ToolRegistry,
)


def register_theme_tools(registry: ToolRegistry, theme_service: ThemeService) -> None:
    """Register the `change_theme` tool.

    Args:
        registry: The registry to add the tool to
        theme_service: The theme state the tool changes
    """

    def change_theme(args: dict[str, Any]) -> str:
        theme_service.change_theme(args["theme"])
        return f"Theme changed to {args['theme']}"

    registry.register_tool(
        "change_theme",
        ToolDefinition(
            name="change_theme",
            description="Change the theme of the application.",
            execute=change_theme,
            parameters=ToolParameters(
                (
                    ParameterSpec(
                        name="theme",
                        type="string",
                        description="The theme to change to",
                        enum=THEMES,
                    ),
                )
            ),
        ),
    )
