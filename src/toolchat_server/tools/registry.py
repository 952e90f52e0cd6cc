"""Registry of tools available to the conversation loop."""

import logging
from typing import Any

from toolchat_server.tools.types import ToolDefinition

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Mapping from tool name to ToolDefinition.

    The registry is created once at startup, filled by the feature modules
    and then handed to the conversation loop. Registering a name twice
    replaces the earlier definition.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, name: str, definition: ToolDefinition) -> None:
        """Store a tool definition under a name, replacing any previous one.

        Args:
            name: The name the model uses to call the tool
            definition: The tool definition
        """
        if name in self._tools:
            logger.debug(f"Replacing tool registration: {name}")
        self._tools[name] = definition
        logger.debug(f"Registered tool: {name}")

    def get_all(self) -> list[dict[str, Any]]:
        """Get the schemas of all registered tools in registration order.

        Returns:
            list[dict]: Tool schemas in the Ollama `tools` format
        """
        return [tool.to_schema() for tool in self._tools.values()]

    def get_by_name(self, name: str) -> ToolDefinition | None:
        """Look up a tool by name.

        Returns:
            ToolDefinition | None: The definition, or None if not registered
        """
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
