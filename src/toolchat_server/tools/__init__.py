"""Tool definitions, schema rendering, and the tool registry.

Feature modules describe their capabilities as ToolDefinitions and register
them in a ToolRegistry at startup; the conversation loop advertises the
registered schemas to the model and executes the tools it asks for.
"""

from toolchat_server.tools.registry import ToolRegistry
from toolchat_server.tools.types import (
    ParameterSpec,
    ToolArgumentError,
    ToolDefinition,
    ToolParameters,
)

__all__ = [
    "ParameterSpec",
    "ToolArgumentError",
    "ToolDefinition",
    "ToolParameters",
    "ToolRegistry",
]
