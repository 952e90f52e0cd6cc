"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from toolchat_server.models.chat import (
    ChatMessageResponse,
    ChatRequest,
    ChatResponse,
    FunctionCallResponse,
    MessageListResponse,
)
from toolchat_server.models.health import HealthResponse
from toolchat_server.models.logs import LogDashboardResponse
from toolchat_server.models.theme import ThemeResponse, ThemeUpdateRequest
from toolchat_server.models.tools import ToolInfo, ToolListResponse

__all__ = [
    "ChatMessageResponse",
    "ChatRequest",
    "ChatResponse",
    "FunctionCallResponse",
    "HealthResponse",
    "LogDashboardResponse",
    "MessageListResponse",
    "ThemeResponse",
    "ThemeUpdateRequest",
    "ToolInfo",
    "ToolListResponse",
]
