"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that hand the objects
created during application startup to the routers.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from toolchat_server.config import ToolChatSettings
from toolchat_server.conversation import ConversationLoop
from toolchat_server.logs import LogsState
from toolchat_server.theme import ThemeService
from toolchat_server.tools import ToolRegistry


@lru_cache
def get_settings() -> ToolChatSettings:
    """Get the application settings instance.

    Cached so the same settings instance is reused across all requests.
    Settings are loaded from environment variables with the TOOLCHAT_ prefix.

    Returns:
        ToolChatSettings: The application configuration settings.
    """
    return ToolChatSettings()


def _get_state(request: Request, name: str, description: str):
    if not hasattr(request.app.state, name):
        raise HTTPException(
            status_code=503,
            detail=f"{description} not initialized",
        )
    return getattr(request.app.state, name)


def get_conversation(request: Request) -> ConversationLoop:
    """Get the conversation loop from app state.

    Raises:
        HTTPException: If the app has not finished startup (503).
    """
    return _get_state(request, "conversation", "Conversation")


def get_tool_registry(request: Request) -> ToolRegistry:
    """Get the tool registry from app state.

    Raises:
        HTTPException: If the app has not finished startup (503).
    """
    return _get_state(request, "tool_registry", "Tool registry")


def get_logs_state(request: Request) -> LogsState:
    """Get the log dashboard state from app state.

    Raises:
        HTTPException: If the app has not finished startup (503).
    """
    return _get_state(request, "logs_state", "Log state")


def get_theme_service(request: Request) -> ThemeService:
    """Get the theme service from app state.

    Raises:
        HTTPException: If the app has not finished startup (503).
    """
    return _get_state(request, "theme_service", "Theme service")
