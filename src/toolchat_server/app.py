"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and
configures the FastAPI application instance. The lifespan builds the tool
registry, lets the feature modules register their tools, and only then
creates the conversation loop that reads from it.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from toolchat_server import __version__
from toolchat_server.config import ToolChatSettings
from toolchat_server.conversation import ConversationLoop
from toolchat_server.logs import LogsState, load_log_entries, register_log_tools
from toolchat_server.ollama import OllamaClient
from toolchat_server.routers import chat, health, logs, theme, tools
from toolchat_server.theme import ThemeService, register_theme_tools
from toolchat_server.tools import ToolRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    Objects shared by all requests are created once at startup and stored
    in app.state.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: ToolChatSettings = app.state.settings

    app.state.ollama_client = OllamaClient(host=settings.ollama_host)
    logger.info(f"Initialized Ollama client with host: {settings.ollama_host}")

    connected = await app.state.ollama_client.check_connection()
    if connected:
        logger.info("Successfully connected to Ollama")
    else:
        logger.warning("Could not connect to Ollama - check if server is running")

    # Feature modules register their tools before the loop can be reached
    registry = ToolRegistry()
    app.state.theme_service = ThemeService(theme=settings.default_theme)
    app.state.logs_state = LogsState(load_log_entries(settings.resolved_logs_file))
    register_theme_tools(registry, app.state.theme_service)
    register_log_tools(registry, app.state.logs_state)
    app.state.tool_registry = registry
    logger.info(f"Registered {len(registry)} tools: {', '.join(registry.names())}")

    app.state.conversation = ConversationLoop(
        client=app.state.ollama_client,
        registry=registry,
        model=settings.model,
        max_tool_rounds=settings.max_tool_rounds,
        request_timeout=settings.request_timeout,
    )

    yield

    if hasattr(app.state, "ollama_client"):
        await app.state.ollama_client.close()
        logger.info("Ollama client closed")


def create_app(settings: ToolChatSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional ToolChatSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from toolchat_server.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="toolchat-server",
        description="Tool-calling chat server for local Ollama models",
        version=__version__,
        lifespan=lifespan,
    )

    # Store settings in app.state for lifespan access
    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(chat.router)
    app.include_router(tools.router)
    app.include_router(logs.router)
    app.include_router(theme.router)

    return app
