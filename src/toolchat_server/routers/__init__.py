"""FastAPI routers for API endpoints.

This package contains all route handlers organized by resource type.
Each router module defines endpoints for one area (health, chat, tools,
logs, theme).
"""

from toolchat_server.routers import chat, health, logs, theme, tools

__all__ = ["chat", "health", "logs", "theme", "tools"]
