"""Pytest configuration and shared fixtures for toolchat-server tests.

This module provides common fixtures used across all test modules,
including sample log data, test app creation and async client setup.
"""

import json

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from toolchat_server import create_app
from toolchat_server.config import ToolChatSettings
from toolchat_server.logs import LogEntry

SAMPLE_LOGS = [
    {
        "timestamp": "2024-01-15T14:32:15Z",
        "level": "INFO",
        "service": "api-service",
        "message": "User authentication successful",
    },
    {
        "timestamp": "2024-01-15T14:31:42Z",
        "level": "WARN",
        "service": "db-service",
        "message": "Connection pool at 80% capacity",
    },
    {
        "timestamp": "2024-01-15T14:30:18Z",
        "level": "ERROR",
        "service": "cache-service",
        "message": "Failed to connect to Redis cluster",
    },
    {
        "timestamp": "2024-01-15T14:29:55Z",
        "level": "INFO",
        "service": "api-service",
        "message": "Request processed in 45ms",
    },
    {
        "timestamp": "2024-01-15T09:28:33Z",
        "level": "INFO",
        "service": "worker-service",
        "message": "Background job completed successfully",
    },
    {
        "timestamp": "2024-01-15T09:27:12Z",
        "level": "WARN",
        "service": "api-service",
        "message": "Rate limit approaching threshold",
    },
    {
        "timestamp": "2024-01-15T09:26:08Z",
        "level": "DEBUG",
        "service": "db-service",
        "message": "Query executed in 12ms",
    },
    {
        "timestamp": "2024-01-15T03:25:41Z",
        "level": "ERROR",
        "service": "api-service",
        "message": "Invalid request payload received",
    },
]


@pytest.fixture
def sample_log_entries():
    """Sample log entries as LogEntry models."""
    return [LogEntry(**entry) for entry in SAMPLE_LOGS]


@pytest.fixture
def test_settings(tmp_path):
    """Create test settings with an isolated data directory.

    The data directory contains a logs.json file with SAMPLE_LOGS.

    Args:
        tmp_path: Pytest fixture providing a temporary directory.

    Returns:
        ToolChatSettings: Settings instance configured for testing.
    """
    (tmp_path / "logs.json").write_text(json.dumps(SAMPLE_LOGS), encoding="utf-8")

    return ToolChatSettings(
        host="127.0.0.1",
        port=8000,
        ollama_host="http://localhost:11434",
        model="functiongemma:270m",
        max_tool_rounds=10,
        request_timeout=5.0,
        data_dir=str(tmp_path),
        logs_file="logs.json",
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance."""
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
