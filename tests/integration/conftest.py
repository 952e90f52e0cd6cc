"""Pytest configuration for integration tests.

This module patches the Ollama client so the application's lifespan wires
a mock into the conversation loop.
"""

from unittest.mock import AsyncMock, patch

import pytest


@pytest.fixture(autouse=True)
def mock_ollama_client():
    """Mock OllamaClient for all integration tests.

    Tests set `mock_ollama_client.chat.side_effect` to the sequence of
    model responses a turn should receive.
    """
    with patch("toolchat_server.app.OllamaClient") as mock_client_class:
        mock_instance = AsyncMock()
        mock_instance.host = "http://localhost:11434"
        mock_instance.check_connection.return_value = True

        mock_client_class.return_value = mock_instance

        yield mock_instance
