"""Async Ollama client wrapper.

This module provides an async wrapper around the ollama.AsyncClient for
sending tool-enabled chat requests. The client is created once at startup
and reused by the conversation loop.
"""

import logging
from typing import Any

import ollama

logger = logging.getLogger(__name__)


class OllamaClient:
    """Async client for the Ollama chat API.

    Attributes:
        host: The Ollama server URL (e.g., "http://localhost:11434")
        _client: The underlying ollama.AsyncClient instance
    """

    def __init__(self, host: str) -> None:
        """Initialize the Ollama client.

        Args:
            host: The Ollama server URL
        """
        self.host = host
        self._client = ollama.AsyncClient(host=host)
        logger.info(f"OllamaClient initialized with host: {host}")

    async def check_connection(self) -> bool:
        """Check if the Ollama server is reachable.

        Returns:
            bool: True if connection is successful, False otherwise
        """
        try:
            await self._client.list()
            logger.debug("Ollama connection check: successful")
            return True
        except Exception as e:
            logger.warning(f"Ollama connection check failed: {e}")
            return False

    async def chat(
        self,
        model: str,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a non-streaming chat request with tool schemas.

        Args:
            model: The model name to use for the chat
            messages: List of message dicts in Ollama format
            tools: Tool schemas the model may call
            options: Optional model parameters (temperature, etc.)

        Returns:
            dict: The chat response. `response["message"]` holds `content`
                and, when the model asks for tools, `tool_calls` as
                `[{"function": {"name": ..., "arguments": {...}}}]`

        Raises:
            Exception: If the Ollama API request fails
        """
        try:
            logger.debug(
                f"Chat request to {model}: {len(messages)} messages, "
                f"{len(tools or [])} tools"
            )
            response = await self._client.chat(
                model=model,
                messages=messages,
                tools=tools or None,
                stream=False,
                options=options,
            )
        except Exception as e:
            logger.error(f"Chat request failed: {e}")
            raise

        # Convert the response to a dict if it's not already
        if hasattr(response, "model_dump"):
            return response.model_dump()
        if isinstance(response, dict):
            return response
        return vars(response)

    async def close(self) -> None:
        """Close the client.

        ollama.AsyncClient holds no resources that need explicit cleanup.
        """
        logger.debug("OllamaClient closed")
