"""Ollama client wrapper and integration layer.

This package provides the async client used to send tool-enabled chat
requests to the Ollama API.
"""

from toolchat_server.ollama.client import OllamaClient

__all__ = ["OllamaClient"]
