"""toolchat-server: FastAPI server for tool-calling chat with Ollama.

This package provides a REST API and SSE streaming interface for a
conversation in which a local model can call tools registered by the
application's feature modules (theme switching, log filtering).
"""

__version__ = "0.1.0"

from toolchat_server.app import create_app  # noqa: E402

__all__ = ["create_app", "__version__"]
