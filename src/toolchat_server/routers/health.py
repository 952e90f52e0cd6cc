"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from toolchat_server import __version__
from toolchat_server.models.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


async def _ollama_status(request: Request) -> tuple[bool | None, str | None]:
    client = getattr(request.app.state, "ollama_client", None)
    if client is None:
        return None, None

    try:
        connected = await client.check_connection()
    except Exception as e:
        logger.warning(f"Ollama connectivity check failed: {e}")
        connected = False
    return connected, client.host


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report server status, the tools on offer and whether a turn is running.

    The server stays "ok" when Ollama is unreachable; `ollama_connected`
    tells the two apart. Fields tied to startup state are null until the
    lifespan has run.
    """
    state = request.app.state
    ollama_connected, ollama_host = await _ollama_status(request)

    registry = getattr(state, "tool_registry", None)
    conversation = getattr(state, "conversation", None)

    return HealthResponse(
        status="ok",
        version=__version__,
        model=state.settings.model,
        tools=registry.names() if registry is not None else [],
        turn_in_progress=(
            conversation.is_processing if conversation is not None else None
        ),
        ollama_connected=ollama_connected,
        ollama_host=ollama_host,
    )
