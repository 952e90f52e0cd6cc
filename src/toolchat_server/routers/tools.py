"""Tools router for listing the tools advertised to the model."""

from fastapi import APIRouter, Depends

from toolchat_server.dependencies import get_tool_registry
from toolchat_server.models.tools import ToolInfo, ToolListResponse
from toolchat_server.tools import ToolRegistry

router = APIRouter(prefix="/api/v1", tags=["tools"])


@router.get("/tools", response_model=ToolListResponse)
async def list_tools(
    registry: ToolRegistry = Depends(get_tool_registry),
) -> ToolListResponse:
    """List the tool schemas sent to the model on every turn."""
    return ToolListResponse(
        tools=[ToolInfo(**schema["function"]) for schema in registry.get_all()]
    )
