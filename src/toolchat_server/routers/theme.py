"""Theme endpoints."""

from fastapi import APIRouter, Depends

from toolchat_server.dependencies import get_theme_service
from toolchat_server.models.theme import ThemeResponse, ThemeUpdateRequest
from toolchat_server.theme import ThemeService

router = APIRouter(prefix="/api/v1/theme", tags=["theme"])


@router.get("", response_model=ThemeResponse)
async def get_theme(
    theme_service: ThemeService = Depends(get_theme_service),
) -> ThemeResponse:
    return ThemeResponse(theme=theme_service.theme)


@router.put("", response_model=ThemeResponse)
async def set_theme(
    request_body: ThemeUpdateRequest,
    theme_service: ThemeService = Depends(get_theme_service),
) -> ThemeResponse:
    """Switch to the requested theme."""
    return ThemeResponse(theme=theme_service.change_theme(request_body.theme))


@router.post("/toggle", response_model=ThemeResponse)
async def toggle_theme(
    theme_service: ThemeService = Depends(get_theme_service),
) -> ThemeResponse:
    """Switch between light and dark."""
    return ThemeResponse(theme=theme_service.toggle())
