"""Theme state and the tools that change it."""

from toolchat_server.theme.service import THEMES, ThemeService
from toolchat_server.theme.tools import register_theme_tools

__all__ = ["THEMES", "ThemeService", "register_theme_tools"]
