"""Application theme state."""

import logging
from typing import Literal, get_args

logger = logging.getLogger(__name__)

Theme = Literal["light", "dark"]
THEMES: tuple[str, ...] = get_args(Theme)


class ThemeService:
    """Holds the current UI theme of the dashboard."""

    def __init__(self, theme: str = "light") -> None:
        self._theme = self._check(theme)

    @property
    def theme(self) -> str:
        return self._theme

    def change_theme(self, theme: str) -> str:
        """Switch to the given theme.

        Raises:
            ValueError: If the theme is not "light" or "dark"
        """
        self._theme = self._check(theme)
        logger.info(f"Theme changed to {self._theme}")
        return self._theme

    def toggle(self) -> str:
        return self.change_theme("light" if self._theme == "dark" else "dark")

    @staticmethod
    def _check(theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(
                f"Unknown theme '{theme}', expected one of: {', '.join(THEMES)}"
            )
        return theme
