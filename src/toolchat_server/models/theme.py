"""Pydantic models for the theme endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class ThemeResponse(BaseModel):
    theme: str = Field(description="Current theme")


class ThemeUpdateRequest(BaseModel):
    theme: Literal["light", "dark"] = Field(description="Theme to switch to")
