"""Pydantic models for the tools listing endpoint."""

from typing import Any

from pydantic import BaseModel, Field


class ToolInfo(BaseModel):
    """A tool as advertised to the model."""

    name: str = Field(description="Tool name")
    description: str = Field(description="Tool description")
    parameters: dict[str, Any] = Field(description="JSON schema of the arguments")


class ToolListResponse(BaseModel):
    """Response body for GET /api/v1/tools."""

    tools: list[ToolInfo] = Field(default_factory=list)
