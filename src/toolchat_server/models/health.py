"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of toolchat-server.
        model: The model the conversation uses.
        tools: Names of the tools advertised to the model.
        turn_in_progress: Whether a conversation turn is running.
        ollama_connected: Whether Ollama answered the connectivity check.
        ollama_host: The Ollama host URL.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of toolchat-server")
    model: str | None = Field(
        default=None,
        description="Model used for the conversation",
    )
    tools: list[str] = Field(
        default_factory=list,
        description="Registered tool names, in the order sent to the model",
    )
    turn_in_progress: bool | None = Field(
        default=None,
        description="Whether a conversation turn is running",
    )
    ollama_connected: bool | None = Field(
        default=None,
        description="Whether Ollama is connected",
    )
    ollama_host: str | None = Field(
        default=None,
        description="Ollama host URL",
    )
