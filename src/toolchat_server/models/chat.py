"""Pydantic models for chat API requests and responses.

This module defines the request and response schemas for the chat
endpoints, including the events sent over the SSE stream.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Request body for POST /api/v1/chat and POST /api/v1/chat/stream."""

    message: str = Field(description="The user message to send.")

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"message": "Switch to dark mode"}]}
    )


class FunctionCallResponse(BaseModel):
    """A tool invocation attempted during a turn."""

    name: str = Field(description="Name of the requested tool")
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="Arguments sent by the model"
    )
    status: Literal["success", "error"] = Field(description="Outcome of the call")
    result: str | None = Field(default=None, description="Tool output or error text")


class ChatMessageResponse(BaseModel):
    """A displayed conversation entry."""

    role: Literal["user", "assistant"] = Field(description="Message author")
    content: str = Field(description="Message content")
    timestamp: str = Field(description="ISO 8601 timestamp")
    function_call: FunctionCallResponse | None = Field(
        default=None, description="Tool call shown alongside this message"
    )


class ChatResponse(BaseModel):
    """Response body for the non-streaming chat endpoint."""

    message: ChatMessageResponse = Field(description="The final assistant message")
    function_calls: list[FunctionCallResponse] = Field(
        default_factory=list,
        description="Tools executed during this turn, in order",
    )
    history_length: int = Field(description="Messages in the model history")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": {
                    "role": "assistant",
                    "content": "The theme is now dark.",
                    "timestamp": "2025-01-15T10:35:00.000000Z",
                    "function_call": {
                        "name": "change_theme",
                        "parameters": {"theme": "dark"},
                        "status": "success",
                        "result": "Theme changed to dark",
                    },
                },
                "function_calls": [
                    {
                        "name": "change_theme",
                        "parameters": {"theme": "dark"},
                        "status": "success",
                        "result": "Theme changed to dark",
                    }
                ],
                "history_length": 4,
            }
        }
    )


class MessageListResponse(BaseModel):
    """Response body for GET /api/v1/chat/messages."""

    messages: list[ChatMessageResponse] = Field(default_factory=list)
    is_processing: bool = Field(description="Whether a turn is in flight")


# SSE event payloads


class FunctionCallEventData(BaseModel):
    """SSE event emitted after a tool has been executed."""

    function_call: FunctionCallResponse
    round: int = Field(description="Tool round within the turn, starting at 1")


class MessageEventData(BaseModel):
    """SSE event carrying the final assistant message."""

    message: ChatMessageResponse


class ErrorEventData(BaseModel):
    """SSE event emitted when the turn fails."""

    code: str = Field(description="Error code")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class DoneEventData(BaseModel):
    """SSE event marking the end of the stream."""

    history_length: int
