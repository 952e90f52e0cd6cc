"""Data types for the tool-augmented conversation.

This module defines the history messages sent to the model, the FunctionCall
record of a resolved tool invocation, the ChatMessage entries shown to the
user, and the events emitted while a turn runs.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

FunctionCallStatus = Literal["success", "error"]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class UserMessage:
    """A message from the user."""

    role: str = "user"
    content: str = ""

    def __post_init__(self) -> None:
        """Validate role is always 'user'."""
        self.role = "user"


@dataclass
class AssistantMessage:
    """A response from the model, possibly requesting a tool call."""

    role: str = "assistant"
    content: str = ""
    tool_calls: list[dict[str, Any]] | None = None

    def __post_init__(self) -> None:
        """Validate role is always 'assistant'."""
        self.role = "assistant"


@dataclass
class ToolMessage:
    """The result of a tool execution fed back to the model."""

    role: str = "tool"
    tool_name: str = ""
    content: str = ""

    def __post_init__(self) -> None:
        """Validate role is always 'tool'."""
        self.role = "tool"


# Union type for all history message types
ConversationMessage = UserMessage | AssistantMessage | ToolMessage


def to_ollama_message(message: ConversationMessage) -> dict[str, Any]:
    """Convert a history message to the dict format of the Ollama chat API."""
    ollama_msg: dict[str, Any] = {"role": message.role, "content": message.content}

    if isinstance(message, AssistantMessage) and message.tool_calls:
        ollama_msg["tool_calls"] = message.tool_calls
    elif isinstance(message, ToolMessage):
        ollama_msg["tool_name"] = message.tool_name

    return ollama_msg


@dataclass
class FunctionCall:
    """Record of a single tool invocation attempt and its outcome."""

    name: str
    parameters: dict[str, Any] = field(default_factory=dict)
    status: FunctionCallStatus = "success"
    result: str | None = None


@dataclass
class ChatMessage:
    """An entry of the conversation as displayed to the user."""

    role: Literal["user", "assistant"]
    content: str
    timestamp: str = field(default_factory=_now)
    function_call: FunctionCall | None = None


@dataclass
class FunctionCallEvent:
    """Emitted after a requested tool has been executed."""

    function_call: FunctionCall
    round: int
    event: str = "function_call"


@dataclass
class MessageEvent:
    """Emitted when the final assistant message of a turn is appended."""

    message: ChatMessage
    event: str = "message"


@dataclass
class ErrorEvent:
    """Emitted when a turn ends on a fatal error."""

    code: str
    detail: str
    message: ChatMessage
    event: str = "error"


TurnEvent = FunctionCallEvent | MessageEvent | ErrorEvent
