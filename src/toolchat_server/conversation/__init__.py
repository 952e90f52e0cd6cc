"""The tool-augmented conversation loop and its message types."""

from toolchat_server.conversation.loop import (
    ConversationLoop,
    ToolLoopExceededError,
    TurnInProgressError,
    resolve_function_call,
)
from toolchat_server.conversation.types import (
    AssistantMessage,
    ChatMessage,
    ConversationMessage,
    ErrorEvent,
    FunctionCall,
    FunctionCallEvent,
    MessageEvent,
    ToolMessage,
    TurnEvent,
    UserMessage,
)

__all__ = [
    # Core classes
    "ConversationLoop",
    "resolve_function_call",
    # Errors
    "ToolLoopExceededError",
    "TurnInProgressError",
    # Message types
    "ConversationMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
    "ChatMessage",
    "FunctionCall",
    # Events
    "TurnEvent",
    "FunctionCallEvent",
    "MessageEvent",
    "ErrorEvent",
]
