"""Tool-augmented conversation loop.

This module runs one user turn against the model: it sends the history and
the registered tool schemas, executes the tool the model asks for, feeds the
result back and repeats until the model answers in plain text.

States of a turn:
    AWAITING_MODEL -> FINAL_ANSWER
    AWAITING_MODEL -> TOOL_REQUESTED -> EXECUTING_TOOL -> AWAITING_MODEL
"""

import asyncio
import inspect
import json
import logging
from contextlib import aclosing
from dataclasses import replace
from typing import Any, AsyncIterator, Protocol

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
    to_ollama_message,
)
from toolchat_server.tools.registry import ToolRegistry
from toolchat_server.tools.types import ToolArgumentError

logger = logging.getLogger(__name__)

TRANSPORT_ERROR_CONTENT = "Error processing request"
EMPTY_RESPONSE_CONTENT = "No response"


class TurnInProgressError(RuntimeError):
    """Raised when a turn is started while another one is still running."""


class ToolLoopExceededError(RuntimeError):
    """Raised when the model keeps requesting tools past the round limit."""

    def __init__(self, max_rounds: int) -> None:
        self.max_rounds = max_rounds
        super().__init__(f"Tool loop exceeded: more than {max_rounds} tool rounds")


class ChatModelClient(Protocol):
    """The part of the model client the loop depends on."""

    async def chat(
        self,
        model: str,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]: ...


def resolve_function_call(message: dict[str, Any]) -> FunctionCall | None:
    """Interpret a model response message as a tool invocation, if it is one.

    Structured `tool_calls` take precedence; only the first one is used.
    Otherwise the content is tried as a JSON object with a `name` field,
    taking arguments from `arguments` or `parameters`.

    Args:
        message: The `message` object of a chat response

    Returns:
        FunctionCall | None: The requested call, or None for a plain answer
    """
    tool_calls = message.get("tool_calls") or []
    if tool_calls:
        if len(tool_calls) > 1:
            logger.warning(
                f"Model requested {len(tool_calls)} tool calls, only the first is used"
            )
        function = tool_calls[0].get("function") or {}
        arguments = function.get("arguments") or {}
        if isinstance(arguments, str):
            try:
                arguments = json.loads(arguments)
            except json.JSONDecodeError:
                arguments = {}
        return FunctionCall(
            name=function.get("name", ""),
            parameters=dict(arguments) if isinstance(arguments, dict) else {},
        )

    content = message.get("content")
    if not content:
        return None

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError:
        logger.debug("Response content is not a tool call")
        return None

    if not isinstance(parsed, dict) or "name" not in parsed:
        return None

    arguments = parsed.get("arguments") or parsed.get("parameters") or {}
    return FunctionCall(
        name=str(parsed["name"]),
        parameters=arguments if isinstance(arguments, dict) else {},
    )


class ConversationLoop:
    """A single conversation with tool dispatch.

    Holds two lists: `history`, the messages sent to the model, and
    `messages`, the entries shown to the user. Only one turn runs at a time;
    `submit` while a turn is in flight does nothing.

    Attributes:
        model: The Ollama model name
        max_tool_rounds: Tool executions allowed per turn
        request_timeout: Seconds to wait for each model response (None = no limit)
        messages: Displayed conversation entries
        history: Messages sent to the model
    """

    def __init__(
        self,
        client: ChatModelClient,
        registry: ToolRegistry,
        model: str,
        max_tool_rounds: int = 10,
        request_timeout: float | None = None,
    ) -> None:
        self._client = client
        self._registry = registry
        self.model = model
        self.max_tool_rounds = max_tool_rounds
        self.request_timeout = request_timeout
        self.messages: list[ChatMessage] = []
        self.history: list[ConversationMessage] = []
        self._processing = False

    @property
    def is_processing(self) -> bool:
        """Whether a turn is currently in flight."""
        return self._processing

    async def submit(self, text: str) -> ChatMessage | None:
        """Run a full turn for a user message.

        Args:
            text: The user's message

        Returns:
            ChatMessage | None: The final assistant entry of the turn, or None
                if the message was blank or another turn is in flight
        """
        if self._processing or not text or not text.strip():
            logger.debug("Ignoring submission")
            return None

        final_message = None
        async with aclosing(self.stream(text)) as events:
            async for event in events:
                if isinstance(event, (MessageEvent, ErrorEvent)):
                    final_message = event.message
        return final_message

    async def stream(self, text: str) -> AsyncIterator[TurnEvent]:
        """Run a turn for a user message, yielding events as it progresses.

        Args:
            text: The user's message

        Yields:
            TurnEvent: FunctionCallEvent after each executed tool, then one
                MessageEvent or ErrorEvent ending the turn

        Raises:
            TurnInProgressError: If another turn is in flight
            ValueError: If the message is blank
        """
        if self._processing:
            raise TurnInProgressError("A turn is already in progress")
        if not text or not text.strip():
            raise ValueError("Message must not be empty")

        self._processing = True
        checkpoint = len(self.history)
        finished = False
        try:
            self.messages.append(ChatMessage(role="user", content=text))
            self.history.append(UserMessage(content=text))
            logger.info(f"Starting turn with {len(self._registry)} tools available")

            async with aclosing(self._run_turn(checkpoint)) as events:
                async for event in events:
                    if isinstance(event, (MessageEvent, ErrorEvent)):
                        finished = True
                    yield event
        finally:
            if not finished:
                # Turn abandoned before its final event; drop the partial exchange
                del self.history[checkpoint:]
                logger.warning("Turn abandoned, history rolled back")
            self._processing = False

    def reset(self) -> None:
        """Clear the conversation.

        Raises:
            TurnInProgressError: If a turn is in flight
        """
        if self._processing:
            raise TurnInProgressError("Cannot reset while a turn is in progress")
        self.messages.clear()
        self.history.clear()
        logger.info("Conversation reset")

    async def _run_turn(self, checkpoint: int) -> AsyncIterator[TurnEvent]:
        previous_call: FunctionCall | None = None
        rounds = 0

        while True:
            try:
                response = await self._call_model()
            except Exception as e:
                logger.error(f"Model request failed: {e!r}")
                yield self._fail(
                    checkpoint,
                    code="ollama_error",
                    detail=f"Failed to get response from model: {e!r}",
                    content=TRANSPORT_ERROR_CONTENT,
                    function_call=FunctionCall(
                        name="unknown", parameters={}, status="error"
                    ),
                )
                return

            message = response.get("message") or {}
            content = message.get("content") or ""
            function_call = resolve_function_call(message)

            if function_call is None:
                chat_message = ChatMessage(
                    role="assistant",
                    content=content or EMPTY_RESPONSE_CONTENT,
                    function_call=(
                        replace(previous_call, status="success")
                        if previous_call
                        else None
                    ),
                )
                self.history.append(AssistantMessage(content=content))
                self.messages.append(chat_message)
                logger.info(f"Turn finished after {rounds} tool round(s)")
                yield MessageEvent(message=chat_message)
                return

            if rounds >= self.max_tool_rounds:
                error = ToolLoopExceededError(self.max_tool_rounds)
                logger.error(str(error))
                yield self._fail(
                    checkpoint,
                    code="tool_loop_exceeded",
                    detail=str(error),
                    content=str(error),
                    function_call=replace(
                        function_call, status="error", result=str(error)
                    ),
                )
                return

            rounds += 1
            await self._execute(function_call)

            # The tool result must directly follow the call it answers.
            self.history.append(
                AssistantMessage(
                    content=content,
                    tool_calls=message.get("tool_calls") or None,
                )
            )
            self.history.append(
                ToolMessage(
                    tool_name=function_call.name,
                    content=function_call.result or "",
                )
            )
            yield FunctionCallEvent(function_call=function_call, round=rounds)
            previous_call = function_call

    async def _call_model(self) -> dict[str, Any]:
        messages = [to_ollama_message(msg) for msg in self.history]
        logger.debug(f"Sending {len(messages)} messages to model {self.model}")
        return await asyncio.wait_for(
            self._client.chat(
                model=self.model,
                messages=messages,
                tools=self._registry.get_all(),
            ),
            timeout=self.request_timeout,
        )

    async def _execute(self, function_call: FunctionCall) -> None:
        """Run the requested tool and record the outcome on the FunctionCall."""
        tool = self._registry.get_by_name(function_call.name)
        if tool is None:
            logger.warning(f"Model requested unknown tool: {function_call.name}")
            function_call.status = "error"
            function_call.result = f"Tool {function_call.name} not found"
            return

        try:
            arguments = tool.parameters.validate(
                function_call.name, function_call.parameters
            )
            result = tool.execute(arguments)
            if inspect.isawaitable(result):
                result = await result
        except ToolArgumentError as e:
            logger.warning(str(e))
            function_call.status = "error"
            function_call.result = str(e)
            return
        except Exception as e:
            logger.warning(f"Tool {function_call.name} failed: {e}")
            function_call.status = "error"
            function_call.result = f"Error executing tool: {e}"
            return

        logger.info(f"Executed tool {function_call.name}")
        if result is not None:
            function_call.result = str(result)

    def _fail(
        self,
        checkpoint: int,
        code: str,
        detail: str,
        content: str,
        function_call: FunctionCall,
    ) -> ErrorEvent:
        # Drop this turn from the model history; the display keeps the error.
        del self.history[checkpoint:]
        chat_message = ChatMessage(
            role="assistant", content=content, function_call=function_call
        )
        self.messages.append(chat_message)
        return ErrorEvent(code=code, detail=detail, message=chat_message)
