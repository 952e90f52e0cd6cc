"""Chat API endpoints.

This module provides endpoints for running conversation turns, either as a
single JSON response or as Server-Sent Events while tools execute, and for
reading or resetting the displayed conversation.
"""

import logging
from contextlib import aclosing

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sse_starlette.sse import EventSourceResponse

from toolchat_server.conversation import (
    ChatMessage,
    ConversationLoop,
    ErrorEvent,
    FunctionCall,
    FunctionCallEvent,
    MessageEvent,
    TurnInProgressError,
)
from toolchat_server.dependencies import get_conversation
from toolchat_server.models.chat import (
    ChatMessageResponse,
    ChatRequest,
    ChatResponse,
    DoneEventData,
    ErrorEventData,
    FunctionCallEventData,
    FunctionCallResponse,
    MessageEventData,
    MessageListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])


def function_call_to_response(function_call: FunctionCall) -> FunctionCallResponse:
    return FunctionCallResponse(
        name=function_call.name,
        parameters=function_call.parameters,
        status=function_call.status,
        result=function_call.result,
    )


def chat_message_to_response(message: ChatMessage) -> ChatMessageResponse:
    return ChatMessageResponse(
        role=message.role,
        content=message.content,
        timestamp=message.timestamp,
        function_call=(
            function_call_to_response(message.function_call)
            if message.function_call
            else None
        ),
    )


def _check_can_start(conversation: ConversationLoop, request_body: ChatRequest) -> None:
    """Reject requests that the conversation loop would ignore.

    Raises:
        HTTPException: 400 for a blank message, 409 while a turn is in flight
    """
    if not request_body.message.strip():
        raise HTTPException(
            status_code=400,
            detail={
                "error": {
                    "code": "empty_message",
                    "message": "Message must not be empty",
                    "details": {},
                }
            },
        )
    if conversation.is_processing:
        raise HTTPException(
            status_code=409,
            detail={
                "error": {
                    "code": "turn_in_progress",
                    "message": "A response is still being generated",
                    "details": {},
                }
            },
        )


@router.post("", response_model=ChatResponse)
async def chat(
    request_body: ChatRequest,
    conversation: ConversationLoop = Depends(get_conversation),
) -> ChatResponse:
    """Send a message and receive the final answer of the turn.

    Tools requested by the model are executed before returning; they are
    listed in `function_calls` in the order they ran.

    Args:
        request_body: Chat request containing the message
        conversation: Injected conversation loop

    Returns:
        ChatResponse with the final assistant message

    Raises:
        HTTPException: 400 on blank message, 409 if a turn is in flight,
            502 if the model could not produce an answer
    """
    _check_can_start(conversation, request_body)

    function_calls: list[FunctionCallResponse] = []
    final_message: ChatMessage | None = None
    error_event: ErrorEvent | None = None

    try:
        async with aclosing(conversation.stream(request_body.message)) as events:
            async for event in events:
                if isinstance(event, FunctionCallEvent):
                    function_calls.append(
                        function_call_to_response(event.function_call)
                    )
                elif isinstance(event, MessageEvent):
                    final_message = event.message
                elif isinstance(event, ErrorEvent):
                    error_event = event
    except TurnInProgressError:
        raise HTTPException(
            status_code=409,
            detail={
                "error": {
                    "code": "turn_in_progress",
                    "message": "A response is still being generated",
                    "details": {},
                }
            },
        )

    if error_event is not None:
        raise HTTPException(
            status_code=502,
            detail={
                "error": {
                    "code": error_event.code,
                    "message": error_event.detail,
                    "details": {"content": error_event.message.content},
                }
            },
        )

    if final_message is None:
        raise HTTPException(
            status_code=502,
            detail={
                "error": {
                    "code": "incomplete_response",
                    "message": "Turn ended without a final message",
                    "details": {},
                }
            },
        )

    logger.info(f"Turn completed with {len(function_calls)} tool call(s)")

    return ChatResponse(
        message=chat_message_to_response(final_message),
        function_calls=function_calls,
        history_length=len(conversation.history),
    )


@router.post("/stream")
async def chat_streaming(
    request_body: ChatRequest,
    request: Request,
    conversation: ConversationLoop = Depends(get_conversation),
) -> EventSourceResponse:
    """Run a turn and stream its progress via Server-Sent Events (SSE).

    SSE Events:
        - function_call: A requested tool has been executed
        - message: The final assistant message
        - error: The turn failed (model unreachable, tool loop exceeded)
        - done: Stream is complete

    Raises:
        HTTPException: 400 on blank message, 409 if a turn is in flight
    """
    _check_can_start(conversation, request_body)

    async def event_generator():
        """Generate SSE events from the conversation turn."""
        try:
            async with aclosing(conversation.stream(request_body.message)) as events:
                async for event in events:
                    if isinstance(event, FunctionCallEvent):
                        data = FunctionCallEventData(
                            function_call=function_call_to_response(
                                event.function_call
                            ),
                            round=event.round,
                        )
                    elif isinstance(event, MessageEvent):
                        data = MessageEventData(
                            message=chat_message_to_response(event.message)
                        )
                    else:
                        data = ErrorEventData(
                            code=event.code,
                            message=event.detail,
                            details={"content": event.message.content},
                        )

                    yield {"event": event.event, "data": data.model_dump_json()}

                    if await request.is_disconnected():
                        logger.warning("Client disconnected during streaming")
                        return

        except TurnInProgressError:
            error_event = ErrorEventData(
                code="turn_in_progress",
                message="A response is still being generated",
            )
            yield {"event": "error", "data": error_event.model_dump_json()}

        done_event = DoneEventData(history_length=len(conversation.history))
        yield {"event": "done", "data": done_event.model_dump_json()}

    return EventSourceResponse(event_generator())


@router.get("/messages", response_model=MessageListResponse)
async def list_messages(
    conversation: ConversationLoop = Depends(get_conversation),
) -> MessageListResponse:
    """Get the displayed conversation."""
    return MessageListResponse(
        messages=[chat_message_to_response(msg) for msg in conversation.messages],
        is_processing=conversation.is_processing,
    )


@router.delete("", status_code=204)
async def reset_conversation(
    conversation: ConversationLoop = Depends(get_conversation),
) -> Response:
    """Clear the conversation.

    Raises:
        HTTPException: 409 if a turn is in flight
    """
    try:
        conversation.reset()
    except TurnInProgressError:
        raise HTTPException(
            status_code=409,
            detail={
                "error": {
                    "code": "turn_in_progress",
                    "message": "Cannot reset while a response is being generated",
                    "details": {},
                }
            },
        )
    return Response(status_code=204)
