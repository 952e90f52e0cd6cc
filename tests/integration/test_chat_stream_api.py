"""Integration tests for the streaming chat API endpoint.

This module tests the SSE chat endpoint including:
- Plain answers and tool rounds
- Error events for failed model requests
- Rejected requests
"""

import json

import pytest
from httpx import AsyncClient


def parse_sse(text):
    """Parse an SSE response body into a list of {event, data} dicts."""
    events = []
    normalized_text = text.replace("\r\n", "\n")
    for chunk in normalized_text.strip().split("\n\n"):
        if not chunk.strip():
            continue
        event_type = None
        event_data = None
        for part in chunk.split("\n"):
            if part.startswith("event:"):
                event_type = part.split(":", 1)[1].strip()
            elif part.startswith("data:"):
                event_data = part.split(":", 1)[1].strip()
        if event_type and event_data:
            events.append({"event": event_type, "data": json.loads(event_data)})
    return events


def tool_call_response(name, arguments):
    return {
        "message": {
            "role": "assistant",
            "content": "",
            "tool_calls": [{"function": {"name": name, "arguments": arguments}}],
        }
    }


@pytest.mark.asyncio
async def test_stream_plain_answer(async_client: AsyncClient, mock_ollama_client):
    """Test that a plain answer yields message then done."""
    mock_ollama_client.chat.side_effect = [
        {"message": {"role": "assistant", "content": "Hello!"}}
    ]

    response = await async_client.post("/api/v1/chat/stream", json={"message": "Hi"})

    assert response.status_code == 200
    assert "text/event-stream" in response.headers["content-type"]
    events = parse_sse(response.text)
    assert [e["event"] for e in events] == ["message", "done"]
    assert events[0]["data"]["message"]["content"] == "Hello!"
    assert events[1]["data"]["history_length"] == 2


@pytest.mark.asyncio
async def test_stream_tool_rounds(async_client: AsyncClient, mock_ollama_client):
    """Test that each executed tool is streamed before the final message."""
    mock_ollama_client.chat.side_effect = [
        tool_call_response("filter_logs_by_service", {"service": "api-service"}),
        tool_call_response("change_theme", {"theme": "dark"}),
        {"message": {"role": "assistant", "content": "All set."}},
    ]

    response = await async_client.post(
        "/api/v1/chat/stream", json={"message": "API logs in dark mode"}
    )

    events = parse_sse(response.text)
    assert [e["event"] for e in events] == [
        "function_call",
        "function_call",
        "message",
        "done",
    ]
    first, second = events[0]["data"], events[1]["data"]
    assert first["round"] == 1
    assert first["function_call"]["name"] == "filter_logs_by_service"
    assert first["function_call"]["result"] == (
        "Filtered logs to show only logs from service: api-service"
    )
    assert second["round"] == 2
    assert second["function_call"]["status"] == "success"

    final = events[2]["data"]["message"]
    assert final["content"] == "All set."
    assert final["function_call"]["name"] == "change_theme"
    assert events[3]["data"]["history_length"] == 6

    dashboard = (await async_client.get("/api/v1/logs")).json()
    assert dashboard["stats"]["total_logs"] == 4


@pytest.mark.asyncio
async def test_stream_ollama_error(async_client: AsyncClient, mock_ollama_client):
    """Test that a failing model request yields an error event."""
    mock_ollama_client.chat.side_effect = Exception("Connection refused")

    response = await async_client.post("/api/v1/chat/stream", json={"message": "Hi"})

    assert response.status_code == 200
    events = parse_sse(response.text)
    assert [e["event"] for e in events] == ["error", "done"]
    assert events[0]["data"]["code"] == "ollama_error"
    assert events[0]["data"]["details"]["content"] == "Error processing request"
    assert events[1]["data"]["history_length"] == 0


@pytest.mark.asyncio
async def test_stream_releases_turn(async_client: AsyncClient, mock_ollama_client):
    """Test that a new turn can start once the stream has finished."""
    mock_ollama_client.chat.side_effect = [
        {"message": {"role": "assistant", "content": "One"}},
        {"message": {"role": "assistant", "content": "Two"}},
    ]

    await async_client.post("/api/v1/chat/stream", json={"message": "First"})
    response = await async_client.post(
        "/api/v1/chat/stream", json={"message": "Second"}
    )

    events = parse_sse(response.text)
    assert events[0]["data"]["message"]["content"] == "Two"


@pytest.mark.asyncio
async def test_stream_empty_message(async_client: AsyncClient, mock_ollama_client):
    """Test that a blank message is rejected before streaming starts."""
    response = await async_client.post("/api/v1/chat/stream", json={"message": ""})

    assert response.status_code == 400
    assert response.json()["detail"]["error"]["code"] == "empty_message"


@pytest.mark.asyncio
async def test_stream_while_processing(
    async_client: AsyncClient, mock_ollama_client, test_app
):
    """Test that streaming is rejected while a turn is in flight."""
    test_app.state.conversation._processing = True

    response = await async_client.post("/api/v1/chat/stream", json={"message": "Hi"})

    assert response.status_code == 409
    test_app.state.conversation._processing = False
