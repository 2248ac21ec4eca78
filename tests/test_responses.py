"""Tests for decoding response resources."""

from __future__ import annotations

import json
from typing import Any

import pytest

from openresponses.core import (
    FunctionCall,
    Message,
    ProtocolDecodeError,
    Reasoning,
    ResponseResource,
    decode_response,
    encode,
)


def _response_payload() -> dict[str, Any]:
    return {
        "id": "resp_1",
        "object": "response",
        "created_at": 1741476542,
        "completed_at": 1741476543,
        "status": "completed",
        "model": "gpt-4.1",
        "output": [
            {
                "type": "reasoning",
                "id": "rs_1",
                "summary": [{"type": "summary_text", "text": "checked the forecast"}],
            },
            {
                "type": "message",
                "id": "msg_1",
                "status": "completed",
                "role": "assistant",
                "content": [
                    {"type": "output_text", "text": "It is ", "annotations": []},
                    {"type": "output_text", "text": "sunny.", "annotations": []},
                ],
            },
        ],
        "tools": [],
        "tool_choice": "auto",
        "truncation": "disabled",
        "parallel_tool_calls": True,
        "text": {"format": {"type": "text"}, "verbosity": "medium"},
        "temperature": 1.0,
        "top_p": 1.0,
        "usage": {
            "input_tokens": 36,
            "output_tokens": 87,
            "total_tokens": 123,
            "input_tokens_details": {"cached_tokens": 0},
            "output_tokens_details": {"reasoning_tokens": 12},
        },
        "store": True,
        "service_tier": "default",
        "metadata": {},
    }


def test_decode_completed_response() -> None:
    response = decode_response(json.dumps(_response_payload()))

    assert response.id == "resp_1"
    assert response.status == "completed"
    assert isinstance(response.output[0], Reasoning)
    assert isinstance(response.output[1], Message)
    assert response.usage is not None
    assert response.usage.total_tokens == 123
    assert response.usage.output_tokens_details.reasoning_tokens == 12
    assert response.error is None


def test_output_text_joins_assistant_parts() -> None:
    response = decode_response(json.dumps(_response_payload()))

    assert response.output_text == "It is sunny."


def test_output_text_is_empty_for_tool_calls() -> None:
    payload = _response_payload()
    payload["output"] = [
        {
            "type": "function_call",
            "id": "fc_1",
            "call_id": "call_1",
            "name": "get_weather",
            "arguments": '{"city":"Paris"}',
            "status": "completed",
        }
    ]

    response = decode_response(json.dumps(payload))

    assert isinstance(response.output[0], FunctionCall)
    assert response.output_text == ""


def test_decode_failed_response_with_error() -> None:
    payload = _response_payload()
    payload.update(
        status="failed",
        output=[],
        error={"type": "server_error", "code": "overloaded", "message": "try again"},
    )

    response = decode_response(json.dumps(payload))

    assert response.error is not None
    assert response.error.type == "server_error"
    assert response.error.message == "try again"


def test_minimal_response_uses_defaults() -> None:
    response = decode_response(
        '{"id":"resp_2","created_at":1,"status":"queued","model":"m"}'
    )

    assert response.object == "response"
    assert response.output == []
    assert response.tool_choice == "auto"
    assert response.truncation == "auto"
    assert response.metadata == {}
    assert response.usage is None


def test_unknown_status_and_tier_are_kept() -> None:
    payload = _response_payload()
    payload.update(status="cancelled", service_tier="scale")

    response = decode_response(json.dumps(payload))

    assert response.status == "cancelled"
    assert response.service_tier == "scale"


def test_response_roundtrip() -> None:
    response = decode_response(json.dumps(_response_payload()))

    assert decode_response(encode(response)) == response


def test_encoded_response_omits_absent_fields() -> None:
    response = ResponseResource(id="resp_3", created_at=1, status="completed", model="m")

    payload = json.loads(encode(response))

    assert "error" not in payload
    assert "usage" not in payload
    assert payload["output"] == []


def test_decode_response_requires_id() -> None:
    payload = _response_payload()
    del payload["id"]

    with pytest.raises(ProtocolDecodeError, match="invalid ResponseResource payload"):
        decode_response(json.dumps(payload))
