"""Tests for the untagged input, function-output and tool-choice unions."""

from __future__ import annotations

import json

import pytest

from openresponses.core import (
    AllowedToolsChoice,
    FunctionTool,
    InputText,
    McpTool,
    Message,
    ProtocolDecodeError,
    SpecificToolChoice,
    UnknownDiscriminantError,
    UnmatchedShapeError,
    decode_function_output,
    decode_input,
    decode_request,
    decode_tool,
    decode_tool_choice,
    encode,
    encode_function_output,
    encode_input,
    encode_tool_choice,
)


def test_text_input_encodes_as_bare_string() -> None:
    assert encode_input("hello") == b'"hello"'
    assert decode_input('"hello"') == "hello"


def test_item_input_encodes_as_array() -> None:
    payload = json.loads(encode_input([Message.user("hi")]))

    assert isinstance(payload, list)
    assert payload[0]["type"] == "message"
    assert decode_input(json.dumps(payload)) == [Message.user("hi")]


def test_input_rejects_object() -> None:
    with pytest.raises(UnmatchedShapeError) as excinfo:
        decode_input('{"text":"hi"}')

    assert excinfo.value.union == "Input"


def test_function_output_accepts_string_and_content() -> None:
    assert decode_function_output('"ok"') == "ok"
    assert decode_function_output('[{"type":"input_text","text":"ok"}]') == [
        InputText(text="ok")
    ]
    assert encode_function_output([InputText(text="ok")]) == b'[{"type":"input_text","text":"ok"}]'


def test_function_output_rejects_number() -> None:
    with pytest.raises(UnmatchedShapeError) as excinfo:
        decode_function_output("42")

    assert excinfo.value.union == "FunctionOutput"


def test_tool_choice_simple_mode() -> None:
    assert decode_tool_choice('"required"') == "required"
    assert encode_tool_choice("none") == b'"none"'


def test_tool_choice_specific_tool() -> None:
    choice = decode_tool_choice('{"type":"function","name":"get_weather"}')

    assert choice == SpecificToolChoice(type="function", name="get_weather")


def test_tool_choice_allowed_tools_wins_over_name() -> None:
    choice = decode_tool_choice(
        json.dumps(
            {
                "type": "allowed_tools",
                "mode": "auto",
                "tools": [{"type": "function", "name": "get_weather"}],
            }
        )
    )

    assert isinstance(choice, AllowedToolsChoice)
    assert choice.tools[0].name == "get_weather"
    assert json.loads(encode_tool_choice(choice))["type"] == "allowed_tools"


def test_tool_choice_rejects_unmatched_object() -> None:
    with pytest.raises(UnmatchedShapeError):
        decode_tool_choice('{"type":"function"}')


def test_tool_choice_rejects_unknown_mode() -> None:
    with pytest.raises(ProtocolDecodeError) as excinfo:
        decode_tool_choice('"sometimes"')

    assert not isinstance(excinfo.value, UnmatchedShapeError)


def test_function_tool_builders_return_new_values() -> None:
    base = FunctionTool.named("get_weather")
    described = base.with_description("Look up the weather")
    schema = {"type": "object", "properties": {"city": {"type": "string"}}}
    full = described.with_parameters(schema).with_strict()

    assert base.description is None
    assert described.description == "Look up the weather"
    assert full.parameters == schema
    assert full.strict is True
    assert json.loads(encode(base)) == {"type": "function", "name": "get_weather"}


def test_mcp_tool_roundtrip() -> None:
    tool = McpTool.for_server("docs", "https://mcp.test/sse").with_allowed_tools(["search"])

    assert decode_tool(encode(tool)) == tool


def test_decode_tool_rejects_unknown_type() -> None:
    with pytest.raises(UnknownDiscriminantError) as excinfo:
        decode_tool('{"type":"web_search"}')

    assert excinfo.value.union == "Tool"
    assert excinfo.value.value == "web_search"


def test_input_item_that_is_not_an_object_is_reported() -> None:
    with pytest.raises(UnknownDiscriminantError) as excinfo:
        decode_input('["hi"]')

    assert excinfo.value.is_object is False
    assert excinfo.value.location == (0,)
    assert str(excinfo.value) == "expected a JSON object for Item at 0"


def test_request_input_error_location_skips_union_tags() -> None:
    with pytest.raises(UnknownDiscriminantError) as excinfo:
        decode_request('{"input":[{"type":"message","role":"user","content":[{"type":"x"}]}]}')

    assert excinfo.value.location == ("input", 0, "content", 0)
