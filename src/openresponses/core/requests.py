"""Request body for creating a response."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, JsonValue

from .base import ProtocolModel, shape_union, tagged_union
from .enums import (
    IncludeOption,
    ReasoningEffort,
    ReasoningSummary,
    ServiceTier,
    Truncation,
    Verbosity,
)
from .items import Item
from .tools import Tool, ToolChoiceParam


def _input_shape(value: Any) -> str | None:
    if isinstance(value, str):
        return "text"
    if isinstance(value, (list, tuple)):
        return "items"
    return None


# JSON string -> "text", JSON array -> "items".
Input = shape_union("Input", _input_shape, {"text": str, "items": list[Item]})


class PlainTextFormat(ProtocolModel):
    type: Literal["text"] = "text"


class JsonObjectFormat(ProtocolModel):
    type: Literal["json_object"] = "json_object"


class JsonSchemaFormat(ProtocolModel):
    """Structured output constrained by a JSON schema."""

    type: Literal["json_schema"] = "json_schema"
    name: str
    description: str | None = None
    schema_: dict[str, JsonValue] | None = Field(default=None, alias="schema")
    strict: bool | None = None


TextFormat = tagged_union("TextFormat", PlainTextFormat, JsonObjectFormat, JsonSchemaFormat)


class TextParam(ProtocolModel):
    format: TextFormat | None = None
    verbosity: Verbosity = "medium"


class StreamOptions(ProtocolModel):
    include_obfuscation: bool | None = None


class ReasoningConfig(ProtocolModel):
    effort: ReasoningEffort | None = None
    summary: ReasoningSummary | None = None


class CreateResponseBody(ProtocolModel):
    """Configuration sent to ``POST /responses``.

    Every field is optional except the three enum fields with protocol
    defaults: ``truncation`` and ``service_tier`` default to ``auto`` and
    ``text.verbosity`` defaults to ``medium``.
    """

    model: str | None = None
    input: Input | None = None
    previous_response_id: str | None = None
    include: list[IncludeOption] | None = None
    tools: list[Tool] | None = None
    tool_choice: ToolChoiceParam | None = None
    metadata: dict[str, str] | None = None
    text: TextParam | None = None
    temperature: float | None = None
    top_p: float | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    parallel_tool_calls: bool | None = None
    stream: bool | None = None
    stream_options: StreamOptions | None = None
    background: bool | None = None
    max_output_tokens: int | None = None
    max_tool_calls: int | None = None
    reasoning: ReasoningConfig | None = None
    safety_identifier: str | None = None
    prompt_cache_key: str | None = None
    truncation: Truncation = "auto"
    instructions: str | None = None
    store: bool | None = None
    service_tier: ServiceTier = "auto"
    top_logprobs: int | None = None
