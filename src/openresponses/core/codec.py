"""JSON encode/decode for protocol values with typed decode failures."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, NoReturn

from pydantic import BaseModel, TypeAdapter, ValidationError

from .base import (
    SHAPE_TAGS,
    SHAPE_UNION_ERRORS,
    TAGGED_UNION_ERRORS,
    TYPE_TAGS,
    ProtocolModel,
    type_tag,
)
from .content import Content
from .events import StreamEventBase, StreamingEvent
from .items import FunctionOutput, Item
from .requests import CreateResponseBody, Input
from .responses import ResponseResource
from .tools import Tool, ToolChoiceParam


class ProtocolDecodeError(ValueError):
    """Raised when a payload is not valid JSON or does not match the schema."""


class UnknownDiscriminantError(ProtocolDecodeError):
    """Raised when a tagged union's ``type`` is missing or not recognized.

    ``is_object`` is false when the value in the union's place was not a JSON
    object at all, so it could not carry a ``type`` field.
    """

    def __init__(
        self,
        *,
        union: str,
        value: str | None,
        location: tuple[Any, ...] = (),
        is_object: bool = True,
    ) -> None:
        where = f" at {'.'.join(str(part) for part in location)}" if location else ""
        if not is_object:
            message = f"expected a JSON object for {union}{where}"
        elif value is None:
            message = f"missing {union} discriminant{where}"
        else:
            message = f"unrecognized {union} discriminant {value!r}{where}"
        super().__init__(message)
        self.union = union
        self.value = value
        self.location = location
        self.is_object = is_object


class UnmatchedShapeError(ProtocolDecodeError):
    """Raised when a value matches none of an untagged union's shapes."""

    def __init__(self, *, union: str, location: tuple[Any, ...] = ()) -> None:
        where = f" at {'.'.join(str(part) for part in location)}" if location else ""
        super().__init__(f"value does not match any {union} shape{where}")
        self.union = union
        self.location = location


_ITEM = TypeAdapter(Item)
_CONTENT = TypeAdapter(Content)
_TOOL = TypeAdapter(Tool)
_INPUT = TypeAdapter(Input)
_FUNCTION_OUTPUT = TypeAdapter(FunctionOutput)
_TOOL_CHOICE = TypeAdapter(ToolChoiceParam)
_EVENT = TypeAdapter(StreamingEvent)


def to_payload(model: BaseModel) -> dict[str, Any]:
    """Dump a protocol model to JSON-compatible data, omitting absent fields."""
    return model.model_dump(mode="json", by_alias=True)


def _dumps(payload: Any) -> bytes:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def encode(model: BaseModel) -> bytes:
    """Encode a protocol model to compact UTF-8 JSON."""
    return _dumps(to_payload(model))


def encode_input(value: Any) -> bytes:
    return _dumps(_INPUT.dump_python(value, mode="json", by_alias=True))


def encode_function_output(value: Any) -> bytes:
    return _dumps(_FUNCTION_OUTPUT.dump_python(value, mode="json", by_alias=True))


def encode_tool_choice(value: Any) -> bytes:
    return _dumps(_TOOL_CHOICE.dump_python(value, mode="json", by_alias=True))


def decode_json(raw: str | bytes) -> Any:
    """Parse raw text into a JSON value without applying any schema."""
    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ProtocolDecodeError("payload is not valid UTF-8") from exc
    else:
        text = raw

    if not text.strip():
        raise ProtocolDecodeError("payload is empty")

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProtocolDecodeError(f"payload is not valid JSON: {exc.msg}") from exc


def decode_item(raw: str | bytes) -> ProtocolModel:
    return _validate(_ITEM, decode_json(raw), target="Item")


def decode_content(raw: str | bytes) -> ProtocolModel:
    return _validate(_CONTENT, decode_json(raw), target="Content")


def decode_tool(raw: str | bytes) -> ProtocolModel:
    return _validate(_TOOL, decode_json(raw), target="Tool")


def decode_input(raw: str | bytes) -> str | list[ProtocolModel]:
    return _validate(_INPUT, decode_json(raw), target="Input")


def decode_function_output(raw: str | bytes) -> str | list[ProtocolModel]:
    return _validate(_FUNCTION_OUTPUT, decode_json(raw), target="FunctionOutput")


def decode_tool_choice(raw: str | bytes) -> str | ProtocolModel:
    return _validate(_TOOL_CHOICE, decode_json(raw), target="ToolChoiceParam")


def decode_request(raw: str | bytes) -> CreateResponseBody:
    data = _require_object(decode_json(raw), target="CreateResponseBody")
    try:
        return CreateResponseBody.model_validate(data)
    except ValidationError as exc:
        _raise_decode_error(exc, data, target="CreateResponseBody")


def decode_response(raw: str | bytes) -> ResponseResource:
    data = _require_object(decode_json(raw), target="ResponseResource")
    try:
        return ResponseResource.model_validate(data)
    except ValidationError as exc:
        _raise_decode_error(exc, data, target="ResponseResource")


def decode_event(raw: str | bytes) -> StreamEventBase:
    """Decode one SSE data payload into a ``StreamingEvent`` variant."""
    data = _require_object(decode_json(raw), target="StreamingEvent")
    return _validate(_EVENT, data, target="StreamingEvent")


def _require_object(data: Any, *, target: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ProtocolDecodeError(f"{target} payload must be a JSON object")
    return data


def _validate(adapter: TypeAdapter[Any], data: Any, *, target: str) -> Any:
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        _raise_decode_error(exc, data, target=target)


def _payload_location(loc: tuple[Any, ...], data: Any) -> tuple[Any, ...]:
    """Map a pydantic error location onto the payload, dropping union tag segments."""
    location: list[Any] = []
    node = data
    # tag segments come first for each node: shape tag, then type tag
    shape_seen = type_seen = False
    for part in loc:
        if isinstance(node, Mapping):
            if not type_seen and part in TYPE_TAGS and part == type_tag(node):
                type_seen = True
                continue
            if not (shape_seen or type_seen) and part in SHAPE_TAGS and part not in node:
                shape_seen = True
                continue
            location.append(part)
            node = node.get(part)
        elif isinstance(node, (list, tuple)) and isinstance(part, int):
            location.append(part)
            node = node[part] if 0 <= part < len(node) else None
        elif not shape_seen and part in SHAPE_TAGS:
            shape_seen = True
            continue
        else:
            location.append(part)
            node = None
        shape_seen = type_seen = False
    return tuple(location)


def _raise_decode_error(exc: ValidationError, data: Any, *, target: str) -> NoReturn:
    # Discriminant and shape failures win over the field errors they cause.
    for error in exc.errors():
        error_type = error["type"]
        location = _payload_location(tuple(error["loc"]), data)
        if error_type in TAGGED_UNION_ERRORS:
            raw_input = error.get("input")
            is_object = isinstance(raw_input, Mapping)
            raise UnknownDiscriminantError(
                union=TAGGED_UNION_ERRORS[error_type],
                value=type_tag(raw_input) if is_object else None,
                location=location,
                is_object=is_object,
            ) from exc
        if error_type in SHAPE_UNION_ERRORS:
            raise UnmatchedShapeError(
                union=SHAPE_UNION_ERRORS[error_type],
                location=location,
            ) from exc
    raise ProtocolDecodeError(f"invalid {target} payload: {exc}") from exc
