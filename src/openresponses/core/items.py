"""Conversation items shared by request input and response output."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import Field

from .base import ProtocolModel, shape_union, tagged_union
from .content import Content, InputText, OutputText
from .enums import ItemStatus, MessageRole


def _function_output_shape(value: Any) -> str | None:
    if isinstance(value, str):
        return "text"
    if isinstance(value, (list, tuple)):
        return "content"
    return None


# JSON string -> "text", JSON array -> "content"; nothing else is accepted.
FunctionOutput = shape_union(
    "FunctionOutput",
    _function_output_shape,
    {"text": str, "content": list[Content]},
)


class Message(ProtocolModel):
    """Message authored by a user, the model, or the system."""

    type: Literal["message"] = "message"
    id: str | None = None
    status: ItemStatus | None = None
    role: MessageRole
    content: list[Content]

    @classmethod
    def user(cls, text: str) -> Message:
        return cls(role="user", content=[InputText(text=text)])

    @classmethod
    def user_parts(cls, content: list[Content]) -> Message:
        """User message built from explicit content parts, e.g. text plus an image."""
        return cls(role="user", content=list(content))

    @classmethod
    def assistant(cls, text: str) -> Message:
        return cls(role="assistant", content=[OutputText(text=text)])

    @classmethod
    def system(cls, text: str) -> Message:
        return cls(role="system", content=[InputText(text=text)])

    @classmethod
    def developer(cls, text: str) -> Message:
        return cls(role="developer", content=[InputText(text=text)])


class FunctionCall(ProtocolModel):
    """Tool invocation requested by the model; ``arguments`` is raw JSON text."""

    type: Literal["function_call"] = "function_call"
    id: str | None = None
    call_id: str
    name: str
    arguments: str
    status: ItemStatus

    def parsed_arguments(self) -> Any:
        """Decode ``arguments`` as JSON."""
        return json.loads(self.arguments)


class FunctionCallOutput(ProtocolModel):
    type: Literal["function_call_output"] = "function_call_output"
    id: str | None = None
    call_id: str
    output: FunctionOutput
    status: ItemStatus


class Reasoning(ProtocolModel):
    type: Literal["reasoning"] = "reasoning"
    id: str | None = None
    content: list[Content] | None = None
    summary: list[Content] = Field(default_factory=list)
    encrypted_content: str | None = None


class ItemReference(ProtocolModel):
    """Back-reference to an item produced earlier, resolved by the server."""

    type: Literal["item_reference"] = "item_reference"
    id: str

    @classmethod
    def to(cls, item_id: str) -> ItemReference:
        return cls(id=item_id)


Item = tagged_union("Item", Message, FunctionCall, FunctionCallOutput, Reasoning, ItemReference)
