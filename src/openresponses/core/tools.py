"""Tool definitions and tool-choice parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import JsonValue

from .base import ProtocolModel, shape_union, tagged_union
from .enums import ToolChoice


class FunctionTool(ProtocolModel):
    """Function the model may call, described by a JSON schema."""

    type: Literal["function"] = "function"
    name: str
    description: str | None = None
    parameters: dict[str, JsonValue] | None = None
    strict: bool | None = None

    @classmethod
    def named(cls, name: str) -> FunctionTool:
        return cls(name=name)

    def with_description(self, description: str) -> FunctionTool:
        return self.model_copy(update={"description": description})

    def with_parameters(self, parameters: dict[str, JsonValue]) -> FunctionTool:
        return self.model_copy(update={"parameters": parameters})

    def with_strict(self, strict: bool = True) -> FunctionTool:
        return self.model_copy(update={"strict": strict})


class McpTool(ProtocolModel):
    """Remote MCP server whose tools are exposed to the model."""

    type: Literal["mcp"] = "mcp"
    server_label: str
    server_url: str
    allowed_tools: list[str] | None = None

    @classmethod
    def for_server(cls, label: str, url: str) -> McpTool:
        return cls(server_label=label, server_url=url)

    def with_allowed_tools(self, tools: list[str]) -> McpTool:
        return self.model_copy(update={"allowed_tools": list(tools)})


Tool = tagged_union("Tool", FunctionTool, McpTool)


class SpecificToolChoice(ProtocolModel):
    """Force one named tool, e.g. ``{"type": "function", "name": "get_weather"}``."""

    type: str
    name: str


class AllowedToolsChoice(ProtocolModel):
    """Restrict the model to a subset of the declared tools."""

    type: str = "allowed_tools"
    tools: list[SpecificToolChoice]
    mode: ToolChoice


def _tool_choice_shape(value: Any) -> str | None:
    # string, then object carrying a tools array, then {type, name} object
    if isinstance(value, str):
        return "simple"
    if isinstance(value, AllowedToolsChoice):
        return "allowed"
    if isinstance(value, SpecificToolChoice):
        return "specific"
    if isinstance(value, Mapping):
        if "tools" in value:
            return "allowed"
        if "name" in value:
            return "specific"
    return None


ToolChoiceParam = shape_union(
    "ToolChoiceParam",
    _tool_choice_shape,
    {
        "simple": ToolChoice,
        "specific": SpecificToolChoice,
        "allowed": AllowedToolsChoice,
    },
)
