"""Response resource returned by ``POST /responses``."""

from __future__ import annotations

from pydantic import Field

from .base import ProtocolModel
from .content import OutputText
from .enums import ErrorType, Truncation
from .items import Item, Message
from .requests import ReasoningConfig, TextParam
from .tools import Tool, ToolChoiceParam


class IncompleteDetails(ProtocolModel):
    reason: str


class ResponseError(ProtocolModel):
    """Failure recorded on a response resource."""

    type: ErrorType
    code: str | None = None
    message: str
    param: str | None = None


class InputTokensDetails(ProtocolModel):
    cached_tokens: int = 0


class OutputTokensDetails(ProtocolModel):
    reasoning_tokens: int = 0


class Usage(ProtocolModel):
    """Token accounting for one response."""

    input_tokens: int
    output_tokens: int
    total_tokens: int
    input_tokens_details: InputTokensDetails = Field(default_factory=InputTokensDetails)
    output_tokens_details: OutputTokensDetails = Field(default_factory=OutputTokensDetails)


class ResponseResource(ProtocolModel):
    """Synchronous result of a response request.

    ``status`` and ``service_tier`` stay plain strings because providers
    extend them beyond the documented values. Echoed request configuration is
    optional so that partial snapshots in stream events decode as well.
    """

    id: str
    object: str = "response"
    created_at: int
    completed_at: int | None = None
    status: str
    incomplete_details: IncompleteDetails | None = None
    model: str
    previous_response_id: str | None = None
    instructions: str | None = None
    output: list[Item] = Field(default_factory=list)
    error: ResponseError | None = None
    tools: list[Tool] = Field(default_factory=list)
    tool_choice: ToolChoiceParam = "auto"
    truncation: Truncation = "auto"
    parallel_tool_calls: bool | None = None
    text: TextParam | None = None
    top_p: float | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    top_logprobs: int | None = None
    temperature: float | None = None
    reasoning: ReasoningConfig | None = None
    usage: Usage | None = None
    max_output_tokens: int | None = None
    max_tool_calls: int | None = None
    store: bool | None = None
    background: bool | None = None
    service_tier: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    safety_identifier: str | None = None
    prompt_cache_key: str | None = None

    @property
    def output_text(self) -> str:
        """Concatenate every ``output_text`` part of the assistant messages."""
        parts: list[str] = []
        for item in self.output:
            if not isinstance(item, Message) or item.role != "assistant":
                continue
            for part in item.content:
                if isinstance(part, OutputText):
                    parts.append(part.text)
        return "".join(parts)
