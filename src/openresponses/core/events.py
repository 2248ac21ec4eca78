"""Streaming events delivered as SSE frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .base import ProtocolModel, tagged_union
from .content import Annotation, Content, LogProb
from .items import Item
from .responses import ResponseResource

DONE_SENTINEL = "[DONE]"


@dataclass(frozen=True, slots=True)
class Done:
    """Terminal pseudo-event for the non-JSON ``[DONE]`` frame."""

    def __str__(self) -> str:
        return DONE_SENTINEL


class StreamEventBase(ProtocolModel):
    """Fields shared by every event; ``sequence_number`` is the provider's counter."""

    sequence_number: int


class ResponseSnapshotEvent(StreamEventBase):
    response: ResponseResource


class ResponseCreatedEvent(ResponseSnapshotEvent):
    type: Literal["response.created"] = "response.created"


class ResponseQueuedEvent(ResponseSnapshotEvent):
    type: Literal["response.queued"] = "response.queued"


class ResponseInProgressEvent(ResponseSnapshotEvent):
    type: Literal["response.in_progress"] = "response.in_progress"


class ResponseCompletedEvent(ResponseSnapshotEvent):
    type: Literal["response.completed"] = "response.completed"


class ResponseFailedEvent(ResponseSnapshotEvent):
    type: Literal["response.failed"] = "response.failed"


class ResponseIncompleteEvent(ResponseSnapshotEvent):
    type: Literal["response.incomplete"] = "response.incomplete"


class OutputItemEvent(StreamEventBase):
    output_index: int
    item: Item


class OutputItemAddedEvent(OutputItemEvent):
    type: Literal["response.output_item.added"] = "response.output_item.added"


class OutputItemDoneEvent(OutputItemEvent):
    type: Literal["response.output_item.done"] = "response.output_item.done"


class ContentEvent(StreamEventBase):
    """Event addressing one content part of one output item."""

    item_id: str
    output_index: int
    content_index: int


class ContentPartAddedEvent(ContentEvent):
    type: Literal["response.content_part.added"] = "response.content_part.added"
    part: Content


class ContentPartDoneEvent(ContentEvent):
    type: Literal["response.content_part.done"] = "response.content_part.done"
    part: Content


class OutputTextDeltaEvent(ContentEvent):
    type: Literal["response.output_text.delta"] = "response.output_text.delta"
    delta: str
    logprobs: list[LogProb] | None = None
    obfuscation: str | None = None


class OutputTextDoneEvent(ContentEvent):
    type: Literal["response.output_text.done"] = "response.output_text.done"
    text: str
    logprobs: list[LogProb] | None = None


class RefusalDeltaEvent(ContentEvent):
    type: Literal["response.refusal.delta"] = "response.refusal.delta"
    delta: str


class RefusalDoneEvent(ContentEvent):
    type: Literal["response.refusal.done"] = "response.refusal.done"
    refusal: str


class ReasoningDeltaEvent(ContentEvent):
    type: Literal["response.reasoning.delta"] = "response.reasoning.delta"
    delta: str
    obfuscation: str | None = None


class ReasoningDoneEvent(ContentEvent):
    type: Literal["response.reasoning.done"] = "response.reasoning.done"
    text: str


class OutputTextAnnotationAddedEvent(ContentEvent):
    type: Literal["response.output_text.annotation.added"] = (
        "response.output_text.annotation.added"
    )
    annotation_index: int
    annotation: Annotation


class SummaryEvent(StreamEventBase):
    """Event addressing one summary part of a reasoning item."""

    item_id: str
    output_index: int
    summary_index: int


class ReasoningSummaryTextDeltaEvent(SummaryEvent):
    type: Literal["response.reasoning_summary_text.delta"] = (
        "response.reasoning_summary_text.delta"
    )
    delta: str
    obfuscation: str | None = None


class ReasoningSummaryTextDoneEvent(SummaryEvent):
    type: Literal["response.reasoning_summary_text.done"] = (
        "response.reasoning_summary_text.done"
    )
    text: str


class ReasoningSummaryPartAddedEvent(SummaryEvent):
    type: Literal["response.reasoning_summary_part.added"] = (
        "response.reasoning_summary_part.added"
    )
    part: Content


class ReasoningSummaryPartDoneEvent(SummaryEvent):
    type: Literal["response.reasoning_summary_part.done"] = (
        "response.reasoning_summary_part.done"
    )
    part: Content


class FunctionCallArgumentsDeltaEvent(StreamEventBase):
    type: Literal["response.function_call_arguments.delta"] = (
        "response.function_call_arguments.delta"
    )
    item_id: str
    output_index: int
    delta: str
    obfuscation: str | None = None


class FunctionCallArgumentsDoneEvent(StreamEventBase):
    type: Literal["response.function_call_arguments.done"] = (
        "response.function_call_arguments.done"
    )
    item_id: str
    output_index: int
    arguments: str


class ErrorPayload(ProtocolModel):
    """Application-level failure reported inside the stream."""

    type: str
    code: str | None = None
    message: str
    param: str | None = None
    headers: dict[str, str] | None = None


class ErrorEvent(StreamEventBase):
    """In-band error; a valid event that is terminal in practice."""

    type: Literal["error"] = "error"
    error: ErrorPayload


StreamingEvent = tagged_union(
    "StreamingEvent",
    ResponseCreatedEvent,
    ResponseQueuedEvent,
    ResponseInProgressEvent,
    ResponseCompletedEvent,
    ResponseFailedEvent,
    ResponseIncompleteEvent,
    OutputItemAddedEvent,
    OutputItemDoneEvent,
    ContentPartAddedEvent,
    ContentPartDoneEvent,
    OutputTextDeltaEvent,
    OutputTextDoneEvent,
    RefusalDeltaEvent,
    RefusalDoneEvent,
    ReasoningDeltaEvent,
    ReasoningDoneEvent,
    ReasoningSummaryTextDeltaEvent,
    ReasoningSummaryTextDoneEvent,
    ReasoningSummaryPartAddedEvent,
    ReasoningSummaryPartDoneEvent,
    OutputTextAnnotationAddedEvent,
    FunctionCallArgumentsDeltaEvent,
    FunctionCallArgumentsDoneEvent,
    ErrorEvent,
)
