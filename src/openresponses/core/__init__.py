"""Protocol type model, codec and streaming decoder."""

from .codec import (
    ProtocolDecodeError,
    UnknownDiscriminantError,
    UnmatchedShapeError,
    decode_content,
    decode_event,
    decode_function_output,
    decode_input,
    decode_item,
    decode_json,
    decode_request,
    decode_response,
    decode_tool,
    decode_tool_choice,
    encode,
    encode_function_output,
    encode_input,
    encode_tool_choice,
    to_payload,
)
from .content import (
    Annotation,
    ContainerFileCitation,
    Content,
    FileCitation,
    FilePath,
    InputFile,
    InputImage,
    InputText,
    InputVideo,
    LogProb,
    OutputText,
    PlainText,
    ReasoningText,
    Refusal,
    SummaryText,
    TopLogProb,
    UrlCitation,
)
from .events import (
    DONE_SENTINEL,
    ContentPartAddedEvent,
    ContentPartDoneEvent,
    Done,
    ErrorEvent,
    ErrorPayload,
    FunctionCallArgumentsDeltaEvent,
    FunctionCallArgumentsDoneEvent,
    OutputItemAddedEvent,
    OutputItemDoneEvent,
    OutputTextAnnotationAddedEvent,
    OutputTextDeltaEvent,
    OutputTextDoneEvent,
    ReasoningDeltaEvent,
    ReasoningDoneEvent,
    ReasoningSummaryPartAddedEvent,
    ReasoningSummaryPartDoneEvent,
    ReasoningSummaryTextDeltaEvent,
    ReasoningSummaryTextDoneEvent,
    RefusalDeltaEvent,
    RefusalDoneEvent,
    ResponseCompletedEvent,
    ResponseCreatedEvent,
    ResponseFailedEvent,
    ResponseIncompleteEvent,
    ResponseInProgressEvent,
    ResponseQueuedEvent,
    StreamingEvent,
)
from .items import (
    FunctionCall,
    FunctionCallOutput,
    FunctionOutput,
    Item,
    ItemReference,
    Message,
    Reasoning,
)
from .requests import (
    CreateResponseBody,
    Input,
    JsonObjectFormat,
    JsonSchemaFormat,
    PlainTextFormat,
    ReasoningConfig,
    StreamOptions,
    TextFormat,
    TextParam,
)
from .responses import (
    IncompleteDetails,
    InputTokensDetails,
    OutputTokensDetails,
    ResponseError,
    ResponseResource,
    Usage,
)
from .streaming import (
    SSEFrame,
    StreamDecoder,
    StreamResult,
    StreamState,
    aiter_sse_frames,
    decode_frames,
    iter_sse_frames,
)
from .tools import (
    AllowedToolsChoice,
    FunctionTool,
    McpTool,
    SpecificToolChoice,
    Tool,
    ToolChoiceParam,
)

__all__ = [
    "DONE_SENTINEL",
    "AllowedToolsChoice",
    "Annotation",
    "ContainerFileCitation",
    "Content",
    "ContentPartAddedEvent",
    "ContentPartDoneEvent",
    "CreateResponseBody",
    "Done",
    "ErrorEvent",
    "ErrorPayload",
    "FileCitation",
    "FilePath",
    "FunctionCall",
    "FunctionCallArgumentsDeltaEvent",
    "FunctionCallArgumentsDoneEvent",
    "FunctionCallOutput",
    "FunctionOutput",
    "FunctionTool",
    "IncompleteDetails",
    "Input",
    "InputFile",
    "InputImage",
    "InputText",
    "InputTokensDetails",
    "InputVideo",
    "Item",
    "ItemReference",
    "JsonObjectFormat",
    "JsonSchemaFormat",
    "LogProb",
    "McpTool",
    "Message",
    "OutputItemAddedEvent",
    "OutputItemDoneEvent",
    "OutputText",
    "OutputTextAnnotationAddedEvent",
    "OutputTextDeltaEvent",
    "OutputTextDoneEvent",
    "OutputTokensDetails",
    "PlainText",
    "PlainTextFormat",
    "ProtocolDecodeError",
    "Reasoning",
    "ReasoningConfig",
    "ReasoningDeltaEvent",
    "ReasoningDoneEvent",
    "ReasoningSummaryPartAddedEvent",
    "ReasoningSummaryPartDoneEvent",
    "ReasoningSummaryTextDeltaEvent",
    "ReasoningSummaryTextDoneEvent",
    "ReasoningText",
    "Refusal",
    "RefusalDeltaEvent",
    "RefusalDoneEvent",
    "ResponseCompletedEvent",
    "ResponseCreatedEvent",
    "ResponseError",
    "ResponseFailedEvent",
    "ResponseIncompleteEvent",
    "ResponseInProgressEvent",
    "ResponseQueuedEvent",
    "ResponseResource",
    "SSEFrame",
    "SpecificToolChoice",
    "StreamDecoder",
    "StreamOptions",
    "StreamResult",
    "StreamState",
    "StreamingEvent",
    "SummaryText",
    "TextFormat",
    "TextParam",
    "Tool",
    "ToolChoiceParam",
    "TopLogProb",
    "UnknownDiscriminantError",
    "UnmatchedShapeError",
    "Usage",
    "UrlCitation",
    "aiter_sse_frames",
    "decode_content",
    "decode_event",
    "decode_frames",
    "decode_function_output",
    "decode_input",
    "decode_item",
    "decode_json",
    "decode_request",
    "decode_response",
    "decode_tool",
    "decode_tool_choice",
    "encode",
    "encode_function_output",
    "encode_input",
    "encode_tool_choice",
    "iter_sse_frames",
    "to_payload",
]
