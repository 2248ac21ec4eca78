"""openresponses package."""

from .client import (
    AsyncEventStream,
    AsyncResponsesClient,
    EventStream,
    ResponseDecodeError,
    ResponsesAPIError,
    ResponsesClient,
    ResponsesClientError,
    ResponsesTimeoutError,
    ResponsesTransportError,
)
from .core import (
    CreateResponseBody,
    Done,
    ErrorEvent,
    FunctionCall,
    FunctionCallOutput,
    FunctionTool,
    InputText,
    ItemReference,
    McpTool,
    Message,
    OutputText,
    OutputTextDeltaEvent,
    ProtocolDecodeError,
    Reasoning,
    ResponseResource,
    UnknownDiscriminantError,
    UnmatchedShapeError,
)
from .core.config import ClientSettings, ConfigError, load_settings

__all__ = [
    "AsyncEventStream",
    "AsyncResponsesClient",
    "ClientSettings",
    "ConfigError",
    "CreateResponseBody",
    "Done",
    "ErrorEvent",
    "EventStream",
    "FunctionCall",
    "FunctionCallOutput",
    "FunctionTool",
    "InputText",
    "ItemReference",
    "McpTool",
    "Message",
    "OutputText",
    "OutputTextDeltaEvent",
    "ProtocolDecodeError",
    "Reasoning",
    "ResponseDecodeError",
    "ResponseResource",
    "ResponsesAPIError",
    "ResponsesClient",
    "ResponsesClientError",
    "ResponsesTimeoutError",
    "ResponsesTransportError",
    "UnknownDiscriminantError",
    "UnmatchedShapeError",
    "__version__",
    "load_settings",
]
__version__ = "0.1.0"
