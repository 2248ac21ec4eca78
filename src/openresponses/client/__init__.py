"""HTTP clients for creating and streaming responses."""

from .exceptions import (
    ErrorMetadata,
    ResponseDecodeError,
    ResponsesAPIError,
    ResponsesClientError,
    ResponsesTimeoutError,
    ResponsesTransportError,
)
from .http import (
    RESPONSES_PATH,
    AsyncResponsesClient,
    ResponsesClient,
)
from .stream import AsyncEventStream, EventStream

__all__ = [
    "RESPONSES_PATH",
    "AsyncEventStream",
    "AsyncResponsesClient",
    "ErrorMetadata",
    "EventStream",
    "ResponseDecodeError",
    "ResponsesAPIError",
    "ResponsesClient",
    "ResponsesClientError",
    "ResponsesTimeoutError",
    "ResponsesTransportError",
]
