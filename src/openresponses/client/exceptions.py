"""Typed client-side exception hierarchy for responses API calls."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ErrorMetadata:
    """Structured metadata telling callers how to react to an error."""

    category: str
    retryable: bool


class ResponsesClientError(RuntimeError):
    """Base error for responses client operations."""

    metadata = ErrorMetadata(category="INTERNAL_ERROR", retryable=False)

    def __init__(
        self,
        *,
        action: str,
        detail: str,
        status_code: int | None = None,
    ) -> None:
        message = f"{action} failed"
        if status_code is not None:
            message = f"{message} with HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.action = action
        self.detail = detail
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.metadata.retryable

    @property
    def category(self) -> str:
        return self.metadata.category


class ResponsesAPIError(ResponsesClientError):
    """Provider rejected the request with a non-success HTTP status.

    ``message`` is the raw response body; it is not parsed because the error
    payload shape differs between providers.
    """

    metadata = ErrorMetadata(category="API_ERROR", retryable=False)

    def __init__(self, *, action: str, status_code: int, body: str) -> None:
        super().__init__(action=action, detail=body, status_code=status_code)
        self.code = str(status_code)
        self.message = body

    @property
    def retryable(self) -> bool:
        return self.status_code == 429 or (self.status_code or 0) >= 500


class ResponsesTransportError(ResponsesClientError):
    """Connection failed or dropped before a complete answer arrived."""

    metadata = ErrorMetadata(category="TRANSPORT", retryable=True)


class ResponsesTimeoutError(ResponsesTransportError):
    """Request or stream read timed out."""

    metadata = ErrorMetadata(category="TIMEOUT", retryable=True)


class ResponseDecodeError(ResponsesClientError):
    """Payload was not valid JSON or did not match the protocol schema."""

    metadata = ErrorMetadata(category="DECODE_ERROR", retryable=False)

    def __init__(self, *, action: str, detail: str, raw: str | None = None) -> None:
        super().__init__(action=action, detail=detail)
        self.raw = raw
