"""HTTP clients for the ``/responses`` endpoint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from openresponses.core.codec import ProtocolDecodeError, decode_response, to_payload
from openresponses.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ClientSettings,
    load_settings,
    normalize_base_url,
)
from openresponses.core.requests import CreateResponseBody
from openresponses.core.responses import ResponseResource

from .exceptions import ResponseDecodeError, ResponsesAPIError, ResponsesClientError
from .stream import AsyncEventStream, EventStream, map_transport_error

logger = logging.getLogger(__name__)

RESPONSES_PATH = "/responses"
JSON_CONTENT_TYPE = "application/json"
EVENT_STREAM_CONTENT_TYPE = "text/event-stream"


class _ClientBase:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._api_key = api_key
        self._base_url = normalize_base_url(base_url)
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}{RESPONSES_PATH}"

    def _headers(self, *, accept: str) -> dict[str, str]:
        headers = {"Accept": accept, "Content-Type": JSON_CONTENT_TYPE}
        token = self._api_key.strip()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _stream_timeout(self) -> httpx.Timeout:
        # SSE responses can stay idle between events.
        return httpx.Timeout(self._timeout, read=None)


class ResponsesClient(_ClientBase):
    """Synchronous client for creating and streaming responses."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(api_key, base_url, timeout)
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> ResponsesClient:
        return cls(settings.api_key, settings.base_url, settings.timeout, transport=transport)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        **overrides: Any,
    ) -> ResponsesClient:
        """Build a client from ``OPENRESPONSES_*`` environment variables."""
        return cls.from_settings(load_settings(environ, **overrides), transport=transport)

    def create_response(self, body: CreateResponseBody) -> ResponseResource:
        """Submit a request and wait for the complete response resource."""
        action = _action("create response", body)
        text = self._post(body, action=action).text
        return _decode_resource(text, action=action)

    def create_response_raw(self, body: CreateResponseBody) -> str:
        """Submit a request and return the undecoded response body."""
        return self._post(body, action=_action("create response", body)).text

    def stream_response(self, body: CreateResponseBody) -> EventStream:
        """Submit a streaming request and return its event stream.

        The HTTP status is checked before returning, so a rejected request
        raises :class:`ResponsesAPIError` here rather than while iterating.
        """
        action = _action("stream response", body)
        payload = to_payload(body.model_copy(update={"stream": True}))
        client = httpx.Client(timeout=self._stream_timeout(), transport=self._transport)
        logger.debug("POST %s (%s)", self.endpoint, action)
        try:
            request = client.build_request(
                "POST",
                self.endpoint,
                json=payload,
                headers=self._headers(accept=EVENT_STREAM_CONTENT_TYPE),
            )
            response = client.send(request, stream=True)
        except httpx.HTTPError as exc:
            client.close()
            raise map_transport_error(exc, action=action) from exc

        if not response.is_success:
            try:
                response.read()
                error: ResponsesClientError = ResponsesAPIError(
                    action=action,
                    status_code=response.status_code,
                    body=response.text,
                )
            except httpx.HTTPError as exc:
                error = map_transport_error(exc, action=action)
            finally:
                response.close()
                client.close()
            raise error
        return EventStream(response, client=client, action=action)

    def _post(self, body: CreateResponseBody, *, action: str) -> httpx.Response:
        payload = to_payload(body)
        logger.debug("POST %s (%s)", self.endpoint, action)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(
                    self.endpoint,
                    json=payload,
                    headers=self._headers(accept=JSON_CONTENT_TYPE),
                )
        except httpx.HTTPError as exc:
            raise map_transport_error(exc, action=action) from exc

        if not response.is_success:
            raise ResponsesAPIError(
                action=action,
                status_code=response.status_code,
                body=response.text,
            )
        return response


class AsyncResponsesClient(_ClientBase):
    """Async client with the same surface as :class:`ResponsesClient`."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(api_key, base_url, timeout)
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> AsyncResponsesClient:
        return cls(settings.api_key, settings.base_url, settings.timeout, transport=transport)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: Any,
    ) -> AsyncResponsesClient:
        return cls.from_settings(load_settings(environ, **overrides), transport=transport)

    async def create_response(self, body: CreateResponseBody) -> ResponseResource:
        action = _action("create response", body)
        response = await self._post(body, action=action)
        return _decode_resource(response.text, action=action)

    async def create_response_raw(self, body: CreateResponseBody) -> str:
        response = await self._post(body, action=_action("create response", body))
        return response.text

    async def stream_response(self, body: CreateResponseBody) -> AsyncEventStream:
        action = _action("stream response", body)
        payload = to_payload(body.model_copy(update={"stream": True}))
        client = httpx.AsyncClient(timeout=self._stream_timeout(), transport=self._transport)
        logger.debug("POST %s (%s)", self.endpoint, action)
        try:
            request = client.build_request(
                "POST",
                self.endpoint,
                json=payload,
                headers=self._headers(accept=EVENT_STREAM_CONTENT_TYPE),
            )
            response = await client.send(request, stream=True)
        except httpx.HTTPError as exc:
            await client.aclose()
            raise map_transport_error(exc, action=action) from exc

        if not response.is_success:
            try:
                await response.aread()
                error: ResponsesClientError = ResponsesAPIError(
                    action=action,
                    status_code=response.status_code,
                    body=response.text,
                )
            except httpx.HTTPError as exc:
                error = map_transport_error(exc, action=action)
            finally:
                await response.aclose()
                await client.aclose()
            raise error
        return AsyncEventStream(response, client=client, action=action)

    async def _post(self, body: CreateResponseBody, *, action: str) -> httpx.Response:
        payload = to_payload(body)
        logger.debug("POST %s (%s)", self.endpoint, action)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.endpoint,
                    json=payload,
                    headers=self._headers(accept=JSON_CONTENT_TYPE),
                )
        except httpx.HTTPError as exc:
            raise map_transport_error(exc, action=action) from exc

        if not response.is_success:
            raise ResponsesAPIError(
                action=action,
                status_code=response.status_code,
                body=response.text,
            )
        return response


def _action(verb: str, body: CreateResponseBody) -> str:
    if body.model:
        return f"{verb} with model {body.model!r}"
    return verb


def _decode_resource(text: str, *, action: str) -> ResponseResource:
    try:
        return decode_response(text)
    except ProtocolDecodeError as exc:
        raise ResponseDecodeError(action=action, detail=str(exc), raw=text) from exc
