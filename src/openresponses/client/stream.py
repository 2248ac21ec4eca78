"""Event streams that decode an open SSE response on demand."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, AsyncIterator, Generator, Iterator
from typing import Any

import httpx

from openresponses.core.codec import ProtocolDecodeError
from openresponses.core.streaming import (
    StreamDecoder,
    StreamState,
    aiter_sse_frames,
    iter_sse_frames,
)

from .exceptions import ResponseDecodeError, ResponsesTimeoutError, ResponsesTransportError

logger = logging.getLogger(__name__)


def map_transport_error(exc: httpx.HTTPError, *, action: str) -> ResponsesTransportError:
    """Translate an httpx failure into the client's transport error types."""
    detail = str(exc) or type(exc).__name__
    if isinstance(exc, httpx.TimeoutException):
        return ResponsesTimeoutError(action=action, detail=detail)
    return ResponsesTransportError(action=action, detail=detail)


def _as_client_result(result: Any, payload: str) -> Any:
    if not isinstance(result, ProtocolDecodeError):
        return result
    error = ResponseDecodeError(action="decode stream frame", detail=str(result), raw=payload)
    error.__cause__ = result
    return error


class EventStream:
    """Single-pass iterator over the decoded events of one streaming response.

    Yields ``StreamingEvent`` values, a final ``Done``, and error values:
    a :class:`ResponseDecodeError` for a frame that does not decode (the stream
    continues) or a :class:`ResponsesTransportError` when the connection fails
    (the stream ends). The HTTP response is closed once the stream ends.
    """

    def __init__(
        self,
        response: httpx.Response,
        *,
        client: httpx.Client | None = None,
        action: str = "stream response",
    ) -> None:
        self._response = response
        self._client = client
        self._action = action
        self._decoder = StreamDecoder()
        self._results: Generator[Any, None, None] | None = None
        self._released = False

    @property
    def state(self) -> StreamState:
        return self._decoder.state

    @property
    def response(self) -> httpx.Response:
        return self._response

    def __iter__(self) -> Iterator[Any]:
        if self._results is None:
            self._results = self._iter_results()
        return self._results

    def __next__(self) -> Any:
        return next(iter(self))

    def __enter__(self) -> EventStream:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def iter_data(self) -> Iterator[str]:
        """Yield raw frame payloads without decoding; transport errors are raised."""
        try:
            yield from self._frames()
        finally:
            self._release()

    def close(self) -> None:
        if self._results is not None:
            self._results.close()
        self._release()

    def _iter_results(self) -> Generator[Any, None, None]:
        frames = self._frames()
        try:
            while not self._decoder.finished:
                try:
                    payload = next(frames)
                except StopIteration:
                    self._decoder.finish()
                    break
                except ResponsesTransportError as exc:
                    self._decoder.fail()
                    logger.warning("%s: stream aborted: %s", self._action, exc.detail)
                    yield exc
                    break
                yield _as_client_result(self._decoder.feed(payload), payload)
        finally:
            frames.close()
            self._release()

    def _frames(self) -> Generator[str, None, None]:
        try:
            for frame in iter_sse_frames(self._response.iter_lines()):
                yield frame.data
        except httpx.HTTPError as exc:
            raise map_transport_error(exc, action=self._action) from exc

    def _release(self) -> None:
        if self._released:
            return
        self._released = True
        self._response.close()
        if self._client is not None:
            self._client.close()


class AsyncEventStream:
    """Async counterpart of :class:`EventStream`."""

    def __init__(
        self,
        response: httpx.Response,
        *,
        client: httpx.AsyncClient | None = None,
        action: str = "stream response",
    ) -> None:
        self._response = response
        self._client = client
        self._action = action
        self._decoder = StreamDecoder()
        self._results: AsyncGenerator[Any, None] | None = None
        self._released = False

    @property
    def state(self) -> StreamState:
        return self._decoder.state

    @property
    def response(self) -> httpx.Response:
        return self._response

    def __aiter__(self) -> AsyncIterator[Any]:
        if self._results is None:
            self._results = self._iter_results()
        return self._results

    async def __anext__(self) -> Any:
        return await anext(self.__aiter__())

    async def __aenter__(self) -> AsyncEventStream:
        return self

    async def __aexit__(self, *_args: object) -> None:
        await self.aclose()

    async def iter_data(self) -> AsyncIterator[str]:
        try:
            async for payload in self._frames():
                yield payload
        finally:
            await self._release()

    async def aclose(self) -> None:
        if self._results is not None:
            await self._results.aclose()
        await self._release()

    async def _iter_results(self) -> AsyncGenerator[Any, None]:
        frames = self._frames()
        try:
            while not self._decoder.finished:
                try:
                    payload = await anext(frames)
                except StopAsyncIteration:
                    self._decoder.finish()
                    break
                except ResponsesTransportError as exc:
                    self._decoder.fail()
                    logger.warning("%s: stream aborted: %s", self._action, exc.detail)
                    yield exc
                    break
                yield _as_client_result(self._decoder.feed(payload), payload)
        finally:
            await frames.aclose()
            await self._release()

    async def _frames(self) -> AsyncGenerator[str, None]:
        try:
            async for frame in aiter_sse_frames(self._response.aiter_lines()):
                yield frame.data
        except httpx.HTTPError as exc:
            raise map_transport_error(exc, action=self._action) from exc

    async def _release(self) -> None:
        if self._released:
            return
        self._released = True
        await self._response.aclose()
        if self._client is not None:
            await self._client.aclose()
