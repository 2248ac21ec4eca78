"""SSE framing and the incremental streaming event decoder."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from dataclasses import dataclass
from typing import Literal, Union

from .codec import ProtocolDecodeError, decode_event
from .events import DONE_SENTINEL, Done, StreamEventBase

logger = logging.getLogger(__name__)

StreamState = Literal["streaming", "done", "failed"]
StreamResult = Union[StreamEventBase, Done, ProtocolDecodeError]  # noqa: UP007


@dataclass(frozen=True, slots=True)
class SSEFrame:
    """One dispatched SSE frame: event name plus joined ``data`` lines."""

    event: str
    data: str


class _FrameBuilder:
    def __init__(self) -> None:
        self._event = "message"
        self._data_lines: list[str] = []

    def push(self, raw_line: str) -> SSEFrame | None:
        line = raw_line.rstrip("\r\n")
        if not line:
            return self.flush()
        if line.startswith(":"):
            return None
        field, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if field == "event":
            self._event = value or "message"
        elif field == "data":
            self._data_lines.append(value)
        return None

    def flush(self) -> SSEFrame | None:
        frame = None
        if self._data_lines:
            frame = SSEFrame(event=self._event, data="\n".join(self._data_lines))
        self._event = "message"
        self._data_lines = []
        return frame


def iter_sse_frames(lines: Iterable[str]) -> Iterator[SSEFrame]:
    """Group SSE text lines into frames, dispatching on blank lines."""
    builder = _FrameBuilder()
    for line in lines:
        frame = builder.push(line)
        if frame is not None:
            yield frame
    frame = builder.flush()
    if frame is not None:
        yield frame


async def aiter_sse_frames(lines: AsyncIterable[str]) -> AsyncIterator[SSEFrame]:
    """Async counterpart of :func:`iter_sse_frames`."""
    builder = _FrameBuilder()
    async for line in lines:
        frame = builder.push(line)
        if frame is not None:
            yield frame
    frame = builder.flush()
    if frame is not None:
        yield frame


class StreamDecoder:
    """Decode frame payloads one at a time: ``streaming -> done | failed``.

    A payload that fails to decode is returned as a :class:`ProtocolDecodeError`
    value and leaves the decoder streaming. ``[DONE]`` ends the stream; it is
    matched after stripping surrounding whitespace, so ``" [DONE] "`` also
    terminates.
    """

    def __init__(self) -> None:
        self._state: StreamState = "streaming"
        self._frames = 0

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def finished(self) -> bool:
        return self._state != "streaming"

    @property
    def frames(self) -> int:
        return self._frames

    def feed(self, payload: str) -> StreamResult:
        if self.finished:
            raise RuntimeError(f"stream decoder is already {self._state}")
        self._frames += 1
        if payload.strip() == DONE_SENTINEL:
            self._state = "done"
            logger.debug("stream finished after %d frames", self._frames)
            return Done()
        try:
            return decode_event(payload)
        except ProtocolDecodeError as exc:
            logger.warning("skipping undecodable stream frame %d: %s", self._frames, exc)
            return exc

    def fail(self) -> None:
        self._state = "failed"

    def finish(self) -> None:
        if self._state == "streaming":
            logger.debug("stream ended without %s after %d frames", DONE_SENTINEL, self._frames)
            self._state = "done"


def decode_frames(payloads: Iterable[str]) -> Iterator[StreamResult]:
    """Lazily decode frame payloads in arrival order, stopping after ``[DONE]``."""
    decoder = StreamDecoder()
    for payload in payloads:
        yield decoder.feed(payload)
        if decoder.finished:
            return
    decoder.finish()
