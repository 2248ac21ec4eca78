"""Tests for SSE framing and the incremental stream decoder."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest

from openresponses.core import (
    Done,
    ErrorEvent,
    OutputTextDeltaEvent,
    ProtocolDecodeError,
    SSEFrame,
    StreamDecoder,
    UnknownDiscriminantError,
    aiter_sse_frames,
    decode_frames,
    iter_sse_frames,
)
from openresponses.core.events import StreamEventBase

DELTA = (
    '{"type":"response.output_text.delta","sequence_number":1,'
    '"item_id":"msg_1","output_index":0,"content_index":0,"delta":"Hi"}'
)


def test_frames_dispatch_on_blank_lines() -> None:
    lines = [
        "event: response.output_text.delta",
        f"data: {DELTA}",
        "",
        ": keep-alive",
        "",
        "data: [DONE]",
        "",
    ]

    frames = list(iter_sse_frames(lines))

    assert frames == [
        SSEFrame(event="response.output_text.delta", data=DELTA),
        SSEFrame(event="message", data="[DONE]"),
    ]


def test_multi_line_data_is_joined() -> None:
    frames = list(iter_sse_frames(["data: first\r\n", "data:second", "", "data: tail"]))

    assert frames == [
        SSEFrame(event="message", data="first\nsecond"),
        SSEFrame(event="message", data="tail"),
    ]


def test_frames_without_data_are_skipped() -> None:
    assert list(iter_sse_frames(["event: ping", "", "retry: 10", ""])) == []


@pytest.mark.asyncio
async def test_async_frames_match_sync_frames() -> None:
    lines = [f"data: {DELTA}", "", "data: [DONE]", ""]

    async def _lines() -> AsyncIterator[str]:
        for line in lines:
            yield line

    frames = [frame async for frame in aiter_sse_frames(_lines())]

    assert frames == list(iter_sse_frames(lines))


def test_delta_then_done_yields_two_results() -> None:
    results = list(decode_frames([DELTA, "[DONE]", DELTA]))

    assert len(results) == 2
    assert isinstance(results[0], OutputTextDeltaEvent)
    assert isinstance(results[0], StreamEventBase)
    assert results[0].delta == "Hi"
    assert results[1] == Done()


def test_done_stops_reading_further_frames() -> None:
    consumed: list[str] = []

    def _payloads():
        for payload in ["[DONE]", DELTA, DELTA]:
            consumed.append(payload)
            yield payload

    assert list(decode_frames(_payloads())) == [Done()]
    assert consumed == ["[DONE]"]


def test_bad_frame_is_reported_and_stream_continues() -> None:
    results = list(decode_frames(["{not json", DELTA, "[DONE]"]))

    assert isinstance(results[0], ProtocolDecodeError)
    assert isinstance(results[1], OutputTextDeltaEvent)
    assert results[2] == Done()


def test_decoder_states() -> None:
    decoder = StreamDecoder()
    assert decoder.state == "streaming"

    decoder.feed(DELTA)
    assert decoder.state == "streaming"

    assert decoder.feed(" [DONE] ") == Done()
    assert decoder.state == "done"
    assert decoder.finished
    assert decoder.frames == 2


def test_decoder_rejects_feed_after_finish() -> None:
    decoder = StreamDecoder()
    decoder.fail()

    assert decoder.state == "failed"
    with pytest.raises(RuntimeError, match="already failed"):
        decoder.feed(DELTA)


def test_stream_without_done_ends_cleanly() -> None:
    decoder = StreamDecoder()
    decoder.feed(DELTA)
    decoder.finish()

    assert decoder.state == "done"
    assert len(list(decode_frames([DELTA]))) == 1


def test_finish_keeps_failed_state() -> None:
    decoder = StreamDecoder()
    decoder.fail()
    decoder.finish()

    assert decoder.state == "failed"


def test_unknown_event_type_fails_only_its_frame() -> None:
    results = list(
        decode_frames(['{"type":"response.unknown_thing","sequence_number":1}', DELTA, "[DONE]"])
    )

    assert isinstance(results[0], UnknownDiscriminantError)
    assert isinstance(results[1], OutputTextDeltaEvent)
    assert results[2] == Done()


def test_error_frame_is_an_event() -> None:
    payload = (
        '{"type":"error","sequence_number":2,'
        '"error":{"type":"server_error","message":"boom","code":null,"param":null}}'
    )

    results = list(decode_frames([payload]))

    assert isinstance(results[0], ErrorEvent)
    assert results[0].error.message == "boom"
    assert results[0].error.code is None
