# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_elog

import io
import sys
from typing import Any

import pytest
from loguru import logger

from coreason_elog.errors import ShortWriteError, SinkWriteError
from coreason_elog.sinks import MultiSinkWriter, Sink


def test_wrap_console_streams_are_interactive() -> None:
    assert Sink.wrap(sys.stdout).interactive
    assert Sink.wrap(sys.stderr).interactive


def test_wrap_buffer_is_not_interactive() -> None:
    assert not Sink.wrap(io.StringIO()).interactive


def test_wrap_explicit_tag_wins() -> None:
    assert Sink.wrap(io.StringIO(), interactive=True).interactive
    assert not Sink.wrap(sys.stdout, interactive=False).interactive


def test_wrap_existing_sink() -> None:
    sink = Sink(io.StringIO(), interactive=True)
    assert Sink.wrap(sink) is sink
    assert not Sink.wrap(sink, interactive=False).interactive


def test_binary_sink_receives_bytes() -> None:
    raw = io.BytesIO()
    writer = MultiSinkWriter([Sink.wrap(raw)])
    n = writer.write("héllo\n")
    assert raw.getvalue() == "héllo\n".encode("utf-8")
    assert n == 7


def test_fan_out_in_order() -> None:
    a, b = io.StringIO(), io.StringIO()
    writer = MultiSinkWriter([Sink(a), Sink(b)])
    writer.write("\x1b[1mx\x1b[0m")
    assert a.getvalue() == b.getvalue() == "\x1b[1mx\x1b[0m"


def test_strip_only_non_interactive() -> None:
    console, file = io.StringIO(), io.StringIO()
    writer = MultiSinkWriter([Sink(console, interactive=True), Sink(file)])
    writer.write("\x1b[1mx\x1b[0m", strip_non_interactive=True)
    assert console.getvalue() == "\x1b[1mx\x1b[0m"
    assert file.getvalue() == "x"


def test_write_error_stops_fan_out(broken_stream: Any) -> None:
    first, last = io.StringIO(), io.StringIO()
    writer = MultiSinkWriter([Sink(first), Sink(broken_stream), Sink(last)])
    with pytest.raises(SinkWriteError) as exc:
        writer.write("record")
    assert exc.value.index == 1
    assert isinstance(exc.value.__cause__, OSError)
    assert first.getvalue() == "record"
    assert last.getvalue() == ""


def test_closed_stream_is_write_error() -> None:
    closed = io.StringIO()
    closed.close()
    writer = MultiSinkWriter([Sink(closed)])
    with pytest.raises(SinkWriteError):
        writer.write("record")


def test_type_error_is_write_error() -> None:
    class WantsBytes:
        def write(self, data: Any) -> int:
            raise TypeError("a bytes-like object is required")

    writer = MultiSinkWriter([Sink(io.StringIO()), Sink(WantsBytes())])
    with pytest.raises(SinkWriteError) as exc:
        writer.write("record")
    assert exc.value.index == 1
    assert isinstance(exc.value.__cause__, TypeError)


def test_short_write(short_stream: Any) -> None:
    writer = MultiSinkWriter([Sink(short_stream)])
    with pytest.raises(ShortWriteError) as exc:
        writer.write("record")
    assert isinstance(exc.value, SinkWriteError)
    assert exc.value.written == 5
    assert exc.value.expected == 6


def test_none_return_is_full_write(none_stream: Any) -> None:
    writer = MultiSinkWriter([Sink(none_stream)])
    assert writer.write("abc") == 3
    assert none_stream.parts == ["abc"]


def test_write_error_is_diagnosed(broken_stream: Any) -> None:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="ERROR", format="{message}")
    try:
        writer = MultiSinkWriter([Sink(broken_stream)])
        with pytest.raises(SinkWriteError):
            writer.write("record")
    finally:
        logger.remove(handler_id)
    assert any("disk full" in m for m in messages)
