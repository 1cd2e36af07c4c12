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
from typing import Any, Iterable, List, Optional, Union

from coreason_elog.color import strip_ansi
from coreason_elog.errors import ShortWriteError, SinkWriteError
from coreason_elog.utils.logger import logger

__all__ = ["Sink", "MultiSinkWriter"]


def _console_streams() -> List[Any]:
    return [
        sys.stdin,
        sys.stdout,
        sys.stderr,
        sys.__stdin__,
        sys.__stdout__,
        sys.__stderr__,
    ]


class Sink:
    """
    An output destination for log records.

    interactive marks console streams; only non-interactive sinks have color
    stripped under Flag.NO_FILE_ANSI.
    """

    def __init__(self, stream: Any, interactive: bool = False):
        self.stream = stream
        self.interactive = interactive
        self.binary = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))

    @classmethod
    def wrap(cls, stream: Union["Sink", Any], interactive: Optional[bool] = None) -> "Sink":
        """
        Returns stream as a Sink. If interactive is not given, a stream is
        interactive only when it is one of the process' standard streams.
        """
        if isinstance(stream, Sink):
            if interactive is not None:
                return cls(stream.stream, interactive)
            return stream
        if interactive is None:
            interactive = any(stream is s for s in _console_streams() if s is not None)
        return cls(stream, interactive)

    def write(self, text: str) -> int:
        """
        Writes text and returns the number of units the stream accepted.
        Streams whose write() returns None are taken to have accepted everything.
        """
        data: Union[str, bytes] = text.encode("utf-8") if self.binary else text
        n = self.stream.write(data)
        if n is None:
            return len(data)
        return n

    def expected(self, text: str) -> int:
        return len(text.encode("utf-8")) if self.binary else len(text)

    def __repr__(self) -> str:
        return f"Sink({self.stream!r}, interactive={self.interactive})"


class MultiSinkWriter:
    """
    Fans a rendered record out to every sink in registration order.
    """

    def __init__(self, sinks: Iterable[Sink] = ()):
        self.sinks: List[Sink] = list(sinks)

    def write(self, text: str, strip_non_interactive: bool = False) -> int:
        """
        Writes text to all sinks, stopping at the first failure.

        Returns the length of text in UTF-8 bytes. Raises SinkWriteError or
        ShortWriteError naming the failed sink; sinks before it keep the record.
        """
        for index, sink in enumerate(self.sinks):
            out = text
            if strip_non_interactive and not sink.interactive:
                out = strip_ansi(text)
            write_text(index, sink, out)
        return len(text.encode("utf-8"))


def write_text(index: int, sink: Sink, text: str) -> int:
    """Writes text to a single sink, translating failures into SinkWriteError."""
    expected = sink.expected(text)
    try:
        n = sink.write(text)
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Write to sink {index} ({sink!r}) failed: {e}")
        raise SinkWriteError(index, sink, str(e)) from e
    if n < expected:
        logger.error(f"Short write to sink {index} ({sink!r}): {n} of {expected}")
        raise ShortWriteError(index, sink, n, expected)
    return n
