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
from typing import Any, Callable, Generator

import pytest

from coreason_elog.flags import Flag
from coreason_elog.levels import Level
from coreason_elog.logger import Logger
from coreason_elog.std import StdContext

# --- Streams ---


class BrokenStream:
    """Stream whose writes always fail."""

    def write(self, data: Any) -> int:
        raise OSError("disk full")


class ShortStream:
    """Stream that accepts one unit less than it is given."""

    def __init__(self) -> None:
        self.data: Any = None

    def write(self, data: Any) -> int:
        self.data = data
        return len(data) - 1


class NoneStream:
    """Stream whose write() returns None, like many file-likes."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, data: str) -> None:
        self.parts.append(data)


# --- Fixtures ---


@pytest.fixture
def broken_stream() -> BrokenStream:
    return BrokenStream()


@pytest.fixture
def short_stream() -> ShortStream:
    return ShortStream()


@pytest.fixture
def none_stream() -> NoneStream:
    return NoneStream()


@pytest.fixture
def buf() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_logger() -> Callable[..., Logger]:
    """
    Builds a logger with no flags set, so output is plain text with no date
    and the default prefix.
    """

    def _make(level: Level = Level.DEBUG, *streams: Any, flags: int = 0) -> Logger:
        logr = Logger(level, *streams)
        logr.flags = Flag(flags)
        return logr

    return _make


@pytest.fixture(autouse=True)
def reset_std() -> Generator[None, None, None]:
    StdContext.reset()
    yield
    StdContext.reset()
