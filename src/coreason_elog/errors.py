# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_elog

from typing import Any


class ElogError(Exception):
    """Base class for all coreason-elog errors."""


class TemplateSyntaxError(ElogError):
    """
    Raised when a template source cannot be compiled.

    The previously installed template stays active.
    """

    def __init__(self, message: str, lineno: int | None = None):
        super().__init__(message)
        self.message = message
        self.lineno = lineno


class TemplateRenderError(ElogError):
    """Raised when a template references a name outside the record schema."""


class SinkWriteError(ElogError):
    """
    Raised when writing to an output sink fails.

    Earlier sinks may already hold the record; nothing is rolled back.
    """

    def __init__(self, index: int, sink: Any, message: str):
        super().__init__(f"sink {index}: {message}")
        self.index = index
        self.sink = sink


class ShortWriteError(SinkWriteError):
    """Raised when a sink accepts fewer units than it was given."""

    def __init__(self, index: int, sink: Any, written: int, expected: int):
        super().__init__(index, sink, f"short write ({written} of {expected})")
        self.written = written
        self.expected = expected


class LogPanic(ElogError):
    """Raised by the panic* operations after the record has been written."""
