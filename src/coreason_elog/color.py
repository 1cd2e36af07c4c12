# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_elog

import re
from enum import IntEnum
from typing import Any, Union, overload

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["Attr", "Rgb", "ansi_escape", "strip_ansi"]

_ANSI_RE = re.compile("\x1b\\[[\\d;]+m")
_ANSI_RE_BYTES = re.compile(b"\x1b\\[[\\d;]+m")


class Attr(IntEnum):
    """
    ANSI SGR display attributes.

    See http://ascii-table.com/ansi-escape-sequences.php
    """

    # General text attributes
    OFF = 0
    BOLD = 1
    UNDERLINE = 4
    BLINK = 5
    REVERSE = 7
    CONCEALED = 8

    # Foreground colors
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    # Background colors
    BG_GREY = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47

    @property
    def escape(self) -> str:
        return f"\x1b[{int(self)}m"


class Rgb(BaseModel):
    """
    A 24-bit color mapped onto the xterm 256 color cube.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    background: bool = False

    def __init__(self, r: int, g: int, b: int, background: bool = False):
        super().__init__(r=r, g=g, b=b, background=background)

    @property
    def code(self) -> int:
        """Index of the nearest color in the 6x6x6 cube (16..231)."""

        def scale(v: int) -> int:
            return int(round(v / 255 * 5))

        return 16 + 36 * scale(self.r) + 6 * scale(self.g) + scale(self.b)

    @property
    def escape(self) -> str:
        selector = 48 if self.background else 38
        return f"\x1b[{selector};5;{self.code}m"


Part = Union[Attr, Rgb, str]


def ansi_escape(*parts: Part) -> str:
    """
    Builds a string from display attributes and text fragments.

    For example, to create a string with a colorized prefix,

        ansi_escape(Attr.BOLD, Attr.GREEN, "[DEBUG] ", Attr.OFF, "Text string")

    A reset is appended unless the last part is already Attr.OFF.
    """
    if not parts:
        return ""
    out = []
    for part in parts:
        if isinstance(part, (Attr, Rgb)):
            out.append(part.escape)
        elif isinstance(part, str):
            out.append(part)
        else:
            raise TypeError(f"ansi_escape: unexpected part type {type(part).__name__!r}")
    if parts[-1] is not Attr.OFF:
        out.append(Attr.OFF.escape)
    return "".join(out)


@overload
def strip_ansi(text: str) -> str: ...


@overload
def strip_ansi(text: bytes) -> bytes: ...


def strip_ansi(text: Union[str, bytes]) -> Union[str, bytes]:
    """
    Removes every ANSI SGR escape sequence from text.

    Removal is repeated until nothing matches, so sequences that only form once
    an inner one is removed are stripped as well.
    """
    pattern: Any = _ANSI_RE_BYTES if isinstance(text, bytes) else _ANSI_RE
    empty = text[:0]
    count = 1
    while count:
        text, count = pattern.subn(empty, text)
    return text
