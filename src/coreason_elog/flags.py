# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_elog

from enum import IntFlag
from typing import Iterable, Union

__all__ = ["Flag", "STD_FLAGS", "flags_from_names"]


class Flag(IntFlag):
    """
    Output properties of a Logger. Bits are or'ed together to control what is
    printed with each record.
    """

    DATE = 1 << 0
    # Full file name: /a/b/c/d.py
    LONG_FILE_NAME = 1 << 1
    # Base file name: d.py. Overrides LONG_FILE_NAME
    SHORT_FILE_NAME = 1 << 2
    FUNCTION_NAME = 1 << 3
    LINE_NUMBER = 1 << 4
    # Keep ANSI escapes in the output
    COLOR = 1 << 5
    # Strip ANSI escapes for sinks that are not interactive consoles
    NO_FILE_ANSI = 1 << 6
    NO_PREFIX = 1 << 7
    # Tag each record with a small id per calling function
    ID = 1 << 8
    # Depth counter and indentation from traced() scopes
    HIERARCHICAL = 1 << 9
    # Indentation from the logger's explicit indent level
    INDENT = 1 << 10


STD_FLAGS = Flag.DATE | Flag.COLOR | Flag.NO_FILE_ANSI

# Flags that need the caller's frame
CALLER_FLAGS = Flag.LONG_FILE_NAME | Flag.SHORT_FILE_NAME | Flag.FUNCTION_NAME | Flag.LINE_NUMBER | Flag.ID


def flags_from_names(names: Union[str, Iterable[str]]) -> Flag:
    """
    Combines flag names ("DATE", "color", "STD_FLAGS", ...) into a Flag.

    A string is split on commas.
    """
    if isinstance(names, str):
        names = names.split(",")
    result = Flag(0)
    for name in names:
        key = name.strip().upper()
        if not key:
            continue
        if key == "STD_FLAGS":
            result |= STD_FLAGS
            continue
        try:
            result |= Flag[key]
        except KeyError as e:
            raise ValueError(f"Unknown flag: {name!r}") from e
    return result
