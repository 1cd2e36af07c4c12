# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_elog

from enum import IntEnum
from typing import Dict, Union

from coreason_elog.color import Attr, ansi_escape

__all__ = ["Level", "enabled", "level_from_string"]


class Level(IntEnum):
    """
    Severity levels, lowest first.

    ALL is both a threshold that accepts every record and the level used by
    the print* operations, which are never filtered.
    """

    # Development output that can be switched off by raising the level.
    DEBUG = 0
    # Informative output for the user.
    INFO = 1
    # Something worked, but not with the expected result.
    WARNING = 2
    # Something did not work at all.
    ERROR = 3
    # Something is broken and unrecoverable.
    CRITICAL = 4
    ALL = 5

    def __str__(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        """The ANSI colorized label for the level."""
        return _LABELS[self]


_LABELS: Dict[Level, str] = {
    Level.DEBUG: ansi_escape(Attr.BOLD, Attr.WHITE, "[DEBUG]", Attr.OFF),
    Level.INFO: ansi_escape(Attr.BOLD, Attr.GREEN, "[INFO]", Attr.OFF),
    Level.WARNING: ansi_escape(Attr.BOLD, Attr.YELLOW, "[WARNING]", Attr.OFF),
    Level.ERROR: ansi_escape(Attr.BOLD, Attr.MAGENTA, "[ERROR]", Attr.OFF),
    Level.CRITICAL: ansi_escape(Attr.BOLD, Attr.RED, "[CRITICAL]", Attr.OFF),
    # The print* operations do not use a label
    Level.ALL: "",
}

_ALIASES: Dict[str, Level] = {"PRINT": Level.ALL, "WARN": Level.WARNING}


def enabled(record_level: Level, logger_level: Level) -> bool:
    """Returns True if a record at record_level passes a logger_level threshold."""
    return record_level == Level.ALL or logger_level == Level.ALL or record_level >= logger_level


def level_from_string(name: Union[str, Level]) -> Level:
    """
    Resolves a level from its case-insensitive name.
    """
    if isinstance(name, Level):
        return name
    key = str(name).strip().upper()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Level[key]
    except KeyError as e:
        raise ValueError(f"Unknown log level: {name!r}") from e
