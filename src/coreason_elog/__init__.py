# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_elog

"""
coreason-elog
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .color import Attr, Rgb, ansi_escape, strip_ansi
from .config import LoggerConfig
from .errors import (
    ElogError,
    LogPanic,
    ShortWriteError,
    SinkWriteError,
    TemplateRenderError,
    TemplateSyntaxError,
)
from .flags import STD_FLAGS, Flag
from .levels import Level, enabled, level_from_string
from .logger import Logger
from .sinks import MultiSinkWriter, Sink
from .template import DEFAULT_TEMPLATE, FormatRecord, compile_template, render

__all__ = [
    "Attr",
    "Rgb",
    "ansi_escape",
    "strip_ansi",
    "Level",
    "enabled",
    "level_from_string",
    "Flag",
    "STD_FLAGS",
    "DEFAULT_TEMPLATE",
    "FormatRecord",
    "compile_template",
    "render",
    "Sink",
    "MultiSinkWriter",
    "Logger",
    "LoggerConfig",
    "ElogError",
    "TemplateSyntaxError",
    "TemplateRenderError",
    "SinkWriteError",
    "ShortWriteError",
    "LogPanic",
]
