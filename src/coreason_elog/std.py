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
The shared default logger and free functions forwarding to it.

    from coreason_elog import std

    std.set_level(Level.DEBUG)
    std.debugln("hello")
"""

import sys
import threading
from contextlib import AbstractContextManager
from typing import Any, List, Optional

from coreason_elog.config import LoggerConfig
from coreason_elog.errors import LogPanic
from coreason_elog.flags import Flag
from coreason_elog.levels import Level
from coreason_elog.logger import Logger, sprint, sprintf, sprintln
from coreason_elog.template import LogTemplate
from coreason_elog.utils.logger import logger


class StdContext:
    """
    Holder of the process-wide default Logger.
    """

    _instance: Optional[Logger] = None
    _lock = threading.Lock()

    @classmethod
    def initialize(cls, config: Optional[LoggerConfig] = None, *streams: Any) -> Logger:
        """
        Replaces the default logger. Without streams it writes to sys.stderr.
        """
        config = config or LoggerConfig()
        instance = Logger.from_config(config, *(streams or (sys.stderr,)))
        with cls._lock:
            cls._instance = instance
        logger.debug(f"Default logger initialized: {instance!r}")
        return instance

    @classmethod
    def get_instance(cls) -> Logger:
        """Returns the default logger, creating a CRITICAL level stderr logger on first use."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = Logger(Level.CRITICAL, sys.stderr)
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None


# --- Public API Functions ---


def initialize(config: Optional[LoggerConfig] = None, *streams: Any) -> Logger:
    """Replaces the default logger."""
    return StdContext.initialize(config, *streams)


def get_instance() -> Logger:
    return StdContext.get_instance()


def print(*v: Any) -> int:
    return get_instance().emit(Level.ALL, sprint, *v)


def println(*v: Any) -> int:
    return get_instance().emit(Level.ALL, sprintln, *v)


def printf(format: str, *v: Any) -> int:
    return get_instance().emit(Level.ALL, sprintf, format, *v)


def debug(*v: Any) -> int:
    return get_instance().emit(Level.DEBUG, sprint, *v)


def debugln(*v: Any) -> int:
    return get_instance().emit(Level.DEBUG, sprintln, *v)


def debugf(format: str, *v: Any) -> int:
    return get_instance().emit(Level.DEBUG, sprintf, format, *v)


def info(*v: Any) -> int:
    return get_instance().emit(Level.INFO, sprint, *v)


def infoln(*v: Any) -> int:
    return get_instance().emit(Level.INFO, sprintln, *v)


def infof(format: str, *v: Any) -> int:
    return get_instance().emit(Level.INFO, sprintf, format, *v)


def warning(*v: Any) -> int:
    return get_instance().emit(Level.WARNING, sprint, *v)


def warningln(*v: Any) -> int:
    return get_instance().emit(Level.WARNING, sprintln, *v)


def warningf(format: str, *v: Any) -> int:
    return get_instance().emit(Level.WARNING, sprintf, format, *v)


def error(*v: Any) -> int:
    return get_instance().emit(Level.ERROR, sprint, *v)


def errorln(*v: Any) -> int:
    return get_instance().emit(Level.ERROR, sprintln, *v)


def errorf(format: str, *v: Any) -> int:
    return get_instance().emit(Level.ERROR, sprintf, format, *v)


def critical(*v: Any) -> int:
    return get_instance().emit(Level.CRITICAL, sprint, *v)


def criticalln(*v: Any) -> int:
    return get_instance().emit(Level.CRITICAL, sprintln, *v)


def criticalf(format: str, *v: Any) -> int:
    return get_instance().emit(Level.CRITICAL, sprintf, format, *v)


def fatal(*v: Any) -> None:
    get_instance().fprint(Level.CRITICAL, 2, sprint(*v))
    sys.exit(1)


def fatalln(*v: Any) -> None:
    get_instance().fprint(Level.CRITICAL, 2, sprintln(*v))
    sys.exit(1)


def fatalf(format: str, *v: Any) -> None:
    get_instance().fprint(Level.CRITICAL, 2, sprintf(format, *v))
    sys.exit(1)


def panic(*v: Any) -> None:
    text = sprint(*v)
    get_instance().fprint(Level.CRITICAL, 2, text)
    raise LogPanic(text)


def panicln(*v: Any) -> None:
    text = sprintln(*v)
    get_instance().fprint(Level.CRITICAL, 2, text)
    raise LogPanic(text)


def panicf(format: str, *v: Any) -> None:
    text = sprintf(format, *v)
    get_instance().fprint(Level.CRITICAL, 2, text)
    raise LogPanic(text)


# --- Configuration of the default logger ---


def level() -> Level:
    return get_instance().level


def set_level(value: Level) -> None:
    get_instance().level = value


def flags() -> Flag:
    return get_instance().flags


def set_flags(value: int) -> None:
    get_instance().flags = value


def date_format() -> str:
    return get_instance().date_format


def set_date_format(value: str) -> None:
    """Sets the strftime format used for the Date field."""
    get_instance().date_format = value


def prefix() -> str:
    return get_instance().prefix


def set_prefix(value: str) -> None:
    get_instance().prefix = value


def template() -> LogTemplate:
    return get_instance().template


def set_template(source: str) -> None:
    """Compiles and installs a new output template. Raises TemplateSyntaxError."""
    get_instance().set_template(source)


def streams() -> List[Any]:
    return get_instance().streams


def set_streams(*value: Any) -> None:
    get_instance().set_streams(*value)


def indent() -> int:
    return get_instance().indent


def set_indent(value: int) -> Logger:
    return get_instance().set_indent(value)


def tab_stop() -> int:
    return get_instance().tab_stop


def set_tab_stop(value: int) -> Logger:
    return get_instance().set_tab_stop(value)


def traced() -> AbstractContextManager[int]:
    return get_instance().traced()
