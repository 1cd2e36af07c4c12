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
A better logging object than the standard library's minimal print-style
logger: leveled output, ANSI colors, user templates, hierarchical
indentation and multiple simultaneous output streams like stdout and a file.
"""

import functools
import os
import sys
import threading
from contextlib import contextmanager
from datetime import datetime
from types import CodeType
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional, Tuple, TypeVar, Union

from coreason_elog.color import Attr, ansi_escape, strip_ansi
from coreason_elog.errors import LogPanic
from coreason_elog.flags import CALLER_FLAGS, STD_FLAGS, Flag
from coreason_elog.levels import Level, enabled
from coreason_elog.sinks import MultiSinkWriter, Sink, write_text
from coreason_elog.template import DEFAULT_TEMPLATE, FormatRecord, LogTemplate, compile_template
from coreason_elog.utils.logger import logger

if TYPE_CHECKING:
    from coreason_elog.config import LoggerConfig

__all__ = ["Logger", "sprint", "sprintln", "sprintf"]

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_DATE_FORMAT = "%a-%Y%m%d-%H:%M:%S"
DEFAULT_PREFIX = ansi_escape(Attr.BOLD, Attr.GREEN, "::", Attr.OFF)
DEFAULT_TAB_STOP = 4

UNKNOWN_FILE = "???"

_default_template = compile_template(DEFAULT_TEMPLATE)


def sprint(*v: Any) -> str:
    """Joins operands, adding a space between two operands when neither is a string."""
    out: List[str] = []
    for i, arg in enumerate(v):
        if i > 0 and not isinstance(arg, str) and not isinstance(v[i - 1], str):
            out.append(" ")
        out.append(str(arg))
    return "".join(out)


def sprintln(*v: Any) -> str:
    """Joins operands with single spaces and appends a newline."""
    return " ".join(str(arg) for arg in v) + "\n"


def sprintf(format: str, *args: Any) -> str:
    """
    printf-style formatting. The format is used verbatim when there are no
    args, and the args are appended to it when they do not match it.
    """
    if not args:
        return format
    try:
        return format % args
    except (TypeError, ValueError):
        extra = ", ".join(f"{type(a).__name__}={a}" for a in args)
        return f"{format}%!(EXTRA {extra})"


def _resolve_caller(depth: int) -> Tuple[str, int, Optional[CodeType]]:
    """
    Returns file, line and code object of the frame depth levels above the
    function calling this one.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        logger.debug(f"Caller at depth {depth} could not be resolved")
        return UNKNOWN_FILE, 0, None
    return frame.f_code.co_filename, frame.f_lineno, frame.f_code


def _function_name(code: CodeType) -> str:
    qualname = getattr(code, "co_qualname", code.co_name)
    return qualname.rsplit(".", 1)[-1]


class Logger:
    """
    A Logger represents an active logging object that generates lines of
    output to one or more streams. Each logging operation renders the whole
    record before writing it. A Logger can be used simultaneously from
    multiple threads; it serializes rendering and writing so records from
    concurrent callers are never interleaved.
    """

    def __init__(self, level: Level = Level.CRITICAL, *streams: Any):
        self._lock = threading.Lock()
        self._level = level
        self._flags = STD_FLAGS
        self._date_format = DEFAULT_DATE_FORMAT
        self._prefix = DEFAULT_PREFIX
        self._template: LogTemplate = _default_template
        self._writer = MultiSinkWriter(Sink.wrap(s) for s in streams)
        self._depth = 0
        self._indent = 0
        self._tab_stop = DEFAULT_TAB_STOP
        self._ids: Dict[CodeType, int] = {}

    @classmethod
    def from_config(cls, config: "LoggerConfig", *streams: Any) -> "Logger":
        """
        Builds a logger from a LoggerConfig. Raises TemplateSyntaxError if the
        configured template does not compile.
        """
        obj = cls(config.level, *streams)
        obj.flags = config.flags
        obj.date_format = config.date_format
        obj.tab_stop = config.tab_stop
        if config.prefix is not None:
            obj.prefix = config.prefix
        if config.template is not None:
            obj.set_template(config.template)
        return obj

    def __repr__(self) -> str:
        return f"Logger(level={self._level!s}, flags={self._flags!r}, streams={len(self._writer.sinks)})"

    # --- Configuration ---

    @property
    def level(self) -> Level:
        return self._level

    @level.setter
    def level(self, level: Level) -> None:
        with self._lock:
            self._level = Level(level)

    @property
    def flags(self) -> Flag:
        return self._flags

    @flags.setter
    def flags(self, flags: int) -> None:
        with self._lock:
            self._flags = Flag(flags)

    @property
    def date_format(self) -> str:
        return self._date_format

    @date_format.setter
    def date_format(self, date_format: str) -> None:
        with self._lock:
            self._date_format = date_format

    @property
    def prefix(self) -> str:
        return self._prefix

    @prefix.setter
    def prefix(self, prefix: str) -> None:
        with self._lock:
            self._prefix = prefix

    @property
    def indent(self) -> int:
        return self._indent

    @indent.setter
    def indent(self, indent: int) -> None:
        with self._lock:
            self._indent = indent

    @property
    def tab_stop(self) -> int:
        return self._tab_stop

    @tab_stop.setter
    def tab_stop(self, tab_stop: int) -> None:
        with self._lock:
            self._tab_stop = tab_stop

    def set_indent(self, indent: int) -> "Logger":
        """Sets the indent level used with Flag.INDENT and returns the logger."""
        self.indent = indent
        return self

    def set_tab_stop(self, tab_stop: int) -> "Logger":
        """Sets the number of spaces per indent level and returns the logger."""
        self.tab_stop = tab_stop
        return self

    @property
    def template(self) -> LogTemplate:
        return self._template

    def set_template(self, source: str) -> None:
        """
        Compiles source and makes it the output template.

        Raises TemplateSyntaxError; the current template is kept in that case.
        """
        tmpl = compile_template(source)
        with self._lock:
            self._template = tmpl
        logger.debug(f"Installed log template {source!r}")

    @property
    def streams(self) -> List[Any]:
        return [sink.stream for sink in self._writer.sinks]

    @property
    def sinks(self) -> List[Sink]:
        return list(self._writer.sinks)

    def set_streams(self, *streams: Any) -> None:
        """Replaces the output streams. Streams may be Sink objects or raw streams."""
        sinks = [Sink.wrap(s) for s in streams]
        with self._lock:
            self._writer = MultiSinkWriter(sinks)

    def add_stream(self, stream: Any, interactive: Optional[bool] = None) -> None:
        """
        Registers another output stream. interactive marks console streams;
        when omitted only the standard streams count as interactive.
        """
        sink = Sink.wrap(stream, interactive)
        with self._lock:
            self._writer = MultiSinkWriter([*self._writer.sinks, sink])

    @property
    def depth(self) -> int:
        """Current hierarchy depth (number of open traced() scopes)."""
        return self._depth

    # --- Hierarchy ---

    @contextmanager
    def traced(self) -> Iterator[int]:
        """
        Opens a traced scope for Flag.HIERARCHICAL output and yields the new depth.

            with logr.traced():
                logr.debugln("one level deeper")
        """
        with self._lock:
            self._depth += 1
            depth = self._depth
        try:
            yield depth
        finally:
            with self._lock:
                self._depth -= 1

    def traced_function(self, func: F) -> F:
        """Decorator running every call of func inside traced()."""

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with self.traced():
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    # --- Output ---

    def write(self, text: Union[str, bytes]) -> int:
        """
        Writes text to every stream. Color is stripped for non-interactive
        streams when Flag.NO_FILE_ANSI is set.

        bytes are decoded as UTF-8, with undecodable input replaced.
        """
        if isinstance(text, bytes):
            text = text.decode("utf-8", errors="replace")
        with self._lock:
            return self._writer.write(text, bool(self._flags & Flag.NO_FILE_ANSI))

    def fprint(self, level: Level, calldepth: int, text: str, stream: Any = None) -> int:
        """
        Renders text as a record at level and writes it. Used by all of the
        logging operations.

        calldepth is the number of frames to skip to find the caller reported
        with the file, line and function flags; 1 is the caller of fprint.

        If stream is given the record is written only to it.

        Returns the number of bytes written, 0 if level is filtered out.
        """
        if not enabled(level, self._level):
            return 0

        now = datetime.now()
        with self._lock:
            flags = self._flags
            file_name = function_name = record_id = ""
            line = 0

            if flags & CALLER_FLAGS:
                path, line, code = _resolve_caller(calldepth)
                if flags & Flag.SHORT_FILE_NAME:
                    file_name = os.path.basename(path)
                elif flags & Flag.LONG_FILE_NAME:
                    file_name = path
                if not flags & Flag.LINE_NUMBER:
                    line = 0
                if code is not None:
                    if flags & Flag.FUNCTION_NAME:
                        function_name = _function_name(code)
                    if flags & Flag.ID:
                        record_id = str(self._ids.setdefault(code, len(self._ids)))

            # Leading newlines are written before the record, not inside it
            body = text.lstrip("\n")
            if text and not body:
                # A record of only newlines keeps one as its terminator
                body = "\n"
            newlines = len(text) - len(body)

            if flags & Flag.INDENT:
                body = " " * (self._indent * self._tab_stop) + body
            if flags & Flag.HIERARCHICAL:
                body = f"[{self._depth:02d}] " + " " * (self._depth * self._tab_stop) + body

            record = FormatRecord(
                prefix="" if flags & Flag.NO_PREFIX else self._prefix,
                log_label=level.label,
                date=now.strftime(self._date_format) if flags & Flag.DATE else "",
                file_name=file_name,
                function_name=function_name,
                line_number=line,
                id=record_id,
                text=body,
            )
            out = self._template.render(record)
            if not flags & Flag.COLOR:
                out = strip_ansi(out)
            out = "\n" * newlines + out

            if stream is None:
                return self._writer.write(out, bool(flags & Flag.NO_FILE_ANSI))
            write_text(0, Sink.wrap(stream), out)
            return len(out.encode("utf-8"))

    def emit(self, level: Level, formatter: Callable[..., str], *v: Any) -> int:
        """
        Formats the operands with formatter and writes them as a record at
        level. Nothing is formatted when level is filtered out.
        """
        if not enabled(level, self._level):
            return 0
        return self.fprint(level, 3, formatter(*v))

    def print(self, *v: Any) -> int:
        """
        Writes the operands regardless of the logging level, with the format
        properties and flags of the logger. Spaces are added between operands
        when neither is a string.
        """
        return self.emit(Level.ALL, sprint, *v)

    def println(self, *v: Any) -> int:
        """Like print, but spaces are always added between operands and a newline is appended."""
        return self.emit(Level.ALL, sprintln, *v)

    def printf(self, format: str, *v: Any) -> int:
        """Like print, with printf-style formatting."""
        return self.emit(Level.ALL, sprintf, format, *v)

    def debug(self, *v: Any) -> int:
        """Similar to print, except the colorized DEBUG label is prefixed to the output."""
        return self.emit(Level.DEBUG, sprint, *v)

    def debugln(self, *v: Any) -> int:
        return self.emit(Level.DEBUG, sprintln, *v)

    def debugf(self, format: str, *v: Any) -> int:
        return self.emit(Level.DEBUG, sprintf, format, *v)

    def info(self, *v: Any) -> int:
        """Similar to print, except the colorized INFO label is prefixed to the output."""
        return self.emit(Level.INFO, sprint, *v)

    def infoln(self, *v: Any) -> int:
        return self.emit(Level.INFO, sprintln, *v)

    def infof(self, format: str, *v: Any) -> int:
        return self.emit(Level.INFO, sprintf, format, *v)

    def warning(self, *v: Any) -> int:
        """Similar to print, except the colorized WARNING label is prefixed to the output."""
        return self.emit(Level.WARNING, sprint, *v)

    def warningln(self, *v: Any) -> int:
        return self.emit(Level.WARNING, sprintln, *v)

    def warningf(self, format: str, *v: Any) -> int:
        return self.emit(Level.WARNING, sprintf, format, *v)

    def error(self, *v: Any) -> int:
        """Similar to print, except the colorized ERROR label is prefixed to the output."""
        return self.emit(Level.ERROR, sprint, *v)

    def errorln(self, *v: Any) -> int:
        return self.emit(Level.ERROR, sprintln, *v)

    def errorf(self, format: str, *v: Any) -> int:
        return self.emit(Level.ERROR, sprintf, format, *v)

    def critical(self, *v: Any) -> int:
        """Similar to print, except the colorized CRITICAL label is prefixed to the output."""
        return self.emit(Level.CRITICAL, sprint, *v)

    def criticalln(self, *v: Any) -> int:
        return self.emit(Level.CRITICAL, sprintln, *v)

    def criticalf(self, format: str, *v: Any) -> int:
        return self.emit(Level.CRITICAL, sprintf, format, *v)

    def fatal(self, *v: Any) -> None:
        """Writes a CRITICAL record, then exits the process with status 1."""
        self.fprint(Level.CRITICAL, 2, sprint(*v))
        sys.exit(1)

    def fatalln(self, *v: Any) -> None:
        self.fprint(Level.CRITICAL, 2, sprintln(*v))
        sys.exit(1)

    def fatalf(self, format: str, *v: Any) -> None:
        self.fprint(Level.CRITICAL, 2, sprintf(format, *v))
        sys.exit(1)

    def panic(self, *v: Any) -> None:
        """Writes a CRITICAL record, then raises LogPanic with the message."""
        text = sprint(*v)
        self.fprint(Level.CRITICAL, 2, text)
        raise LogPanic(text)

    def panicln(self, *v: Any) -> None:
        text = sprintln(*v)
        self.fprint(Level.CRITICAL, 2, text)
        raise LogPanic(text)

    def panicf(self, format: str, *v: Any) -> None:
        text = sprintf(format, *v)
        self.fprint(Level.CRITICAL, 2, text)
        raise LogPanic(text)
