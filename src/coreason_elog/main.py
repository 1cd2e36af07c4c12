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
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from coreason_elog import __version__
from coreason_elog.color import strip_ansi
from coreason_elog.errors import ElogError
from coreason_elog.flags import Flag
from coreason_elog.levels import Level, level_from_string
from coreason_elog.logger import Logger
from coreason_elog.template import DEFAULT_TEMPLATE

app = typer.Typer(
    name="coreason-elog",
    help="CLI for coreason-elog: leveled, templated, colorized multi-stream logging.",
    add_completion=False,
)


def run_demo(logr: Logger, buf: io.StringIO) -> None:
    """Writes nested hierarchical output to stdout and buf at the same time."""
    logr.println("\nDUAL STREAM OUTPUT EXAMPLE (like the tee command)")

    logr.flags = logr.flags | Flag.HIERARCHICAL | Flag.SHORT_FILE_NAME | Flag.LINE_NUMBER | Flag.FUNCTION_NAME

    logr.println("\nstdout output:\n")

    logr.set_streams(sys.stdout, buf)

    @logr.traced_function
    def lvl3() -> None:
        logr.debugln("Level 3 Output 1")

    @logr.traced_function
    def lvl2() -> None:
        logr.debugln("Level 2 Output 1")
        logr.criticalln("Level 2 Output 2")
        lvl3()
        logr.debugln("Level 2 Output 3")

    @logr.traced_function
    def lvl1() -> None:
        logr.infoln("Level 1 Output 1")
        logr.errorln("Level 1 Output 2")
        lvl2()
        logr.warningln("Level 1 Output 3")

    logr.debugln("Level 0 Output 1")
    lvl1()
    logr.debugln("Level 0 Output 2")

    logr.set_streams(sys.stdout)

    logr.println("\nShowing output stored in the buffer:\n")


@app.command()
def demo(
    color: Annotated[bool, typer.Option("--color/--no-color", help="Colorize console output")] = True,
) -> None:
    """
    Dual stream output example: the console keeps colors, the buffer does not.
    """
    buf = io.StringIO()
    logr = Logger(Level.DEBUG, sys.stdout)
    logr.flags = Flag.DATE | Flag.NO_FILE_ANSI | (Flag.COLOR if color else Flag(0))

    try:
        run_demo(logr, buf)
    except ElogError:
        logger.exception("Demo Failed")
        sys.exit(1)

    typer.echo(buf.getvalue(), nl=False)


@app.command()
def strip(
    file: Annotated[Optional[Path], typer.Argument(help="File to read (default: stdin)", exists=True)] = None,
) -> None:
    """
    Strip ANSI escape sequences from a file or stdin.
    """
    text = file.read_text(encoding="utf-8") if file else sys.stdin.read()
    typer.echo(strip_ansi(text), nl=False)


@app.command()
def render(
    text: Annotated[str, typer.Argument(help="Message text")],
    template: Annotated[str, typer.Option("--template", "-t", help="Log template")] = DEFAULT_TEMPLATE,
    level: Annotated[str, typer.Option("--level", "-l", help="Record level")] = "ALL",
    color: Annotated[bool, typer.Option("--color/--no-color", help="Keep ANSI escapes")] = False,
) -> None:
    """
    Render a single record through a template.
    """
    buf = io.StringIO()
    try:
        logr = Logger(Level.ALL, buf)
        logr.flags = Flag.COLOR if color else Flag(0)
        logr.set_template(template)
        logr.fprint(level_from_string(level), 1, text + "\n")
    except (ElogError, ValueError):
        logger.exception("Rendering Failed")
        sys.exit(1)
    typer.echo(buf.getvalue(), nl=False)


@app.command()
def version() -> None:
    """Print the version of coreason-elog."""
    typer.echo(f"coreason-elog v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
