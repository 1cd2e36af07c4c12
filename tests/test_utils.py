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
from typing import Any, List

import pytest

from coreason_elog.errors import ShortWriteError, SinkWriteError
from coreason_elog.levels import Level
from coreason_elog.logger import Logger
from coreason_elog.utils.logger import logger


@pytest.fixture
def messages() -> Any:
    captured: List[str] = []
    handler_id = logger.add(lambda m: captured.append(str(m)), level="DEBUG", format="{level}:{message}")
    yield captured
    logger.remove(handler_id)


def test_sink_failure_is_reported(messages: List[str], broken_stream: Any) -> None:
    logr = Logger(Level.DEBUG, broken_stream)
    with pytest.raises(SinkWriteError):
        logr.criticalln("lost")
    assert any(m.startswith("ERROR:Write to sink 0") for m in messages)


def test_short_write_is_reported(messages: List[str], short_stream: Any) -> None:
    logr = Logger(Level.DEBUG, short_stream)
    with pytest.raises(ShortWriteError):
        logr.criticalln("cut")
    assert any(m.startswith("ERROR:Short write to sink 0") for m in messages)


def test_template_install_is_logged(messages: List[str]) -> None:
    Logger(Level.DEBUG, io.StringIO()).set_template("{{ Text }}")
    assert any("Installed log template '{{ Text }}'" in m for m in messages)


def test_records_do_not_reach_diagnostics(messages: List[str], buf: io.StringIO) -> None:
    Logger(Level.DEBUG, buf).infoln("private record")
    assert "private record" in buf.getvalue()
    assert not any("private record" in m for m in messages)
