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

import pytest
from pydantic import ValidationError

from coreason_elog.config import LoggerConfig
from coreason_elog.errors import TemplateSyntaxError
from coreason_elog.flags import STD_FLAGS, Flag
from coreason_elog.levels import Level
from coreason_elog.logger import DEFAULT_DATE_FORMAT, DEFAULT_PREFIX, DEFAULT_TAB_STOP, Logger


def test_defaults() -> None:
    config = LoggerConfig()
    assert config.level == Level.CRITICAL
    assert config.flags == STD_FLAGS
    assert config.prefix is None
    assert config.template is None


def test_defaults_match_logger() -> None:
    config = LoggerConfig()
    logr = Logger()
    assert config.date_format == logr.date_format == DEFAULT_DATE_FORMAT
    assert config.tab_stop == logr.tab_stop == DEFAULT_TAB_STOP


def test_parses_names() -> None:
    config = LoggerConfig(level="debug", flags=["DATE", "COLOR"])
    assert config.level == Level.DEBUG
    assert config.flags == Flag.DATE | Flag.COLOR


def test_accepts_enums() -> None:
    config = LoggerConfig(level=Level.ERROR, flags=Flag.ID | Flag.NO_PREFIX)
    assert config.level == Level.ERROR
    assert config.flags == Flag.ID | Flag.NO_PREFIX


def test_invalid_level() -> None:
    with pytest.raises(ValidationError):
        LoggerConfig(level="verbose")


def test_invalid_tab_stop() -> None:
    with pytest.raises(ValidationError):
        LoggerConfig(tab_stop=-1)


def test_from_env() -> None:
    env = {
        "ELOG_LEVEL": "warning",
        "ELOG_FLAGS": "NO_PREFIX,COLOR",
        "ELOG_DATE_FORMAT": "%Y",
        "ELOG_TEMPLATE": "{{ LogLabel }} {{ Text }}",
        "ELOG_TAB_STOP": "2",
        "UNRELATED": "x",
    }
    config = LoggerConfig.from_env(env)
    assert config.level == Level.WARNING
    assert config.flags == Flag.NO_PREFIX | Flag.COLOR
    assert config.date_format == "%Y"
    assert config.template == "{{ LogLabel }} {{ Text }}"
    assert config.tab_stop == 2


def test_from_env_numeric_flags() -> None:
    assert LoggerConfig.from_env({"ELOG_FLAGS": "3"}).flags == 3


def test_from_env_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ELOG_LEVEL", "INFO")
    assert LoggerConfig.from_env().level == Level.INFO


def test_logger_from_config(buf: io.StringIO) -> None:
    config = LoggerConfig(level="info", flags=0, prefix="APP>", template="{{ Prefix }} {{ Text }}")
    logr = Logger.from_config(config, buf)
    assert logr.level == Level.INFO
    logr.debugln("filtered")
    logr.infoln("kept")
    assert buf.getvalue() == "APP> kept\n"


def test_logger_from_config_keeps_default_prefix() -> None:
    logr = Logger.from_config(LoggerConfig())
    assert logr.prefix == DEFAULT_PREFIX


def test_logger_from_config_bad_template() -> None:
    with pytest.raises(TemplateSyntaxError):
        Logger.from_config(LoggerConfig(template="{% if Text %}"))
