# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_elog

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from coreason_elog.flags import STD_FLAGS, flags_from_names
from coreason_elog.levels import Level, level_from_string
from coreason_elog.logger import DEFAULT_DATE_FORMAT, DEFAULT_TAB_STOP

__all__ = ["LoggerConfig"]

ENV_PREFIX = "ELOG_"


class LoggerConfig(BaseModel):
    """
    Settings for building a Logger.

    prefix and template are left as None to keep the Logger defaults.
    """

    level: Level = Level.CRITICAL
    flags: int = int(STD_FLAGS)
    date_format: str = DEFAULT_DATE_FORMAT
    prefix: Optional[str] = None
    template: Optional[str] = None
    tab_stop: int = Field(default=DEFAULT_TAB_STOP, ge=0)

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return level_from_string(v)
        return v

    @field_validator("flags", mode="before")
    @classmethod
    def _parse_flags(cls, v: Any) -> Any:
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        if isinstance(v, (str, list, tuple)):
            return int(flags_from_names(v))
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerConfig":
        """
        Reads ELOG_LEVEL, ELOG_FLAGS, ELOG_DATE_FORMAT, ELOG_PREFIX, ELOG_TEMPLATE
        and ELOG_TAB_STOP. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        data = {}
        for field in ("level", "flags", "date_format", "prefix", "template", "tab_stop"):
            value = env.get(ENV_PREFIX + field.upper())
            if value is not None:
                data[field] = value
        return cls(**data)
