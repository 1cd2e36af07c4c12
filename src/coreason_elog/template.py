# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_elog

from typing import Any, Dict

import jinja2
from jinja2 import Environment, StrictUndefined, nodes
from pydantic import BaseModel, ConfigDict, Field

from coreason_elog.color import Attr, ansi_escape
from coreason_elog.errors import TemplateRenderError, TemplateSyntaxError

__all__ = ["DEFAULT_TEMPLATE", "FormatRecord", "LogTemplate", "compile_template", "render"]

# Functions callable from a log template.
HELPERS: Dict[str, Any] = {"ansi_escape": ansi_escape}

DEFAULT_TEMPLATE = (
    "{% if Date %}{{ Date }} {% endif %}"
    "{% if Prefix %}{{ Prefix }} {% endif %}"
    "{% if LogLabel %}{{ LogLabel }} {% endif %}"
    "{% if Id %}#{{ Id }} {% endif %}"
    "{% if FileName %}{{ FileName }}:{% endif %}"
    "{% if LineNumber %}{{ LineNumber }}:{% endif %}"
    "{% if FileName or LineNumber %} {% endif %}"
    "{% if FunctionName %}{{ FunctionName }}: {% endif %}"
    "{{ Text }}"
)

_env = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)
_env.globals.update(HELPERS)
_env.globals["Attr"] = Attr


class FormatRecord(BaseModel):
    """
    The values available to a log template for one record.

    Templates see the aliased names (Prefix, LogLabel, ...).
    """

    model_config = ConfigDict(populate_by_name=True)

    prefix: str = Field("", alias="Prefix")
    log_label: str = Field("", alias="LogLabel")
    date: str = Field("", alias="Date")
    file_name: str = Field("", alias="FileName")
    function_name: str = Field("", alias="FunctionName")
    line_number: int = Field(0, alias="LineNumber")
    id: str = Field("", alias="Id")
    text: str = Field("", alias="Text")

    def context(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class LogTemplate:
    """
    A compiled log template together with its source.
    """

    def __init__(self, source: str, template: jinja2.Template):
        self.source = source
        self._template = template

    def render(self, record: FormatRecord) -> str:
        return render(self, record)

    def __repr__(self) -> str:
        return f"LogTemplate({self.source!r})"


def _check_helpers(ast: nodes.Template) -> None:
    for call in ast.find_all(nodes.Call):
        if isinstance(call.node, nodes.Name) and call.node.name not in HELPERS:
            raise TemplateSyntaxError(f"function {call.node.name!r} not defined", call.lineno)


def compile_template(source: str) -> LogTemplate:
    """
    Compiles a log template.

    Raises TemplateSyntaxError for malformed source or calls to unknown helpers.
    Unknown field names are only detected when rendering.
    """
    try:
        ast = _env.parse(source)
        _check_helpers(ast)
        template = _env.from_string(source)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateSyntaxError(f"template: line {e.lineno}: {e.message}", e.lineno) from e
    return LogTemplate(source, template)


def render(template: LogTemplate, record: FormatRecord) -> str:
    """
    Renders a record through a compiled template.

    Raises TemplateRenderError when the template references a name that is not
    part of the record, or a helper rejects its arguments.
    """
    try:
        return template._template.render(record.context())
    except jinja2.UndefinedError as e:
        raise TemplateRenderError(f"template: {e.message}") from e
    except TypeError as e:
        raise TemplateRenderError(f"template: {e}") from e
