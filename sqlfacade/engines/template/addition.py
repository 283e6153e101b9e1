"""
Addition templates: render a variable-free template to a JSON array of
physical-table specifications.

The template is rendered against an empty context; any variable it reads is
an execution error. Each stage raises its own error class:
``TemplateSyntaxError`` (compile), ``TemplateExecutionError`` (render),
``TemplateDecodeError`` (JSON shape).
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

import jinja2
from pydantic import TypeAdapter, ValidationError

from sqlfacade.engines.template.compiler import (
    build_environment,
    compile_template,
    syntax_error_from,
)
from sqlfacade.engines.template.errors import (
    TemplateDecodeError,
    TemplateExecutionError,
)
from sqlfacade.models import NativeSqlHeader, Specification

_log = logging.getLogger(__name__)

ADDITION_TEMPLATE_NAME = "addition"

_SPECS = TypeAdapter(list[Specification] | None)


def _preview(text: str, limit: int = 200) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def extract_addition_from_template(
    source: str,
    *,
    functions: Mapping[str, Callable[..., Any]] | None = None,
) -> NativeSqlHeader:
    """Render *source* and decode the output into a ``NativeSqlHeader``."""
    env = build_environment(functions)
    compiled = compile_template(source, name=ADDITION_TEMPLATE_NAME, env=env)
    try:
        template = env.from_string(compiled.root)
    except jinja2.TemplateSyntaxError as e:
        raise syntax_error_from(e, ADDITION_TEMPLATE_NAME) from e

    try:
        rendered = template.render()
    except Exception as e:
        _log.warning("Addition template render failed: %s", e)
        raise TemplateExecutionError(f"Addition template render error: {e}") from e
    _log.debug("Rendered addition template: %s", rendered)

    try:
        specs = _SPECS.validate_json(rendered)
    except ValidationError as e:
        raise TemplateDecodeError(
            f"Addition template output is not a JSON array of specifications: "
            f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}. "
            f"Output preview:\n{_preview(rendered)}"
        ) from e
    return NativeSqlHeader(specs=specs or [])
