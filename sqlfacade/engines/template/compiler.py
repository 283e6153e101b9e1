"""
Template compiler: Jinja2 source -> ``CompiledTemplate``.

Only parses; nothing is rendered here. A fresh ``Environment`` is built per
call because the function registry may differ between callers.

Every ``{% macro %}`` and ``{% block %}`` in the tree, nested ones included,
is a named sub-template. Its node is kept in ``definitions`` so the variable
walker can visit it independently of where it was declared.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import jinja2
from jinja2 import Environment, StrictUndefined, nodes

from sqlfacade.core.config import settings
from sqlfacade.engines.template.errors import TemplateSyntaxError
from sqlfacade.engines.template.functions import TEMPLATE_FILTERS, default_functions

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledTemplate:
    """Parsed template plus its named sub-templates."""

    name: str
    root: nodes.Template
    definitions: dict[str, list[nodes.Macro | nodes.Block]] = field(default_factory=dict)
    functions: frozenset[str] = frozenset()
    source: str = ""


def build_environment(
    functions: Mapping[str, Callable[..., Any]] | None = None,
) -> Environment:
    """Environment with the SQL filters and the injectable function registry."""
    env = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters.update(TEMPLATE_FILTERS)
    env.globals.update(default_functions())
    if functions:
        env.globals.update(functions)
    return env


def syntax_error_from(e: jinja2.TemplateSyntaxError, name: str) -> TemplateSyntaxError:
    """Wrap a Jinja2 syntax error, keeping its message and line number."""
    message = e.message or str(e)
    where = f" (line {e.lineno})" if e.lineno else ""
    return TemplateSyntaxError(
        f"Template syntax error in {name}: {message}{where}",
        lineno=e.lineno,
        name=name,
    )


def _collect_definitions(
    root: nodes.Template,
) -> dict[str, list[nodes.Macro | nodes.Block]]:
    definitions: dict[str, list[nodes.Macro | nodes.Block]] = {}
    for node in root.find_all((nodes.Macro, nodes.Block)):
        # Redefinitions are all kept so no reference is lost.
        definitions.setdefault(node.name, []).append(node)
    return definitions


def compile_template(
    source: str,
    *,
    functions: Mapping[str, Callable[..., Any]] | None = None,
    name: str | None = None,
    env: Environment | None = None,
) -> CompiledTemplate:
    """Parse *source* into a ``CompiledTemplate``.

    Raises ``TemplateSyntaxError`` when the source is malformed.
    """
    tmpl_name = name or settings.ROOT_TEMPLATE_NAME
    env = env or build_environment(functions)
    try:
        root = env.parse(source, name=tmpl_name)
    except jinja2.TemplateSyntaxError as e:
        _log.warning("Template %s failed to parse: %s", tmpl_name, e)
        raise syntax_error_from(e, tmpl_name) from e
    return CompiledTemplate(
        name=tmpl_name,
        root=root,
        definitions=_collect_definitions(root),
        functions=frozenset(env.globals),
        source=source,
    )
