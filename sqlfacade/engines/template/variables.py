"""
Template variable extraction.

Pipeline: compile -> collect sub-template names -> walk root and every
sub-template (locally bound names skipped per scope) -> drop sub-template
names -> dedupe -> sort.

The sorted result is stable for a given source and can be used as a cache
key or compared between template versions.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from sqlfacade.core.config import settings
from sqlfacade.engines.template.compiler import CompiledTemplate, compile_template
from sqlfacade.engines.template.names import (
    collect_template_names,
    top_level_bindings,
)
from sqlfacade.engines.template.walker import (
    find_body_variables,
    find_definition_variables,
)
from sqlfacade.models import ExtractionMode

_log = logging.getLogger(__name__)


def unique(values: Iterable[str]) -> list[str]:
    """Drop repeats, keeping the first occurrence of each value."""
    seen: set[str] = set()
    result: list[str] = []
    for v in values:
        if v not in seen:
            seen.add(v)
            result.append(v)
    return result


def remove_elements(values: Iterable[str], excluded: Iterable[str]) -> list[str]:
    """Values not in *excluded*, deduplicated, in first-seen order."""
    skip = set(excluded)
    return unique(v for v in values if v not in skip)


def extract_variables(
    compiled: CompiledTemplate,
    mode: ExtractionMode = ExtractionMode.GUARD_ONLY,
) -> list[str]:
    """Raw identifiers of the root template and of every sub-template, unique.

    Sub-templates see the names bound at the top level of the root template;
    each also binds its own parameters.
    """
    variables = find_body_variables(
        compiled.root.body, functions=compiled.functions, mode=mode
    )
    exported = top_level_bindings(compiled)
    for definitions in compiled.definitions.values():
        for definition in definitions:
            variables.extend(
                find_definition_variables(
                    definition,
                    functions=compiled.functions,
                    mode=mode,
                    bound=exported,
                )
            )
    return unique(variables)


def extract_template_variables(
    source: str,
    *,
    functions: Mapping[str, Callable[..., Any]] | None = None,
    mode: ExtractionMode | None = None,
) -> list[str]:
    """
    Names of the inputs *source* expects, sorted ascending.

    Sub-template names (macros, blocks, the root template) are excluded, and
    so are references to names bound in the enclosing scope. Raises
    ``TemplateSyntaxError`` for malformed source.
    """
    _mode = mode or settings.EXTRACTION_MODE
    compiled = compile_template(source, functions=functions)
    names = remove_elements(
        extract_variables(compiled, _mode), collect_template_names(compiled)
    )
    names.sort()
    _log.debug("Template %s variables (%s): %s", compiled.name, _mode.value, names)
    return names


class TemplateVariableExtractor:
    """Extracts input variable names from SQL templates.

    Holds the function registry and mode so repeated calls share them;
    every call still compiles its own tree.
    """

    def __init__(
        self,
        functions: Mapping[str, Callable[..., Any]] | None = None,
        mode: ExtractionMode | None = None,
    ) -> None:
        self.functions = dict(functions or {})
        self.mode = mode

    def extract(self, source: str) -> list[str]:
        return extract_template_variables(
            source, functions=self.functions, mode=self.mode
        )

    def template_names(self, source: str) -> list[str]:
        """Sorted sub-template names defined in *source* (root name included)."""
        compiled = compile_template(source, functions=self.functions)
        return sorted(collect_template_names(compiled))
