"""
Template engine (Jinja2): variable extraction and addition rendering.

Exports: extract_template_variables, TemplateVariableExtractor,
extract_addition_from_template, compile_template and the error classes.
"""

from sqlfacade.engines.template.addition import extract_addition_from_template
from sqlfacade.engines.template.compiler import CompiledTemplate, compile_template
from sqlfacade.engines.template.errors import (
    TemplateDecodeError,
    TemplateError,
    TemplateExecutionError,
    TemplateSyntaxError,
)
from sqlfacade.engines.template.names import (
    bound_by,
    collect_template_names,
    top_level_bindings,
)
from sqlfacade.engines.template.variables import (
    TemplateVariableExtractor,
    extract_template_variables,
    extract_variables,
    remove_elements,
)
from sqlfacade.engines.template.walker import (
    find_body_variables,
    find_variables,
    find_variables_from_pipe,
)

__all__ = [
    "CompiledTemplate",
    "TemplateDecodeError",
    "TemplateError",
    "TemplateExecutionError",
    "TemplateSyntaxError",
    "TemplateVariableExtractor",
    "bound_by",
    "collect_template_names",
    "compile_template",
    "extract_addition_from_template",
    "extract_template_variables",
    "extract_variables",
    "find_body_variables",
    "find_variables",
    "find_variables_from_pipe",
    "remove_elements",
    "top_level_bindings",
]
