"""
sqlfacade: template analysis for the SQL builder.

Finds the variables a Jinja2 SQL template expects, decodes addition
templates into physical-table specifications, maps drivers to SQL dialects,
and extracts projection aliases.
"""

from sqlfacade.builder import (
    Builder,
    InvariantViolation,
    dialect,
    extract_order_alias,
    extract_select_alias,
    resolve_dialect,
)
from sqlfacade.engines.template import (
    TemplateDecodeError,
    TemplateError,
    TemplateExecutionError,
    TemplateSyntaxError,
    TemplateVariableExtractor,
    extract_addition_from_template,
    extract_template_variables,
)
from sqlfacade.models import ExtractionMode

__all__ = [
    "Builder",
    "ExtractionMode",
    "InvariantViolation",
    "TemplateDecodeError",
    "TemplateError",
    "TemplateExecutionError",
    "TemplateSyntaxError",
    "TemplateVariableExtractor",
    "dialect",
    "extract_addition_from_template",
    "extract_order_alias",
    "extract_select_alias",
    "extract_template_variables",
    "resolve_dialect",
]
