"""
Engines: template variable extraction and addition rendering (Jinja2).
"""

from sqlfacade.engines.template import (
    TemplateVariableExtractor,
    extract_addition_from_template,
    extract_template_variables,
)

__all__ = [
    "TemplateVariableExtractor",
    "extract_addition_from_template",
    "extract_template_variables",
]
