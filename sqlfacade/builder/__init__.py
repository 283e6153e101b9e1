"""
SQL builder glue: dialect resolution (SQLAlchemy) and projection aliases.
"""

from sqlfacade.builder.alias import extract_order_alias, extract_select_alias
from sqlfacade.builder.dialect import (
    Builder,
    DialectProfile,
    InvariantViolation,
    dialect,
    resolve_dialect,
)

__all__ = [
    "Builder",
    "DialectProfile",
    "InvariantViolation",
    "dialect",
    "extract_order_alias",
    "extract_select_alias",
    "resolve_dialect",
]
