"""
Alias lists for SELECT and ORDER BY projections.

Output is positionally aligned with the input: an entry without an alias
yields an empty string at its position.
"""

from collections.abc import Iterable

from sqlfacade.models import MixField, OrderBy


def mix_alias(field: MixField | None) -> str:
    """Alias (or call name) of the active variant of *field*."""
    if field is None:
        return ""
    variant = field.which_mix()
    if variant == "column":
        return field.column.alias or ""
    if variant == "expression":
        return field.expression.call_as or ""
    if variant == "case_when":
        return field.case_when.alias or ""
    return ""


def extract_select_alias(fields: Iterable[MixField]) -> list[str]:
    return [mix_alias(f) for f in fields]


def extract_order_alias(orders: Iterable[OrderBy]) -> list[str]:
    """``"<alias> <direction>"`` per entry, e.g. ``"name ASC"``."""
    return [f"{mix_alias(o.dependent)} {o.order}" for o in orders]
