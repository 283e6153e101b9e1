"""
Functions injected into every template environment.

Filters format values as SQL literals (``{{ id | sql_int }}``); globals build
the physical-table records rendered by addition templates
(``{{ tables("orders", "users") | to_json }}``).

Names registered here are function identifiers: the variable walker never
reports them as template variables.
"""

import json
from collections.abc import Callable
from typing import Any

_SQL_QUOTE_ESCAPE = str.maketrans({"'": "''"})
_EMPTY_IN = "(SELECT 1 WHERE 1=0)"


# ---------------------------------------------------------------------------
# SQL literal filters
# ---------------------------------------------------------------------------


def sql_string(value: Any) -> str:
    """Quote *value* as a SQL string literal. None -> NULL."""
    if value is None:
        return "NULL"
    return "'" + str(value).translate(_SQL_QUOTE_ESCAPE) + "'"


def sql_int(value: Any) -> str:
    """Integer literal; anything that does not convert becomes NULL."""
    if value is None or isinstance(value, bool):
        return "NULL"
    try:
        return str(int(value))
    except (TypeError, ValueError):
        return "NULL"


def sql_float(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return "NULL"
    try:
        return repr(float(value))
    except (TypeError, ValueError):
        return "NULL"


def sql_bool(value: Any) -> str:
    """TRUE/FALSE, accepted by both MySQL and Postgres. None -> NULL."""
    if value is None:
        return "NULL"
    return "TRUE" if value else "FALSE"


def _literal(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return sql_bool(value)
    if isinstance(value, (int, float)):
        return str(value)
    return sql_string(value)


def in_list(value: Any) -> str:
    """Render an iterable as ``(a, b, c)`` for IN clauses.

    An empty or missing list yields a sub-select matching nothing so the
    statement stays valid.
    """
    if value is None or isinstance(value, (str, bytes)):
        return _EMPTY_IN
    try:
        items = list(value)
    except TypeError:
        return _EMPTY_IN
    if not items:
        return _EMPTY_IN
    return "(" + ", ".join(_literal(v) for v in items) + ")"


def sql_raw(value: Any) -> str:
    """Emit *value* untouched. Only for identifiers the template author controls."""
    if value is None:
        return "NULL"
    return str(value)


def to_json(value: Any) -> str:
    """Serialize *value* as JSON (non-ASCII kept as is)."""
    return json.dumps(value, ensure_ascii=False, default=str)


# ---------------------------------------------------------------------------
# Globals for addition templates
# ---------------------------------------------------------------------------


def table(
    name: str,
    schema: str | None = None,
    database: str | None = None,
    alias: str | None = None,
) -> dict[str, str | None]:
    """Physical table record, shaped like ``Specification``."""
    if not name or not isinstance(name, str):
        raise ValueError("table() requires a non-empty table name")
    return {
        "table": name,
        "schema_name": schema,
        "database": database,
        "alias": alias,
    }


def tables(*names: str, schema: str | None = None) -> list[dict[str, str | None]]:
    return [table(n, schema=schema) for n in names]


TEMPLATE_FILTERS: dict[str, Callable[..., Any]] = {
    "sql_string": sql_string,
    "sql_int": sql_int,
    "sql_float": sql_float,
    "sql_bool": sql_bool,
    "in_list": in_list,
    "sql_raw": sql_raw,
    "to_json": to_json,
}


def default_functions() -> dict[str, Callable[..., Any]]:
    """Fresh registry of template globals; callers may extend the copy."""
    return {
        "table": table,
        "tables": tables,
        "to_json": to_json,
    }
