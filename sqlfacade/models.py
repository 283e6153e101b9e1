"""
Query/request models for the SQL builder facade.

Driver, MixField (column / expression / case-when one-of), OrderBy,
BuilderRequest, and the Specification records decoded from addition
templates.
"""

from enum import Enum

from pydantic import Field, model_validator
from sqlmodel import SQLModel

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Driver(str, Enum):
    """Database drivers accepted by the SQL builder."""

    DRIVER_UNSPECIFIED = "DRIVER_UNSPECIFIED"
    DRIVER_MYSQL = "DRIVER_MYSQL"
    DRIVER_POSTGRES = "DRIVER_POSTGRES"
    DRIVER_DORIS = "DRIVER_DORIS"


class ExtractionMode(str, Enum):
    """How the variable walker treats the bodies of if/with/for blocks.

    GUARD_ONLY only reads the condition / iterable / bound values, FULL also
    descends into bodies and else branches.
    """

    GUARD_ONLY = "guard-only"
    FULL = "full"


# ---------------------------------------------------------------------------
# Projection fields
# ---------------------------------------------------------------------------


class Column(SQLModel):
    """Plain column reference."""

    table: str | None = None
    field: str = Field(..., min_length=1)
    alias: str | None = None


class Expression(SQLModel):
    """Function call over columns, e.g. ``SUM(amount) AS total``."""

    call: str = Field(..., min_length=1)
    args: list[str] = Field(default_factory=list)
    call_as: str | None = None


class CaseWhen(SQLModel):
    """``CASE WHEN ... THEN ... ELSE ... END`` projection."""

    conditions: list[str] = Field(default_factory=list)
    results: list[str] = Field(default_factory=list)
    otherwise: str | None = None
    alias: str | None = None


_MIX_VARIANTS = ("column", "expression", "case_when")


class MixField(SQLModel):
    """One projection entry; at most one of the variants is set."""

    column: Column | None = None
    expression: Expression | None = None
    case_when: CaseWhen | None = None

    @model_validator(mode="after")
    def at_most_one_variant(self) -> "MixField":
        active = [v for v in _MIX_VARIANTS if getattr(self, v) is not None]
        if len(active) > 1:
            raise ValueError(
                f"MixField accepts a single variant, got: {', '.join(active)}"
            )
        return self

    def which_mix(self) -> str | None:
        """Name of the active variant, or None when the field is empty."""
        for variant in _MIX_VARIANTS:
            if getattr(self, variant) is not None:
                return variant
        return None


class OrderBy(SQLModel):
    dependent: MixField | None = None
    order: str = "ASC"


class BuilderRequest(SQLModel):
    """Input of the SQL builder: target driver plus projection and ordering."""

    driver: Driver = Driver.DRIVER_UNSPECIFIED
    select: list[MixField] = Field(default_factory=list)
    order_by: list[OrderBy] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Addition templates (physical tables)
# ---------------------------------------------------------------------------


class Specification(SQLModel):
    """Physical table referenced by a native SQL template."""

    table: str = Field(..., min_length=1)
    schema_name: str | None = None
    database: str | None = None
    alias: str | None = None


class NativeSqlHeader(SQLModel):
    specs: list[Specification] = Field(default_factory=list)
