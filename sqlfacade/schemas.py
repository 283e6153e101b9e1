"""
Pydantic schemas for the template analysis HTTP API.
"""

from pydantic import Field
from sqlmodel import SQLModel

from sqlfacade.models import ExtractionMode


class TemplateVariablesIn(SQLModel):
    """Body for POST /templates/variables."""

    content: str = Field(..., description="Template source.")
    mode: ExtractionMode | None = Field(
        default=None,
        description="guard-only (default) or full; full also reads block bodies.",
    )


class TemplateAdditionIn(SQLModel):
    """Body for POST /templates/addition."""

    content: str = Field(..., description="Template rendering a JSON array of tables.")
