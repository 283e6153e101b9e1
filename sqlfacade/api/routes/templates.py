"""
Template analysis endpoints: list the variables a SQL template needs and
decode the physical tables of an addition template.

Responses use the envelope { success, message, data }; template errors are
returned as 400 with the same envelope.
"""

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from sqlfacade.engines.template import (
    TemplateError,
    TemplateSyntaxError,
    extract_addition_from_template,
    extract_template_variables,
)
from sqlfacade.schemas import TemplateAdditionIn, TemplateVariablesIn

_log = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


def _template_error_response(e: TemplateError) -> JSONResponse:
    """400 envelope for compile/render/decode errors."""
    detail: dict[str, Any] = {"error_type": type(e).__name__}
    if isinstance(e, TemplateSyntaxError) and e.lineno is not None:
        detail["lineno"] = e.lineno
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": str(e), "data": [detail]},
    )


@router.post("/variables")
def template_variables(body: TemplateVariablesIn) -> Any:
    """
    Variables referenced by the template, sorted, without sub-template names.
    """
    try:
        names = extract_template_variables(body.content, mode=body.mode)
    except TemplateError as e:
        return _template_error_response(e)
    return {"success": True, "message": "", "data": names}


@router.post("/addition")
def template_addition(body: TemplateAdditionIn) -> Any:
    """
    Render the addition template against an empty context and return the
    decoded table specifications.
    """
    try:
        header = extract_addition_from_template(body.content)
    except TemplateError as e:
        return _template_error_response(e)
    return {"success": True, "message": "", "data": header.model_dump()}
