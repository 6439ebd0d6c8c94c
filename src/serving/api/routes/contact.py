"""
Contact Form Endpoint
"""

import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.serving.api.deps import get_catalog
from src.serving.api.errors import INVALID_INPUT, VALIDATION_ERROR, error_response
from src.serving.catalog import CatalogService

router = APIRouter()


@router.post("/contact", status_code=201)
async def submit_contact(
    request: Request,
    catalog: CatalogService = Depends(get_catalog),
) -> Any:
    """
    Submit the contact form.

    Body: {name, email, message, source?}. The body is read as raw JSON so
    that field problems are reported by the contact rules, all at once.
    """
    try:
        payload: Dict[str, Any] = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = {}

    if not isinstance(payload, dict) or not payload:
        return error_response(400, INVALID_INPUT, "Request body is required")

    result = catalog.submit_contact(payload)

    if not result.accepted:
        return error_response(
            400,
            VALIDATION_ERROR,
            "Invalid input",
            details=[e.to_dict() for e in result.errors],
        )

    return JSONResponse(status_code=201, content={"id": result.id, "status": result.status})
