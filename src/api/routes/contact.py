"""
Contact form endpoint.

Endpoints:
- POST /api/contact - Submit the contact form
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.api.body import read_json_body
from src.api.deps import get_rules, get_store
from src.api.envelope import (
    GENERIC_ERROR_MESSAGE,
    Envelope,
    envelope_response,
    error_envelope,
    success_envelope,
)
from src.components.submissions import SubmissionStorePort, SubmitContactInput, run_contact
from src.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/contact",
    response_model=Envelope,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": Envelope, "description": "Validation error"},
        500: {"model": Envelope, "description": "Unexpected failure"},
    },
    summary="Submit contact form",
    description="Validate and store a contact form submission.",
)
async def submit_contact(
    request: Request,
    store: SubmissionStorePort = Depends(get_store),
    rules: Rules = Depends(get_rules),
) -> JSONResponse:
    """
    Submit the contact form.

    All fields are validated together; a 400 lists every violated field.
    """
    payload = await read_json_body(request)

    try:
        result = run_contact(SubmitContactInput(payload=payload), store, forms=rules.forms)
    except Exception:
        logger.exception("Error processing contact form submission")
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_envelope(GENERIC_ERROR_MESSAGE),
            request,
        )

    if not result.success or result.submission is None:
        return envelope_response(
            status.HTTP_400_BAD_REQUEST,
            error_envelope("Validation error", result.errors),
            request,
        )

    return envelope_response(
        status.HTTP_201_CREATED,
        success_envelope("Contact form submitted successfully", result.submission.id),
        request,
    )
