"""
Newsletter signup endpoint.

Endpoints:
- POST /api/newsletter - Subscribe an email address

Subscribing an address that is already subscribed is not an error: the
response is 201 with the id of the existing subscription.
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
from src.components.submissions import SubmissionStorePort, SubscribeInput, run_newsletter
from src.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/newsletter",
    response_model=Envelope,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": Envelope, "description": "Invalid email address"},
        500: {"model": Envelope, "description": "Unexpected failure"},
    },
    summary="Subscribe to newsletter",
    description="Subscribe an email address. Repeat subscriptions return the original id.",
)
async def subscribe_to_newsletter(
    request: Request,
    store: SubmissionStorePort = Depends(get_store),
    rules: Rules = Depends(get_rules),
) -> JSONResponse:
    payload = await read_json_body(request)

    try:
        result = run_newsletter(SubscribeInput(payload=payload), store, forms=rules.forms)
    except Exception:
        logger.exception("Error processing newsletter subscription")
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_envelope(GENERIC_ERROR_MESSAGE),
            request,
        )

    if not result.success or result.subscription is None:
        return envelope_response(
            status.HTTP_400_BAD_REQUEST,
            error_envelope("Invalid email address", result.errors),
            request,
        )

    return envelope_response(
        status.HTTP_201_CREATED,
        success_envelope("Newsletter subscription successful", result.subscription.id),
        request,
    )
