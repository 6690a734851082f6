"""
Response envelope shared by every API endpoint.

Shape: {success, message, id?, errors?: [{field, message}]}.
Optional keys are omitted when absent.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.components.submissions.models import FieldViolation

GENERIC_ERROR_MESSAGE = "Error processing your request"


class FieldError(BaseModel):
    """A single field violation as returned to callers."""

    field: str = Field(..., description="Request body field name")
    message: str = Field(..., description="Human-readable reason")


class Envelope(BaseModel):
    """Uniform API response wrapper."""

    success: bool = Field(..., description="Whether the request was processed successfully")
    message: str = Field(..., description="Human-readable message")
    id: int | None = Field(default=None, description="Identifier of the stored record")
    errors: list[FieldError] | None = Field(
        default=None, description="Every violated field (validation failures only)"
    )


def success_envelope(message: str, record_id: int | None = None) -> Envelope:
    return Envelope(success=True, message=message, id=record_id)


def error_envelope(message: str, violations: list[FieldViolation] | None = None) -> Envelope:
    errors = None
    if violations is not None:
        errors = [FieldError(field=v.field, message=v.message) for v in violations]
    return Envelope(success=False, message=message, errors=errors)


def envelope_response(
    status_code: int,
    envelope: Envelope,
    request: Request | None = None,
) -> JSONResponse:
    """
    Serialize an envelope to a JSON response.

    When a request is given, the body is kept on request.state for the
    request log.
    """
    content: dict[str, Any] = envelope.model_dump(exclude_none=True)
    if request is not None:
        request.state.response_json = content
    return JSONResponse(status_code=status_code, content=content)
