"""
Submissions component models.

Data models for contact form submissions and newsletter subscriptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# --- Entities ---


@dataclass(frozen=True)
class ContactSubmission:
    """
    Contact form submission entity.

    Created once per accepted submission, never updated or deleted.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    company: str
    subject: str
    message: str
    privacy_policy: bool
    created_at: datetime


@dataclass(frozen=True)
class NewsletterSubscription:
    """
    Newsletter subscription entity.

    At most one subscription exists per email address.
    """

    id: int
    email: str
    created_at: datetime


# --- Validated Data ---


@dataclass(frozen=True)
class ContactData:
    """Accepted contact form fields, ready for storage."""

    first_name: str
    last_name: str
    email: str
    company: str
    subject: str
    message: str
    privacy_policy: bool

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ContactData:
        """Build from a payload that already passed validation (wire names)."""
        return cls(
            first_name=payload["firstName"],
            last_name=payload["lastName"],
            email=payload["email"],
            company=payload["company"],
            subject=payload["subject"],
            message=payload["message"],
            privacy_policy=payload["privacyPolicy"],
        )


# --- Input Models ---


@dataclass(frozen=True)
class SubmitContactInput:
    """Input for a contact form submission (raw request body)."""

    payload: Any


@dataclass(frozen=True)
class SubscribeInput:
    """Input for a newsletter subscription (raw request body)."""

    payload: Any


# --- Output Models ---


@dataclass(frozen=True)
class FieldViolation:
    """A single failed field constraint."""

    field: str
    message: str
    code: str = "invalid"


@dataclass(frozen=True)
class ValidationResult:
    """Result of running every rule for one entity."""

    is_valid: bool
    errors: list[FieldViolation] = field(default_factory=list)


@dataclass(frozen=True)
class SubmitContactOutput:
    """Output from a contact form submission."""

    success: bool
    submission: ContactSubmission | None = None
    errors: list[FieldViolation] = field(default_factory=list)


@dataclass(frozen=True)
class SubscribeOutput:
    """Output from a newsletter subscription attempt."""

    success: bool
    subscription: NewsletterSubscription | None = None
    errors: list[FieldViolation] = field(default_factory=list)
