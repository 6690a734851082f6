"""
Submissions component.

Functional core for the contact form and newsletter signup endpoints.

Key behaviors:
- Every field rule is evaluated; all violations are returned together
- Accepted contact submissions get the next contact id
- Newsletter signup is an idempotent create keyed on the exact email

Storage failures are not caught here; they propagate to the HTTP boundary.
"""

from __future__ import annotations

import logging

from src.components.submissions._rules import (
    build_contact_rules,
    build_newsletter_rules,
    evaluate_rules,
)
from src.components.submissions.models import (
    ContactData,
    SubmitContactInput,
    SubmitContactOutput,
    SubscribeInput,
    SubscribeOutput,
    ValidationResult,
)
from src.components.submissions.ports import SubmissionStorePort
from src.rules.models import FormsRules

logger = logging.getLogger(__name__)


# --- Validation ---


def validate_contact(payload: object, forms: FormsRules | None = None) -> ValidationResult:
    """
    Validate a contact form payload.

    Args:
        payload: Parsed request body (wire field names)
        forms: Form rules from rules.yaml (defaults if omitted)

    Returns:
        ValidationResult listing every violated field
    """
    cfg = forms or FormsRules()
    errors = evaluate_rules(build_contact_rules(cfg.contact), payload)
    return ValidationResult(is_valid=not errors, errors=errors)


def validate_newsletter(payload: object, forms: FormsRules | None = None) -> ValidationResult:
    """Validate a newsletter subscription payload."""
    cfg = forms or FormsRules()
    errors = evaluate_rules(build_newsletter_rules(cfg.newsletter), payload)
    return ValidationResult(is_valid=not errors, errors=errors)


# --- Run Handlers ---


def run_contact(
    inp: SubmitContactInput,
    store: SubmissionStorePort,
    *,
    forms: FormsRules | None = None,
) -> SubmitContactOutput:
    """
    Handle a contact form submission (Atomic Handler).
    """
    validation = validate_contact(inp.payload, forms)
    if not validation.is_valid:
        logger.info(
            "Contact submission rejected: %s",
            ", ".join(e.field for e in validation.errors),
        )
        return SubmitContactOutput(success=False, errors=validation.errors)

    submission = store.create_contact(ContactData.from_payload(inp.payload))
    return SubmitContactOutput(success=True, submission=submission)


def run_newsletter(
    inp: SubscribeInput,
    store: SubmissionStorePort,
    *,
    forms: FormsRules | None = None,
) -> SubscribeOutput:
    """
    Handle a newsletter subscription (Atomic Handler).

    A repeat subscription succeeds with the existing record.
    """
    validation = validate_newsletter(inp.payload, forms)
    if not validation.is_valid:
        return SubscribeOutput(success=False, errors=validation.errors)

    subscription = store.create_newsletter_subscription(inp.payload["email"])
    return SubscribeOutput(success=True, subscription=subscription)


def run(
    inp: SubmitContactInput | SubscribeInput,
    *,
    store: SubmissionStorePort,
    forms: FormsRules | None = None,
) -> SubmitContactOutput | SubscribeOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: Input command
        store: Submission store port (Required)
        forms: Form rules (Optional)

    Returns:
        Operation result
    """
    if isinstance(inp, SubmitContactInput):
        return run_contact(inp, store, forms=forms)
    if isinstance(inp, SubscribeInput):
        return run_newsletter(inp, store, forms=forms)
    raise ValueError(f"Unknown input type: {type(inp)}")
