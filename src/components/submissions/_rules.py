"""
Field rules for submission payloads.

Each entity is checked by an explicit list of named predicate rules.
Every rule runs; failures are collected, never short-circuited.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from src.rules.models import ContactFormRules, LengthRule, NewsletterFormRules

from .models import FieldViolation

# --- Email Validation Regex (RFC 5322 simplified) ---
# Unanchored: apply with fullmatch, since $ also matches before a trailing newline.

EMAIL_REGEX = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+"
)

MAX_EMAIL_LENGTH = 254

_MISSING = object()


@dataclass(frozen=True)
class FieldRule:
    """A named check on one payload field."""

    name: str
    field: str
    check: Callable[[Any], bool]
    message: str
    code: str

    def evaluate(self, payload: dict[str, Any]) -> FieldViolation | None:
        value = payload.get(self.field, _MISSING)
        if value is not _MISSING and self.check(value):
            return None
        return FieldViolation(field=self.field, message=self.message, code=self.code)


# --- Predicates ---


def is_valid_email(value: Any) -> bool:
    """Syntactic email check. The value is not normalized."""
    if not isinstance(value, str):
        return False
    if len(value) > MAX_EMAIL_LENGTH:
        return False
    return EMAIL_REGEX.fullmatch(value) is not None


def min_length(n: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= n

    return check


def is_true(value: Any) -> bool:
    # bool only: 1 and "true" are rejected
    return value is True


# --- Rule Sets ---


def _length_rule(name: str, wire_field: str, rule: LengthRule) -> FieldRule:
    return FieldRule(
        name=name,
        field=wire_field,
        check=min_length(rule.min_length),
        message=rule.message,
        code="too_short",
    )


def build_contact_rules(cfg: ContactFormRules | None = None) -> list[FieldRule]:
    """Rules for a contact form payload, in form field order."""
    cfg = cfg or ContactFormRules()
    return [
        _length_rule("first_name_min_length", "firstName", cfg.first_name),
        _length_rule("last_name_min_length", "lastName", cfg.last_name),
        FieldRule(
            name="email_format",
            field="email",
            check=is_valid_email,
            message=cfg.email_message,
            code="invalid_email",
        ),
        _length_rule("company_min_length", "company", cfg.company),
        _length_rule("subject_required", "subject", cfg.subject),
        _length_rule("message_min_length", "message", cfg.message),
        FieldRule(
            name="privacy_policy_accepted",
            field="privacyPolicy",
            check=is_true,
            message=cfg.privacy_policy_message,
            code="must_accept",
        ),
    ]


def build_newsletter_rules(cfg: NewsletterFormRules | None = None) -> list[FieldRule]:
    """Rules for a newsletter subscription payload."""
    cfg = cfg or NewsletterFormRules()
    return [
        FieldRule(
            name="email_format",
            field="email",
            check=is_valid_email,
            message=cfg.email_message,
            code="invalid_email",
        ),
    ]


def evaluate_rules(rules: list[FieldRule], payload: Any) -> list[FieldViolation]:
    """Run every rule against the payload and return all violations."""
    if not isinstance(payload, dict):
        return [
            FieldViolation(
                field="body",
                message="Request body must be a JSON object.",
                code="invalid_type",
            )
        ]

    violations: list[FieldViolation] = []
    for rule in rules:
        violation = rule.evaluate(payload)
        if violation is not None:
            violations.append(violation)
    return violations
