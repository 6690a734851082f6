"""
Submissions component.

Contact form submissions and newsletter signups: field validation,
handlers and the storage port.
"""

from src.components.submissions._rules import (
    EMAIL_REGEX,
    FieldRule,
    build_contact_rules,
    build_newsletter_rules,
    evaluate_rules,
    is_valid_email,
)
from src.components.submissions.component import (
    run,
    run_contact,
    run_newsletter,
    validate_contact,
    validate_newsletter,
)
from src.components.submissions.models import (
    ContactData,
    ContactSubmission,
    FieldViolation,
    NewsletterSubscription,
    SubmitContactInput,
    SubmitContactOutput,
    SubscribeInput,
    SubscribeOutput,
    ValidationResult,
)
from src.components.submissions.ports import SubmissionStorePort

__all__ = [
    # Component
    "run",
    "run_contact",
    "run_newsletter",
    # Validation
    "validate_contact",
    "validate_newsletter",
    "FieldRule",
    "build_contact_rules",
    "build_newsletter_rules",
    "evaluate_rules",
    "is_valid_email",
    "EMAIL_REGEX",
    # Models
    "ContactSubmission",
    "NewsletterSubscription",
    "ContactData",
    "FieldViolation",
    "ValidationResult",
    # Input/Output
    "SubmitContactInput",
    "SubmitContactOutput",
    "SubscribeInput",
    "SubscribeOutput",
    # Ports
    "SubmissionStorePort",
]
