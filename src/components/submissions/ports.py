"""
Submissions component ports.

Protocol interfaces for submission storage.
"""

from __future__ import annotations

from typing import Protocol

from src.components.submissions.models import (
    ContactData,
    ContactSubmission,
    NewsletterSubscription,
)


class SubmissionStorePort(Protocol):
    """
    Submission store interface.

    Owns contact submissions and newsletter subscriptions, assigns their ids
    and enforces one subscription per email.
    """

    def create_contact(self, data: ContactData) -> ContactSubmission:
        """Store a new contact submission under the next contact id."""
        ...

    def get_contact(self, contact_id: int) -> ContactSubmission | None:
        """Get contact submission by ID."""
        ...

    def list_contacts(self) -> list[ContactSubmission]:
        """List contact submissions in insertion order."""
        ...

    def create_newsletter_subscription(self, email: str) -> NewsletterSubscription:
        """
        Create a subscription, or return the existing one for this email.

        Args:
            email: Email address, matched exactly (case-sensitive)

        Returns:
            The new subscription, or the unchanged existing one
        """
        ...

    def get_newsletter_subscription(self, subscription_id: int) -> NewsletterSubscription | None:
        """Get subscription by ID."""
        ...

    def find_newsletter_subscription_by_email(self, email: str) -> NewsletterSubscription | None:
        """Get subscription by exact email address."""
        ...

    def list_newsletter_subscriptions(self) -> list[NewsletterSubscription]:
        """List subscriptions in insertion order."""
        ...
