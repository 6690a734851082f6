"""In-memory submission store adapter.

This adapter implements SubmissionStorePort for the submissions component.
Records live for the lifetime of the process and are lost on restart.
"""

from __future__ import annotations

from threading import Lock

from src.adapters.clock import SystemClock
from src.components.submissions.models import (
    ContactData,
    ContactSubmission,
    NewsletterSubscription,
)
from src.ports.clock import ClockPort


class InMemorySubmissionStore:
    """In-memory submission storage - suitable for single-process deployments.

    One lock guards every operation, so the email check and insert of a
    newsletter subscription happen as a single step.
    """

    def __init__(self, clock: ClockPort | None = None) -> None:
        self._clock = clock if clock is not None else SystemClock()
        self._lock = Lock()
        self._contacts: dict[int, ContactSubmission] = {}
        self._newsletters: dict[int, NewsletterSubscription] = {}
        self._next_contact_id = 1
        self._next_newsletter_id = 1

    # --- Contact submissions ---

    def create_contact(self, data: ContactData) -> ContactSubmission:
        with self._lock:
            contact = ContactSubmission(
                id=self._next_contact_id,
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                company=data.company,
                subject=data.subject,
                message=data.message,
                privacy_policy=data.privacy_policy,
                created_at=self._clock.now(),
            )
            self._next_contact_id += 1
            self._contacts[contact.id] = contact
            return contact

    def get_contact(self, contact_id: int) -> ContactSubmission | None:
        with self._lock:
            return self._contacts.get(contact_id)

    def list_contacts(self) -> list[ContactSubmission]:
        with self._lock:
            return list(self._contacts.values())

    # --- Newsletter subscriptions ---

    def create_newsletter_subscription(self, email: str) -> NewsletterSubscription:
        with self._lock:
            existing = self._find_by_email(email)
            if existing is not None:
                return existing

            subscription = NewsletterSubscription(
                id=self._next_newsletter_id,
                email=email,
                created_at=self._clock.now(),
            )
            self._next_newsletter_id += 1
            self._newsletters[subscription.id] = subscription
            return subscription

    def get_newsletter_subscription(self, subscription_id: int) -> NewsletterSubscription | None:
        with self._lock:
            return self._newsletters.get(subscription_id)

    def find_newsletter_subscription_by_email(self, email: str) -> NewsletterSubscription | None:
        with self._lock:
            return self._find_by_email(email)

    def list_newsletter_subscriptions(self) -> list[NewsletterSubscription]:
        with self._lock:
            return list(self._newsletters.values())

    def _find_by_email(self, email: str) -> NewsletterSubscription | None:
        # Caller holds the lock.
        for subscription in self._newsletters.values():
            if subscription.email == email:
                return subscription
        return None
