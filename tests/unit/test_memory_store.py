"""
Tests for the in-memory submission store.

Covers id assignment, round-trips, idempotent newsletter creation and
the lock around check-then-create.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from src.adapters.memory_store import InMemorySubmissionStore
from src.components.submissions.models import ContactData


def make_contact(**overrides: object) -> ContactData:
    fields: dict = {
        "first_name": "Al",
        "last_name": "Lee",
        "email": "a@b.com",
        "company": "Ab",
        "subject": "General",
        "message": "1234567890",
        "privacy_policy": True,
    }
    fields.update(overrides)
    return ContactData(**fields)


class TestContacts:
    def test_first_id_is_one(self, store: InMemorySubmissionStore) -> None:
        assert store.create_contact(make_contact()).id == 1

    def test_ids_strictly_increase(self, store: InMemorySubmissionStore) -> None:
        ids = [store.create_contact(make_contact()).id for _ in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_identical_contacts_are_separate_records(
        self, store: InMemorySubmissionStore
    ) -> None:
        store.create_contact(make_contact())
        store.create_contact(make_contact())
        assert len(store.list_contacts()) == 2

    def test_round_trip(self, store: InMemorySubmissionStore, clock) -> None:
        stamped_at = clock.now()
        created = store.create_contact(make_contact(first_name="Grace"))
        clock.advance(60)

        fetched = store.get_contact(created.id)
        assert fetched == created
        assert fetched is not None
        assert fetched.created_at == stamped_at
        assert fetched.first_name == "Grace"

    def test_created_at_from_clock(self, store: InMemorySubmissionStore, clock) -> None:
        first = store.create_contact(make_contact())
        clock.advance(5)
        second = store.create_contact(make_contact())
        assert second.created_at > first.created_at
        assert second.created_at == clock.now()

    def test_get_missing(self, store: InMemorySubmissionStore) -> None:
        assert store.get_contact(99) is None

    def test_list_in_insertion_order(self, store: InMemorySubmissionStore) -> None:
        for name in ["Ann", "Bob", "Cy"]:
            store.create_contact(make_contact(first_name=name))
        assert [c.first_name for c in store.list_contacts()] == ["Ann", "Bob", "Cy"]

    def test_list_is_a_copy(self, store: InMemorySubmissionStore) -> None:
        store.create_contact(make_contact())
        listed = store.list_contacts()
        listed.clear()
        assert len(store.list_contacts()) == 1


class TestNewsletter:
    def test_create(self, store: InMemorySubmissionStore) -> None:
        sub = store.create_newsletter_subscription("a@b.com")
        assert sub.id == 1
        assert sub.email == "a@b.com"

    def test_repeat_returns_existing_unchanged(
        self, store: InMemorySubmissionStore, clock
    ) -> None:
        first = store.create_newsletter_subscription("a@b.com")
        clock.advance(3600)
        second = store.create_newsletter_subscription("a@b.com")

        assert second == first
        assert second.created_at == first.created_at
        assert len(store.list_newsletter_subscriptions()) == 1

    def test_repeat_does_not_consume_id(self, store: InMemorySubmissionStore) -> None:
        store.create_newsletter_subscription("a@b.com")
        store.create_newsletter_subscription("a@b.com")
        assert store.create_newsletter_subscription("c@d.com").id == 2

    def test_email_match_is_case_sensitive(self, store: InMemorySubmissionStore) -> None:
        lower = store.create_newsletter_subscription("a@b.com")
        upper = store.create_newsletter_subscription("A@B.com")
        assert lower.id != upper.id
        assert len(store.list_newsletter_subscriptions()) == 2

    def test_find_by_email(self, store: InMemorySubmissionStore) -> None:
        sub = store.create_newsletter_subscription("a@b.com")
        assert store.find_newsletter_subscription_by_email("a@b.com") == sub
        assert store.find_newsletter_subscription_by_email("x@y.com") is None

    def test_get_by_id(self, store: InMemorySubmissionStore) -> None:
        sub = store.create_newsletter_subscription("a@b.com")
        assert store.get_newsletter_subscription(sub.id) == sub
        assert store.get_newsletter_subscription(42) is None

    def test_counters_are_independent(self, store: InMemorySubmissionStore) -> None:
        store.create_contact(make_contact())
        store.create_contact(make_contact())
        assert store.create_newsletter_subscription("a@b.com").id == 1


class TestConcurrency:
    def test_simultaneous_subscriptions_create_one_record(self) -> None:
        store = InMemorySubmissionStore()
        n = 32
        barrier = Barrier(n)

        def subscribe() -> int:
            barrier.wait()
            return store.create_newsletter_subscription("race@example.com").id

        with ThreadPoolExecutor(max_workers=n) as pool:
            ids = list(pool.map(lambda _: subscribe(), range(n)))

        assert len(ids) == n
        assert set(ids) == {1}
        assert len(store.list_newsletter_subscriptions()) == 1

    def test_simultaneous_contacts_get_unique_ids(self) -> None:
        store = InMemorySubmissionStore()
        n = 32
        barrier = Barrier(n)

        def submit() -> int:
            barrier.wait()
            return store.create_contact(make_contact()).id

        with ThreadPoolExecutor(max_workers=n) as pool:
            ids = list(pool.map(lambda _: submit(), range(n)))

        assert sorted(ids) == list(range(1, n + 1))
