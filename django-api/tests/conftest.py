"""Pytest configuration and shared fixtures."""

import uuid
from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import Event, EventId
from events.services.event_service import EventService
from fakes import InMemoryEventStore, InMemoryRegistrationStore
from registrations.domain import UserId, UserProfile
from registrations.services.participation_service import ParticipationService
from registrations.services.registration_ledger import RegistrationLedger


def make_domain_event(title: str, starts_at: datetime) -> Event:
    stamp = datetime(2025, 1, 1, tzinfo=timezone.utc)
    return Event(
        id=EventId(uuid.uuid4()),
        title=title,
        description="",
        location="Community hall",
        starts_at=starts_at,
        created_at=stamp,
        updated_at=stamp,
    )


def make_profile(pk: int, username: str) -> UserProfile:
    return UserProfile(
        id=UserId(pk),
        username=username,
        email=f"{username}@example.org",
        first_name=username.title(),
        last_name="Tester",
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def june_event() -> Event:
    return make_domain_event("Volunteer day", datetime(2025, 6, 1, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def may_event() -> Event:
    return make_domain_event("Eco quarter cleanup", datetime(2025, 5, 1, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def alice() -> UserProfile:
    return make_profile(1, "alice")


@pytest.fixture
def bob() -> UserProfile:
    return make_profile(2, "bob")


@pytest.fixture
def event_store(june_event: Event, may_event: Event) -> InMemoryEventStore:
    return InMemoryEventStore([june_event, may_event])


@pytest.fixture
def registration_store(
    event_store: InMemoryEventStore, alice: UserProfile, bob: UserProfile
) -> InMemoryRegistrationStore:
    return InMemoryRegistrationStore(event_store, [alice, bob])


@pytest.fixture
def ledger(registration_store: InMemoryRegistrationStore) -> RegistrationLedger:
    return RegistrationLedger(registration_store)


@pytest.fixture
def participation(event_store: InMemoryEventStore, ledger: RegistrationLedger) -> ParticipationService:
    return ParticipationService(events=EventService(event_store), ledger=ledger)


@pytest.fixture
def make_user(db):
    from django.contrib.auth import get_user_model

    def factory(username: str, **extra):
        return get_user_model().objects.create_user(
            username=username,
            email=f"{username}@example.org",
            password="pass-12345",
            **extra,
        )

    return factory


@pytest.fixture
def make_event(db):
    from events.models import Event as EventRow

    def factory(title: str, starts_at: datetime, **extra):
        return EventRow.objects.create(title=title, starts_at=starts_at, **extra)

    return factory
