"""Integration tests for DjangoEventStore.

Run with: pytest tests/test_event_store.py -v
"""

import uuid
from datetime import datetime, timezone

import pytest
from django.db import OperationalError
from django.db.models import QuerySet

from events.domain import EventId
from events.domain.errors import StorageUnavailableError
from events.stores.django_store import DjangoEventStore

JUNE = datetime(2025, 6, 1, 18, 0, tzinfo=timezone.utc)
MAY = datetime(2025, 5, 1, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> DjangoEventStore:
    return DjangoEventStore()


def fail(*args, **kwargs):
    raise OperationalError("database is locked")


@pytest.mark.django_db
class TestDjangoEventStore:
    """Tests for DjangoEventStore."""

    def test_list_events_earliest_first(self, store, make_event):
        make_event("Volunteer day", JUNE)
        make_event("Eco quarter cleanup", MAY)

        assert [event.title for event in store.list_events()] == [
            "Eco quarter cleanup",
            "Volunteer day",
        ]

    def test_get_event_maps_row(self, store, make_event):
        row = make_event("Volunteer day", JUNE, location="Park")

        event = store.get_event(EventId(row.id))

        assert event.id == EventId(row.id)
        assert event.location == "Park"
        assert event.starts_at == JUNE

    def test_get_missing_event_returns_none(self, store):
        assert store.get_event(EventId(uuid.uuid4())) is None

    def test_event_exists(self, store, make_event):
        row = make_event("Volunteer day", JUNE)

        assert store.event_exists(EventId(row.id)) is True
        assert store.event_exists(EventId(uuid.uuid4())) is False

    def test_exists_failure_is_storage_fault(self, store, monkeypatch):
        monkeypatch.setattr(QuerySet, "exists", fail)

        with pytest.raises(StorageUnavailableError) as excinfo:
            store.event_exists(EventId(uuid.uuid4()))
        assert isinstance(excinfo.value.__cause__, OperationalError)

    def test_list_failure_is_storage_fault(self, store, monkeypatch):
        monkeypatch.setattr(QuerySet, "order_by", fail)

        with pytest.raises(StorageUnavailableError):
            store.list_events()
