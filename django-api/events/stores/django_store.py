"""Django ORM implementation of the EventStore."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError

from events import models
from events.domain import Event, EventId
from events.domain.errors import StorageUnavailableError
from events.stores.interfaces import EventStore

logger = logging.getLogger("portal.events")


@contextmanager
def storage_errors(operation: str, log: logging.Logger = logger) -> Iterator[None]:
    """Log a database failure and re-raise it as StorageUnavailableError."""
    try:
        yield
    except DatabaseError as exc:
        log.exception("Storage failed during %s", operation)
        raise StorageUnavailableError() from exc


def to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        location=row.location,
        starts_at=row.starts_at,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def __init__(self, using: str = "default") -> None:
        self._using = using

    def _events(self):
        return models.Event.objects.using(self._using)

    def list_events(self) -> list[Event]:
        with storage_errors("list_events"):
            rows = list(self._events().order_by("starts_at", "id"))
        return [to_domain(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        with storage_errors("get_event"):
            row = self._events().filter(pk=event_id.value).first()
        return to_domain(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        with storage_errors("event_exists"):
            return self._events().filter(pk=event_id.value).exists()
