"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from events.domain import EventId
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.domain.models import Event
from events.stores.interfaces import EventStore


def parse_event_id(event_id: str) -> EventId:
    """Parse a raw path parameter into an EventId.

    Raises:
        InvalidEventIdError: If the value is not a valid UUID.
    """
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events, earliest first."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def ensure_exists(self, event_id: str) -> EventId:
        """Return the parsed ID of an existing event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if not self._store.event_exists(parsed):
            raise EventNotFoundError(event_id)
        return parsed
