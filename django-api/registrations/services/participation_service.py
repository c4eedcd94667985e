"""Participation service - request-facing orchestration over the ledger.

Event existence is checked here, through the event catalog, before the ledger
is called. Ledger outcomes are mapped to domain errors for the handlers.
"""

from events.domain import Event
from events.services.event_service import EventService
from registrations.domain import (
    AlreadyExists,
    Attendee,
    Created,
    EventListing,
    RegisteredEvent,
    RegistrationId,
    UserId,
)
from registrations.domain.errors import AlreadyRegisteredError, NotRegisteredError
from registrations.services.registration_ledger import RegistrationLedger


class ParticipationService:
    """Service for joining, leaving and browsing events."""

    def __init__(self, events: EventService, ledger: RegistrationLedger) -> None:
        self._events = events
        self._ledger = ledger

    def join(self, event_id: str, user_id: UserId) -> RegistrationId:
        """Register a user for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            AlreadyRegisteredError: If the user is already registered.
        """
        parsed = self._events.ensure_exists(event_id)
        match self._ledger.register(parsed, user_id):
            case Created(registration_id=registration_id):
                return registration_id
            case AlreadyExists():
                raise AlreadyRegisteredError(event_id)

    def leave(self, event_id: str, user_id: UserId) -> None:
        """Cancel a user's registration for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotRegisteredError: If the user was not registered.
        """
        parsed = self._events.ensure_exists(event_id)
        if not self._ledger.unregister(parsed, user_id):
            raise NotRegisteredError(event_id)

    def event_listing(self, user_id: UserId | None = None) -> list[EventListing]:
        """Return every event with its registration count and the user's flag."""
        events = self._events.list_events()
        counts = self._ledger.registration_counts(event.id for event in events)
        registered = (
            self._ledger.registered_event_ids(user_id) if user_id is not None else set()
        )
        return [
            EventListing(
                event=event,
                registration_count=counts.get(event.id, 0),
                is_registered=event.id in registered,
            )
            for event in events
        ]

    def event_detail(self, event_id: str, user_id: UserId | None = None) -> EventListing:
        event = self._events.get_event(event_id)
        return EventListing(
            event=event,
            registration_count=self._ledger.registration_count(event.id),
            is_registered=(
                user_id is not None and self._ledger.is_registered(event.id, user_id)
            ),
        )

    def my_registrations(self, user_id: UserId) -> list[RegisteredEvent]:
        return self._ledger.registrations_for_user(user_id)

    def attendees(self, event_id: str) -> tuple[Event, list[Attendee]]:
        """Return an event and its attendee roster.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._events.get_event(event_id)
        return event, self._ledger.registrations_for_event(event.id)
