"""Registration ledger - owns registrations and their invariants.

The ledger trusts its caller on referential validity: callers confirm that the
event and user exist before registering. A user holds at most one live
registration per event; the store enforces this atomically.
"""

import logging
from collections.abc import Iterable

from events.domain import EventId
from registrations.domain import (
    AlreadyExists,
    Attendee,
    Created,
    RegisteredEvent,
    RegistrationOutcome,
    UserId,
)
from registrations.stores.interfaces import RegistrationStore

logger = logging.getLogger("portal.registrations")


class RegistrationLedger:
    """Service for registration writes and membership queries."""

    def __init__(self, store: RegistrationStore) -> None:
        self._store = store

    def register(self, event_id: EventId, user_id: UserId) -> RegistrationOutcome:
        """Register a user for an event.

        Returns Created with the new registration ID, or AlreadyExists when the
        user is already registered. Storage faults propagate as
        StorageUnavailableError and are not retried.
        """
        outcome = self._store.add(event_id, user_id)
        match outcome:
            case Created(registration_id=registration_id):
                logger.info(
                    "User %s registered for event %s (registration %s)",
                    user_id,
                    event_id,
                    registration_id.value,
                )
            case AlreadyExists():
                logger.info("User %s already registered for event %s", user_id, event_id)
        return outcome

    def unregister(self, event_id: EventId, user_id: UserId) -> bool:
        """Remove the user's registration. Return False when there was none."""
        removed = self._store.remove(event_id, user_id)
        if removed:
            logger.info("User %s unregistered from event %s", user_id, event_id)
        return removed

    def is_registered(self, event_id: EventId, user_id: UserId) -> bool:
        return self._store.exists(event_id, user_id)

    def registrations_for_user(self, user_id: UserId) -> list[RegisteredEvent]:
        """Return the user's registrations, earliest event first."""
        return self._store.list_for_user(user_id)

    def registrations_for_event(self, event_id: EventId) -> list[Attendee]:
        """Return the event's attendees, first registered first."""
        return self._store.list_for_event(event_id)

    def registration_count(self, event_id: EventId) -> int:
        return self._store.count_for_event(event_id)

    def registration_counts(self, event_ids: Iterable[EventId]) -> dict[EventId, int]:
        return self._store.count_for_events(event_ids)

    def registered_event_ids(self, user_id: UserId) -> set[EventId]:
        return self._store.event_ids_for_user(user_id)
