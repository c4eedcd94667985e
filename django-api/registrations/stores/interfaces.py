"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from events.domain import EventId
from registrations.domain import Attendee, RegisteredEvent, RegistrationOutcome, UserId


class RegistrationStore(ABC):
    """Interface for registration persistence operations.

    Implementations must make ``add`` an atomic conditional insert: concurrent
    calls for the same (event, user) pair produce exactly one ``Created``.
    """

    @abstractmethod
    def add(self, event_id: EventId, user_id: UserId) -> RegistrationOutcome:
        """Insert a registration, or return AlreadyExists if the pair is taken."""
        ...

    @abstractmethod
    def remove(self, event_id: EventId, user_id: UserId) -> bool:
        """Delete the registration for the pair. Return whether a row was removed."""
        ...

    @abstractmethod
    def exists(self, event_id: EventId, user_id: UserId) -> bool:
        """Check if the pair holds a live registration."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: UserId) -> list[RegisteredEvent]:
        """Return the user's registrations ordered by event starts_at, then event id."""
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[Attendee]:
        """Return the event's registrations ordered by created_at, then id."""
        ...

    @abstractmethod
    def count_for_event(self, event_id: EventId) -> int:
        """Return the number of live registrations for an event."""
        ...

    @abstractmethod
    def count_for_events(self, event_ids: Iterable[EventId]) -> dict[EventId, int]:
        """Return live registration counts keyed by every requested event."""
        ...

    @abstractmethod
    def event_ids_for_user(self, user_id: UserId) -> set[EventId]:
        """Return the IDs of every event the user is registered for."""
        ...
