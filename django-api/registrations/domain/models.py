"""Domain models for event registrations.

A Registration only carries identities. The joined views pair it with the
descriptive data of the other side of the relationship.
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain import Event, EventId
from registrations.domain.value_objects import RegistrationId, UserId


@dataclass(frozen=True)
class Registration:
    """One user's intent to attend one event."""

    id: RegistrationId
    event_id: EventId
    user_id: UserId
    created_at: datetime


@dataclass(frozen=True)
class UserProfile:
    """Descriptive user data shown on attendee rosters."""

    id: UserId
    username: str
    email: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class RegisteredEvent:
    """Row of a user's registration roster."""

    registration: Registration
    event: Event


@dataclass(frozen=True)
class Attendee:
    """Row of an event's attendee roster."""

    registration: Registration
    user: UserProfile


@dataclass(frozen=True)
class EventListing:
    """An event as shown on listing pages."""

    event: Event
    registration_count: int
    is_registered: bool = False
