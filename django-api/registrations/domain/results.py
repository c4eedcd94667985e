"""Outcome of an attempt to register a user for an event.

A duplicate registration is an expected outcome, so it is returned as a
variant instead of being raised.
"""

from dataclasses import dataclass

from events.domain import EventId
from registrations.domain.value_objects import RegistrationId, UserId


@dataclass(frozen=True)
class Created:
    """A new registration was inserted."""

    registration_id: RegistrationId


@dataclass(frozen=True)
class AlreadyExists:
    """The user already holds a live registration for the event."""

    event_id: EventId
    user_id: UserId


RegistrationOutcome = Created | AlreadyExists
