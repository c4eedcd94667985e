from registrations.domain.models import (
    Attendee,
    EventListing,
    RegisteredEvent,
    Registration,
    UserProfile,
)
from registrations.domain.results import AlreadyExists, Created, RegistrationOutcome
from registrations.domain.value_objects import RegistrationId, UserId

__all__ = [
    "Registration",
    "RegisteredEvent",
    "Attendee",
    "EventListing",
    "UserProfile",
    "RegistrationId",
    "UserId",
    "Created",
    "AlreadyExists",
    "RegistrationOutcome",
]
