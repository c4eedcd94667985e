"""Domain errors for the registrations module."""

from enum import Enum

from events.domain.errors import DomainError, StorageUnavailableError

__all__ = [
    "RegistrationErrorCode",
    "AlreadyRegisteredError",
    "NotRegisteredError",
    "StorageUnavailableError",
]


class RegistrationErrorCode(Enum):
    """Registration error codes."""

    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    NOT_REGISTERED = "NOT_REGISTERED"


class AlreadyRegisteredError(DomainError):
    """Raised when a user joins an event they are already registered for."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=RegistrationErrorCode.ALREADY_REGISTERED,
            message="You are already registered for this event",
        )
        self.event_id = event_id


class NotRegisteredError(DomainError):
    """Raised when a user leaves an event they were not registered for."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=RegistrationErrorCode.NOT_REGISTERED,
            message="You were not registered for this event",
        )
        self.event_id = event_id
