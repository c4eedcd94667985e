"""Identifiers for the registration ledger."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistrationId:
    """Opaque identifier assigned to a registration on creation."""

    value: int


@dataclass(frozen=True)
class UserId:
    """Identifier of a user in the user directory."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("UserId must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)
