"""Constructs services over the Django ORM stores."""

from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore
from registrations.services.participation_service import ParticipationService
from registrations.services.registration_ledger import RegistrationLedger
from registrations.stores.django_store import DjangoRegistrationStore


def build_ledger(using: str = "default") -> RegistrationLedger:
    return RegistrationLedger(DjangoRegistrationStore(using=using))


def build_participation_service(using: str = "default") -> ParticipationService:
    return ParticipationService(
        events=EventService(DjangoEventStore(using=using)),
        ledger=build_ledger(using),
    )
