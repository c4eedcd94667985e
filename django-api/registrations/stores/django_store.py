"""Django ORM implementation of the RegistrationStore.

Duplicate detection relies on the unique constraint over (event, user): the
insert either succeeds or fails atomically, so no pre-check is needed.
"""

import logging
from collections.abc import Iterable

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count

from events.domain import EventId
from events.stores.django_store import storage_errors
from events.stores.django_store import to_domain as event_to_domain
from registrations import models
from registrations.domain import (
    AlreadyExists,
    Attendee,
    Created,
    RegisteredEvent,
    Registration,
    RegistrationId,
    RegistrationOutcome,
    UserId,
    UserProfile,
)
from registrations.domain.errors import StorageUnavailableError
from registrations.stores.interfaces import RegistrationStore

logger = logging.getLogger("portal.registrations")


def _extract_constraint_name(exc: IntegrityError) -> str | None:
    cause = getattr(exc, "__cause__", None)
    diag = getattr(cause, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None)
    if isinstance(constraint_name, str) and constraint_name:
        return constraint_name
    return None


def _is_pair_uniqueness_conflict(exc: IntegrityError) -> bool:
    if _extract_constraint_name(exc) == models.UNIQUE_PAIR_CONSTRAINT:
        return True
    message = str(exc)
    if models.UNIQUE_PAIR_CONSTRAINT in message:
        return True
    # SQLite names the columns instead of the constraint.
    table = models.Registration._meta.db_table
    return f"UNIQUE constraint failed: {table}.event_id, {table}.user_id" in message


def _to_registration(row: models.Registration) -> Registration:
    return Registration(
        id=RegistrationId(row.pk),
        event_id=EventId(row.event_id),
        user_id=UserId(row.user_id),
        created_at=row.created_at,
    )


def _to_profile(user) -> UserProfile:
    return UserProfile(
        id=UserId(user.pk),
        username=user.get_username(),
        email=getattr(user, "email", "") or "",
        first_name=getattr(user, "first_name", "") or "",
        last_name=getattr(user, "last_name", "") or "",
    )


class DjangoRegistrationStore(RegistrationStore):
    """Relational registration store using Django ORM.

    ``using`` selects the database connection; it is fixed for the lifetime
    of the store.
    """

    def __init__(self, using: str = "default") -> None:
        self._using = using

    def _registrations(self):
        return models.Registration.objects.using(self._using)

    def add(self, event_id: EventId, user_id: UserId) -> RegistrationOutcome:
        try:
            with transaction.atomic(using=self._using):
                row = self._registrations().create(
                    event_id=event_id.value, user_id=user_id.value
                )
        except IntegrityError as exc:
            if _is_pair_uniqueness_conflict(exc):
                return AlreadyExists(event_id=event_id, user_id=user_id)
            logger.exception("Registration insert rejected for event %s", event_id)
            raise StorageUnavailableError() from exc
        except DatabaseError as exc:
            logger.exception("Registration storage failed during add")
            raise StorageUnavailableError() from exc
        return Created(registration_id=RegistrationId(row.pk))

    def remove(self, event_id: EventId, user_id: UserId) -> bool:
        with storage_errors("remove", logger):
            deleted, _ = (
                self._registrations()
                .filter(event_id=event_id.value, user_id=user_id.value)
                .delete()
            )
        return deleted > 0

    def exists(self, event_id: EventId, user_id: UserId) -> bool:
        with storage_errors("exists", logger):
            return (
                self._registrations()
                .filter(event_id=event_id.value, user_id=user_id.value)
                .exists()
            )

    def list_for_user(self, user_id: UserId) -> list[RegisteredEvent]:
        with storage_errors("list_for_user", logger):
            rows = list(
                self._registrations()
                .filter(user_id=user_id.value)
                .select_related("event")
                .order_by("event__starts_at", "event__id")
            )
        return [
            RegisteredEvent(registration=_to_registration(row), event=event_to_domain(row.event))
            for row in rows
        ]

    def list_for_event(self, event_id: EventId) -> list[Attendee]:
        with storage_errors("list_for_event", logger):
            rows = list(
                self._registrations()
                .filter(event_id=event_id.value)
                .select_related("user")
                .order_by("created_at", "id")
            )
        return [
            Attendee(registration=_to_registration(row), user=_to_profile(row.user))
            for row in rows
        ]

    def count_for_event(self, event_id: EventId) -> int:
        with storage_errors("count_for_event", logger):
            return self._registrations().filter(event_id=event_id.value).count()

    def count_for_events(self, event_ids: Iterable[EventId]) -> dict[EventId, int]:
        counts = {event_id: 0 for event_id in event_ids}
        if not counts:
            return counts
        with storage_errors("count_for_events", logger):
            rows = (
                self._registrations()
                .filter(event_id__in=[event_id.value for event_id in counts])
                .values("event_id")
                .annotate(total=Count("id"))
                .order_by()
            )
            for row in rows:
                counts[EventId(row["event_id"])] = row["total"]
        return counts

    def event_ids_for_user(self, user_id: UserId) -> set[EventId]:
        with storage_errors("event_ids_for_user", logger):
            values = self._registrations().filter(user_id=user_id.value).values_list(
                "event_id", flat=True
            )
            return {EventId(value) for value in values}
