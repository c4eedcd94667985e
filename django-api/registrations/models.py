"""Django ORM models (persistence layer).

The (event, user) pair is unique at the database level. Deleting an event or
a user removes its registrations through the foreign key cascade. Django runs
that cascade inside the delete transaction; the foreign key constraints reject
any raw delete that would leave a registration orphaned.
"""

from django.conf import settings
from django.db import models

from events.models import Event

UNIQUE_PAIR_CONSTRAINT = "uq_registration_event_user"


class Registration(models.Model):
    """Persistence model for event registrations."""

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="registrations"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="event_registrations",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "user"], name=UNIQUE_PAIR_CONSTRAINT
            ),
        ]
        indexes = [
            models.Index(fields=["event", "created_at"], name="idx_reg_event_created"),
            models.Index(fields=["user"], name="idx_reg_user"),
        ]

    def __str__(self) -> str:
        return f"{self.user} -> {self.event}"
