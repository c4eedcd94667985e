from events.domain.models import Event
from events.domain.value_objects import EventId

__all__ = [
    "Event",
    "EventId",
]
