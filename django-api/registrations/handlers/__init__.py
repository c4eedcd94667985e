from registrations.handlers.views import (
    EventAttendeesView,
    EventDetailView,
    EventListView,
    EventRegisterView,
    EventUnregisterView,
    MyRegistrationsView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventRegisterView",
    "EventUnregisterView",
    "MyRegistrationsView",
    "EventAttendeesView",
]
