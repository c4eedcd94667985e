from django.urls import path

from registrations.handlers import (
    EventAttendeesView,
    EventDetailView,
    EventListView,
    EventRegisterView,
    EventUnregisterView,
    MyRegistrationsView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/register",
        EventRegisterView.as_view(),
        name="event-register",
    ),
    path(
        "events/<str:event_id>/unregister",
        EventUnregisterView.as_view(),
        name="event-unregister",
    ),
    path("me/registrations", MyRegistrationsView.as_view(), name="my-registrations"),
    path(
        "admin/events/<str:event_id>/registrations",
        EventAttendeesView.as_view(),
        name="event-attendees",
    ),
]
