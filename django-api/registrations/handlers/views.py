"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError
from events.handlers.serializers import EventSerializer
from registrations.domain import UserId
from registrations.handlers.errors import error_response
from registrations.handlers.serializers import (
    AttendeeSerializer,
    EventListingSerializer,
    RegisteredEventSerializer,
)
from registrations.wiring import build_participation_service


def current_user_id(request: Request) -> UserId | None:
    if request.user and request.user.is_authenticated:
        return UserId(request.user.pk)
    return None


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        service = build_participation_service()
        try:
            listings = service.event_listing(current_user_id(request))
        except DomainError as error:
            return error_response(error)
        return Response(EventListingSerializer(listings, many=True).data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        service = build_participation_service()
        try:
            listing = service.event_detail(event_id, current_user_id(request))
        except DomainError as error:
            return error_response(error)
        return Response(EventListingSerializer(listing).data)


class EventRegisterView(APIView):
    """Handler for POST /api/events/{event_id}/register"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        service = build_participation_service()
        try:
            registration_id = service.join(event_id, UserId(request.user.pk))
        except DomainError as error:
            return error_response(error)
        return Response(
            {
                "success": True,
                "message": "You have registered for the event",
                "registration_id": registration_id.value,
            },
            status=status.HTTP_201_CREATED,
        )


class EventUnregisterView(APIView):
    """Handler for POST /api/events/{event_id}/unregister"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        service = build_participation_service()
        try:
            service.leave(event_id, UserId(request.user.pk))
        except DomainError as error:
            return error_response(error)
        return Response({"success": True, "message": "Your registration has been cancelled"})


class MyRegistrationsView(APIView):
    """Handler for GET /api/me/registrations"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        service = build_participation_service()
        try:
            registrations = service.my_registrations(UserId(request.user.pk))
        except DomainError as error:
            return error_response(error)
        return Response(RegisteredEventSerializer(registrations, many=True).data)


class EventAttendeesView(APIView):
    """Handler for GET /api/admin/events/{event_id}/registrations"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request, event_id: str) -> Response:
        service = build_participation_service()
        try:
            event, attendees = service.attendees(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(
            {
                "event": EventSerializer(event).data,
                "registration_count": len(attendees),
                "registrations": AttendeeSerializer(attendees, many=True).data,
            }
        )
