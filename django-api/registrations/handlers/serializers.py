"""Serializers for event listings and registration rosters."""

from rest_framework import serializers

from events.handlers.serializers import EventSerializer


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.IntegerField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    user_id = serializers.IntegerField(source="user_id.value")
    created_at = serializers.DateTimeField()


class UserProfileSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="id.value")
    username = serializers.CharField()
    email = serializers.CharField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    full_name = serializers.CharField()


class RegisteredEventSerializer(serializers.Serializer):
    """Serializer for a row of a user's registration roster."""

    registration = RegistrationSerializer()
    event = EventSerializer()


class AttendeeSerializer(serializers.Serializer):
    """Serializer for a row of an event's attendee roster."""

    registration = RegistrationSerializer()
    user = UserProfileSerializer()


class EventListingSerializer(serializers.Serializer):
    """Serializer for an event with its registration figures."""

    event = EventSerializer()
    registration_count = serializers.IntegerField()
    is_registered = serializers.BooleanField()

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {**data.pop("event"), **data}
