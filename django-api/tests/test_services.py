"""Unit tests for EventService and ParticipationService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import uuid

import pytest

from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.services.event_service import EventService
from registrations.domain import RegistrationId
from registrations.domain.errors import AlreadyRegisteredError, NotRegisteredError


class TestEventService:
    """Tests for EventService."""

    def test_list_events_earliest_first(self, event_store, may_event, june_event):
        assert EventService(event_store).list_events() == [may_event, june_event]

    def test_get_event_returns_event(self, event_store, june_event):
        assert EventService(event_store).get_event(str(june_event.id)) == june_event

    def test_get_event_invalid_id_raises_error(self, event_store):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            EventService(event_store).get_event("42")

    def test_get_event_not_found_raises_error(self, event_store):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            EventService(event_store).get_event(str(uuid.uuid4()))

    def test_ensure_exists_returns_parsed_id(self, event_store, june_event):
        assert EventService(event_store).ensure_exists(str(june_event.id)) == june_event.id

    def test_ensure_exists_unknown_event_raises_error(self, event_store):
        with pytest.raises(EventNotFoundError):
            EventService(event_store).ensure_exists(str(uuid.uuid4()))


class TestParticipationService:
    """Tests for ParticipationService."""

    def test_join_returns_registration_id(self, participation, ledger, june_event, alice):
        registration_id = participation.join(str(june_event.id), alice.id)

        assert isinstance(registration_id, RegistrationId)
        assert ledger.is_registered(june_event.id, alice.id)

    def test_join_twice_raises_already_registered(self, participation, ledger, june_event, alice):
        participation.join(str(june_event.id), alice.id)

        with pytest.raises(AlreadyRegisteredError):
            participation.join(str(june_event.id), alice.id)
        assert ledger.registration_count(june_event.id) == 1

    def test_join_unknown_event_never_reaches_ledger(self, participation, registration_store, alice):
        missing = uuid.uuid4()

        with pytest.raises(EventNotFoundError):
            participation.join(str(missing), alice.id)
        assert registration_store.event_ids_for_user(alice.id) == set()

    def test_join_invalid_event_id(self, participation, alice):
        with pytest.raises(InvalidEventIdError):
            participation.join("not-a-uuid", alice.id)

    def test_leave_removes_registration(self, participation, ledger, june_event, alice):
        participation.join(str(june_event.id), alice.id)

        participation.leave(str(june_event.id), alice.id)

        assert not ledger.is_registered(june_event.id, alice.id)

    def test_leave_when_not_registered_raises(self, participation, june_event, alice):
        with pytest.raises(NotRegisteredError):
            participation.leave(str(june_event.id), alice.id)

    def test_leave_unknown_event_raises_not_found(self, participation, alice):
        with pytest.raises(EventNotFoundError):
            participation.leave(str(uuid.uuid4()), alice.id)

    def test_event_listing_counts_and_flags(self, participation, may_event, june_event, alice, bob):
        participation.join(str(june_event.id), alice.id)
        participation.join(str(june_event.id), bob.id)

        listings = participation.event_listing(alice.id)

        assert [listing.event for listing in listings] == [may_event, june_event]
        assert [listing.registration_count for listing in listings] == [0, 2]
        assert [listing.is_registered for listing in listings] == [False, True]

    def test_event_listing_anonymous_has_no_flags(self, participation, june_event, alice):
        participation.join(str(june_event.id), alice.id)

        listings = participation.event_listing()

        assert not any(listing.is_registered for listing in listings)

    def test_event_detail(self, participation, june_event, alice, bob):
        participation.join(str(june_event.id), bob.id)

        listing = participation.event_detail(str(june_event.id), alice.id)

        assert listing.registration_count == 1
        assert listing.is_registered is False

    def test_event_detail_for_registered_user(self, participation, june_event, alice, bob):
        participation.join(str(june_event.id), alice.id)
        participation.join(str(june_event.id), bob.id)

        listing = participation.event_detail(str(june_event.id), alice.id)

        assert listing.event == june_event
        assert listing.registration_count == 2
        assert listing.is_registered is True

    def test_attendees_unknown_event_raises(self, participation):
        with pytest.raises(EventNotFoundError):
            participation.attendees(str(uuid.uuid4()))

    def test_attendees_returns_roster(self, participation, june_event, alice, bob):
        participation.join(str(june_event.id), bob.id)
        participation.join(str(june_event.id), alice.id)

        event, attendees = participation.attendees(str(june_event.id))

        assert event == june_event
        assert [attendee.user for attendee in attendees] == [bob, alice]
