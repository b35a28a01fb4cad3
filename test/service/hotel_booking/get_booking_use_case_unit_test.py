"""
Unit tests for GetBookingUseCase

Flow: eligibility -> booking existence -> booking with room
"""

import pytest

from src.service.hotel_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.exception.booking_error import (
    BookingNotFoundError,
    NoEnrollmentError,
    NotEligibleError,
)


def _use_case(mocks) -> GetBookingUseCase:
    return GetBookingUseCase(
        eligibility_gateway=mocks.eligibility_gateway,
        booking_existence_checker=mocks.booking_existence_checker,
    )


@pytest.mark.unit
class TestGetBookingUseCase:
    @pytest.mark.asyncio
    async def test_returns_booking_with_room(self, eligible_mocks, room):
        mocks = eligible_mocks(booking=Booking(id=3, user_id=1, room_id=room.id, room=room))

        booking = await _use_case(mocks).get_current_booking(user_id=1)

        assert booking.id == 3
        assert booking.room == room

    @pytest.mark.asyncio
    async def test_no_enrollment__scenario_user_42(self, eligible_mocks):
        """
        Given: user 42 has no enrollment
        When: getting the current booking
        Then: NoEnrollmentError, the booking is never looked up
        """
        mocks = eligible_mocks(enrollment=None)

        with pytest.raises(NoEnrollmentError):
            await _use_case(mocks).get_current_booking(user_id=42)

        mocks.booking_query_repo.get_by_user_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ineligible_ticket_blocks_read(self, eligible_mocks, ticket_factory):
        mocks = eligible_mocks(ticket=ticket_factory(is_remote=True))

        with pytest.raises(NotEligibleError):
            await _use_case(mocks).get_current_booking(user_id=1)

        mocks.booking_query_repo.get_by_user_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_eligible_user_without_booking_is_not_found(self, eligible_mocks):
        mocks = eligible_mocks(booking=None)

        with pytest.raises(BookingNotFoundError):
            await _use_case(mocks).get_current_booking(user_id=1)
