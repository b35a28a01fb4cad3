"""
Fixtures for hotel booking unit tests

RepositoryMocks wires AsyncMock repositories with configurable return values
and builds the real checkers on top of them.
"""

from collections.abc import Callable
from unittest.mock import AsyncMock, Mock

import pytest

from src.service.hotel_booking.app.checker.booking_existence_checker import (
    BookingExistenceChecker,
)
from src.service.hotel_booking.app.checker.eligibility_gateway import EligibilityGateway
from src.service.hotel_booking.app.checker.room_capacity_checker import RoomCapacityChecker
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.enrollment_entity import Enrollment
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket, TicketType
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus


NEW_BOOKING_ID = 501


class RepositoryMocks:
    def __init__(
        self,
        *,
        enrollment: Enrollment | None = None,
        ticket: Ticket | None = None,
        room: Room | None = None,
        booking: Booking | None = None,
        booked_count: int = 0,
    ) -> None:
        """
        Args:
            enrollment: Returned by enrollment lookup
            ticket: Returned by ticket lookup
            room: Returned by room lookup
            booking: Returned by booking lookup (the user's current booking)
            booked_count: Returned by booking count for any room
        """
        self.enrollment_query_repo: Mock = AsyncMock()
        self.enrollment_query_repo.get_by_user_id = AsyncMock(return_value=enrollment)

        self.ticket_query_repo: Mock = AsyncMock()
        self.ticket_query_repo.get_by_enrollment_id = AsyncMock(return_value=ticket)

        self.room_query_repo: Mock = AsyncMock()
        self.room_query_repo.get_by_id = AsyncMock(return_value=room)

        self.booking_query_repo: Mock = AsyncMock()
        self.booking_query_repo.get_by_user_id = AsyncMock(return_value=booking)
        self.booking_query_repo.count_by_room_id = AsyncMock(return_value=booked_count)

        self.booking_command_repo: Mock = AsyncMock()
        self.booking_command_repo.create = AsyncMock(
            side_effect=lambda *, user_id, room_id: Booking(
                id=NEW_BOOKING_ID, user_id=user_id, room_id=room_id
            )
        )
        self.booking_command_repo.update_room = AsyncMock(
            side_effect=lambda *, booking_id, room_id: Booking(
                id=booking_id, user_id=booking.user_id if booking else 0, room_id=room_id
            )
        )

    @property
    def eligibility_gateway(self) -> EligibilityGateway:
        return EligibilityGateway(
            enrollment_query_repo=self.enrollment_query_repo,
            ticket_query_repo=self.ticket_query_repo,
        )

    @property
    def booking_existence_checker(self) -> BookingExistenceChecker:
        return BookingExistenceChecker(booking_query_repo=self.booking_query_repo)

    @property
    def room_capacity_checker(self) -> RoomCapacityChecker:
        return RoomCapacityChecker(
            room_query_repo=self.room_query_repo,
            booking_query_repo=self.booking_query_repo,
        )

    def assert_no_write(self) -> None:
        self.booking_command_repo.create.assert_not_awaited()
        self.booking_command_repo.update_room.assert_not_awaited()


def make_ticket(
    *,
    status: TicketStatus = TicketStatus.PAID,
    is_remote: bool = False,
    includes_hotel: bool = True,
    enrollment_id: int = 10,
) -> Ticket:
    return Ticket(
        id=20,
        enrollment_id=enrollment_id,
        ticket_type=TicketType(
            id=30,
            name='In person + hotel',
            price=600,
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        ),
        status=status,
    )


@pytest.fixture
def enrollment() -> Enrollment:
    return Enrollment(id=10, user_id=1, name='Guest', cpf='12345678901', phone='21999999999')


@pytest.fixture
def paid_hotel_ticket() -> Ticket:
    return make_ticket()


@pytest.fixture
def ticket_factory() -> Callable[..., Ticket]:
    return make_ticket


@pytest.fixture
def room() -> Room:
    return Room(id=7, name='101', capacity=2, hotel_id=1)


@pytest.fixture
def eligible_mocks(
    enrollment: Enrollment, paid_hotel_ticket: Ticket, room: Room
) -> Callable[..., RepositoryMocks]:
    """Factory of mocks for an eligible user; keyword overrides replace any default"""

    def _build(**overrides) -> RepositoryMocks:
        params = {'enrollment': enrollment, 'ticket': paid_hotel_ticket, 'room': room}
        params.update(overrides)
        return RepositoryMocks(**params)

    return _build
