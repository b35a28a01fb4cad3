"""
End-to-end booking workflow over real repositories (in-memory SQLite)

The use cases, checkers and repositories are wired the same way the DI
container wires them, only the database differs.
"""

import pytest

from src.service.hotel_booking.app.checker.booking_existence_checker import (
    BookingExistenceChecker,
)
from src.service.hotel_booking.app.checker.eligibility_gateway import EligibilityGateway
from src.service.hotel_booking.app.checker.room_capacity_checker import RoomCapacityChecker
from src.service.hotel_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.hotel_booking.app.command.update_booking_use_case import UpdateBookingUseCase
from src.service.hotel_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.domain.exception.booking_error import (
    AtCapacityError,
    NoEnrollmentError,
    NotEligibleError,
    RoomNotFoundError,
)
from src.service.hotel_booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.enrollment_query_repo_impl import (
    EnrollmentQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl
from src.service.hotel_booking.driven_adapter.repo.ticket_query_repo_impl import (
    TicketQueryRepoImpl,
)


class BookingWorkflow:
    def __init__(self, database, *, strict_capacity: bool = False) -> None:
        booking_query_repo = BookingQueryRepoImpl(session_factory=database.session)
        self.booking_query_repo = booking_query_repo
        booking_command_repo = BookingCommandRepoImpl(
            session_factory=database.session, strict_capacity=strict_capacity
        )
        eligibility_gateway = EligibilityGateway(
            enrollment_query_repo=EnrollmentQueryRepoImpl(session_factory=database.session),
            ticket_query_repo=TicketQueryRepoImpl(session_factory=database.session),
        )
        existence_checker = BookingExistenceChecker(booking_query_repo=booking_query_repo)
        capacity_checker = RoomCapacityChecker(
            room_query_repo=RoomQueryRepoImpl(session_factory=database.session),
            booking_query_repo=booking_query_repo,
        )

        self.get = GetBookingUseCase(
            eligibility_gateway=eligibility_gateway,
            booking_existence_checker=existence_checker,
        )
        self.create = CreateBookingUseCase(
            eligibility_gateway=eligibility_gateway,
            room_capacity_checker=capacity_checker,
            booking_command_repo=booking_command_repo,
        )
        self.update = UpdateBookingUseCase(
            eligibility_gateway=eligibility_gateway,
            booking_existence_checker=existence_checker,
            room_capacity_checker=capacity_checker,
            booking_command_repo=booking_command_repo,
        )


@pytest.fixture
def workflow(database) -> BookingWorkflow:
    return BookingWorkflow(database)


@pytest.mark.integration
class TestBookingWorkflow:
    @pytest.mark.asyncio
    async def test_create_then_get_returns_booked_room(self, workflow, seeder):
        """
        Given: eligible user, room with capacity 1 and no bookings
        When: the user books the room and then reads their booking
        Then: the booking references that room
        """
        user_id = await seeder.eligible_user()
        room_id = await seeder.room(capacity=1)

        booking_id = await workflow.create.create_booking(user_id=user_id, room_id=room_id)
        booking = await workflow.get.get_current_booking(user_id=user_id)

        assert booking.id == booking_id
        assert booking.room is not None
        assert booking.room.id == room_id

    @pytest.mark.asyncio
    async def test_full_room_rejects_second_guest(self, workflow, seeder):
        room_id = await seeder.room(capacity=1)
        await workflow.create.create_booking(user_id=await seeder.eligible_user(), room_id=room_id)

        with pytest.raises(AtCapacityError):
            await workflow.create.create_booking(
                user_id=await seeder.eligible_user(), room_id=room_id
            )

        assert await workflow.booking_query_repo.count_by_room_id(room_id=room_id) == 1

    @pytest.mark.asyncio
    async def test_update_moves_booking_without_duplicating_it(self, workflow, seeder, database):
        """
        Given: user booked room A, room B has a free slot
        When: the user moves the booking to B
        Then: GetCurrentBooking reports B and A is empty again
        """
        user_id = await seeder.eligible_user()
        room_a = await seeder.room(capacity=1, name='A')
        room_b = await seeder.room(capacity=2, name='B')
        booking_id = await workflow.create.create_booking(user_id=user_id, room_id=room_a)

        updated_id = await workflow.update.update_booking(
            user_id=user_id, booking_id=booking_id, room_id=room_b
        )

        booking = await workflow.get.get_current_booking(user_id=user_id)
        assert updated_id == booking_id
        assert booking.room is not None
        assert booking.room.id == room_b
        assert await workflow.booking_query_repo.count_by_room_id(room_id=room_a) == 0
        assert await workflow.booking_query_repo.count_by_room_id(room_id=room_b) == 1

    @pytest.mark.asyncio
    async def test_user_without_enrollment_is_rejected_everywhere(self, workflow, seeder):
        user_id = await seeder.user()
        room_id = await seeder.room(capacity=1)

        with pytest.raises(NoEnrollmentError):
            await workflow.get.get_current_booking(user_id=user_id)
        with pytest.raises(NoEnrollmentError):
            await workflow.create.create_booking(user_id=user_id, room_id=room_id)
        with pytest.raises(NoEnrollmentError):
            await workflow.update.update_booking(user_id=user_id, booking_id=1, room_id=room_id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'ticket',
        [
            pytest.param(dict(status=TicketStatus.RESERVED, is_remote=False, includes_hotel=True), id='reserved'),
            pytest.param(dict(status=TicketStatus.PAID, is_remote=True, includes_hotel=True), id='remote'),
            pytest.param(dict(status=TicketStatus.PAID, is_remote=False, includes_hotel=False), id='without_hotel'),
        ],
    )
    async def test_ineligible_ticket_cannot_book(self, workflow, seeder, ticket):
        user_id = await seeder.user_with_ticket(**ticket)
        room_id = await seeder.room(capacity=1)

        with pytest.raises(NotEligibleError):
            await workflow.create.create_booking(user_id=user_id, room_id=room_id)

        assert await workflow.booking_query_repo.count_by_room_id(room_id=room_id) == 0

    @pytest.mark.asyncio
    async def test_enrollment_without_ticket_cannot_book(self, workflow, seeder):
        user_id, _ = await seeder.user_with_enrollment()
        room_id = await seeder.room(capacity=1)

        with pytest.raises(NotEligibleError):
            await workflow.create.create_booking(user_id=user_id, room_id=room_id)

    @pytest.mark.asyncio
    async def test_unknown_room(self, workflow, seeder):
        with pytest.raises(RoomNotFoundError):
            await workflow.create.create_booking(user_id=await seeder.eligible_user(), room_id=404)
