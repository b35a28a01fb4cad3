from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.hotel_booking.app.checker.eligibility_gateway import EligibilityGateway
from src.service.hotel_booking.app.checker.room_capacity_checker import RoomCapacityChecker
from src.service.hotel_booking.app.interface.i_booking_command_repo import IBookingCommandRepo


class CreateBookingUseCase:
    """
    Book a hotel room for a user.

    Flow:
    1. Eligibility (enrollment, then a paid in-person ticket that includes the hotel)
    2. Room exists and has a free slot
    3. Insert the booking

    Any failing step stops the flow before the insert.
    """

    def __init__(
        self,
        *,
        eligibility_gateway: EligibilityGateway,
        room_capacity_checker: RoomCapacityChecker,
        booking_command_repo: IBookingCommandRepo,
    ) -> None:
        self.eligibility_gateway = eligibility_gateway
        self.room_capacity_checker = room_capacity_checker
        self.booking_command_repo = booking_command_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        eligibility_gateway: EligibilityGateway = Depends(Provide[Container.eligibility_gateway]),
        room_capacity_checker: RoomCapacityChecker = Depends(
            Provide[Container.room_capacity_checker]
        ),
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
    ) -> Self:
        return cls(
            eligibility_gateway=eligibility_gateway,
            room_capacity_checker=room_capacity_checker,
            booking_command_repo=booking_command_repo,
        )

    @Logger.io
    async def create_booking(self, *, user_id: int, room_id: int) -> int:
        """
        Args:
            user_id: Authenticated user
            room_id: Room to book

        Returns:
            Id of the new booking

        Raises:
            NoEnrollmentError / NotEligibleError: user may not book
            RoomNotFoundError: room does not exist
            AtCapacityError: room is full
        """
        with (
            metrics.track_booking_request(operation='create'),
            self.tracer.start_as_current_span(
                'use_case.create_booking',
                attributes={'user.id': user_id, 'room.id': room_id},
            ) as span,
        ):
            await self.eligibility_gateway.check_eligibility(user_id=user_id)
            await self.room_capacity_checker.check_room_capacity(room_id=room_id)

            booking = await self.booking_command_repo.create(user_id=user_id, room_id=room_id)
            span.set_attribute('booking.id', booking.id)

            Logger.base.info(
                f'🏨 [BOOKING] Created booking {booking.id} for user {user_id} in room {room_id}'
            )
            return booking.id
