from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.hotel_booking.app.checker.booking_existence_checker import (
    BookingExistenceChecker,
)
from src.service.hotel_booking.app.checker.eligibility_gateway import EligibilityGateway
from src.service.hotel_booking.app.checker.room_capacity_checker import RoomCapacityChecker
from src.service.hotel_booking.app.interface.i_booking_command_repo import IBookingCommandRepo


class UpdateBookingUseCase:
    """
    Move the user's booking to another room.

    Flow:
    1. Eligibility
    2. The user has a booking (located by user id)
    3. Target room exists and has a free slot
    4. Point that booking at the target room

    The booking id supplied by the caller is not used to find the row:
    the operation always moves the caller's own booking. A differing id is
    logged and otherwise ignored.
    """

    def __init__(
        self,
        *,
        eligibility_gateway: EligibilityGateway,
        booking_existence_checker: BookingExistenceChecker,
        room_capacity_checker: RoomCapacityChecker,
        booking_command_repo: IBookingCommandRepo,
    ) -> None:
        self.eligibility_gateway = eligibility_gateway
        self.booking_existence_checker = booking_existence_checker
        self.room_capacity_checker = room_capacity_checker
        self.booking_command_repo = booking_command_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        eligibility_gateway: EligibilityGateway = Depends(Provide[Container.eligibility_gateway]),
        booking_existence_checker: BookingExistenceChecker = Depends(
            Provide[Container.booking_existence_checker]
        ),
        room_capacity_checker: RoomCapacityChecker = Depends(
            Provide[Container.room_capacity_checker]
        ),
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
    ) -> Self:
        return cls(
            eligibility_gateway=eligibility_gateway,
            booking_existence_checker=booking_existence_checker,
            room_capacity_checker=room_capacity_checker,
            booking_command_repo=booking_command_repo,
        )

    @Logger.io
    async def update_booking(self, *, user_id: int, booking_id: int, room_id: int) -> int:
        with (
            metrics.track_booking_request(operation='update'),
            self.tracer.start_as_current_span(
                'use_case.update_booking',
                attributes={'user.id': user_id, 'booking.id': booking_id, 'room.id': room_id},
            ),
        ):
            await self.eligibility_gateway.check_eligibility(user_id=user_id)
            current = await self.booking_existence_checker.find_current_booking(user_id=user_id)
            await self.room_capacity_checker.check_room_capacity(room_id=room_id)

            if current.id != booking_id:
                Logger.base.warning(
                    f'⚠️ [BOOKING] User {user_id} sent booking id {booking_id}, '
                    f'updating their booking {current.id} instead'
                )

            booking = await self.booking_command_repo.update_room(
                booking_id=current.id, room_id=room_id
            )

            Logger.base.info(
                f'🔁 [BOOKING] Moved booking {booking.id} of user {user_id} '
                f'from room {current.room_id} to room {room_id}'
            )
            return booking.id
