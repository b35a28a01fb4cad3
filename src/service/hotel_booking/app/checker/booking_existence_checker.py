from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.exception.booking_error import BookingNotFoundError


class BookingExistenceChecker:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @Logger.io
    async def find_current_booking(self, *, user_id: int) -> Booking:
        booking = await self.booking_query_repo.get_by_user_id(user_id=user_id)
        if not booking:
            raise BookingNotFoundError(f'user {user_id} has no booking')

        # A row for someone else means the lookup is broken; treat it as absent
        if not booking.belongs_to(user_id=user_id):
            raise BookingNotFoundError(
                f'booking {booking.id} belongs to user {booking.user_id}, not {user_id}'
            )

        return booking
