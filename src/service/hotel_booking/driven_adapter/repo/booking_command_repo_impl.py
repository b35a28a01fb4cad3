from typing import AsyncContextManager, Callable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.exception.booking_error import (
    AtCapacityError,
    BookingNotFoundError,
    RoomNotFoundError,
)
from src.service.hotel_booking.driven_adapter.model._timestamp import utc_now
from src.service.hotel_booking.driven_adapter.model.booking_model import BookingModel
from src.service.hotel_booking.driven_adapter.model.room_model import RoomModel
from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
    booking_model_to_entity,
)


class BookingCommandRepoImpl(IBookingCommandRepo):
    """
    Booking writes, one transaction per call.

    With strict_capacity the room row is locked (SELECT ... FOR UPDATE) and its
    bookings recounted inside the write transaction, so concurrent writers for
    the same room serialize on the lock. Without it the write trusts the
    capacity check that ran before it.
    """

    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        *,
        strict_capacity: bool = False,
    ):
        self.session_factory = session_factory
        self.strict_capacity = strict_capacity

    @staticmethod
    async def _lock_room_and_check_vacancy(session: AsyncSession, *, room_id: int) -> None:
        result = await session.execute(
            select(RoomModel).where(RoomModel.id == room_id).with_for_update()
        )
        db_room = result.scalars().first()
        if not db_room:
            raise RoomNotFoundError(f'room {room_id} does not exist')

        booked_count = await session.scalar(
            select(func.count()).select_from(BookingModel).where(BookingModel.room_id == room_id)
        )
        if (booked_count or 0) >= db_room.capacity:
            raise AtCapacityError(
                f'room {room_id} is full ({booked_count}/{db_room.capacity} booked, locked recount)'
            )

    @Logger.io
    async def create(self, *, user_id: int, room_id: int) -> Booking:
        async with self.session_factory() as session:
            async with session.begin():
                if self.strict_capacity:
                    await self._lock_room_and_check_vacancy(session, room_id=room_id)

                now = utc_now()
                db_booking = BookingModel(
                    user_id=user_id, room_id=room_id, created_at=now, updated_at=now
                )
                session.add(db_booking)
                await session.flush()

        return booking_model_to_entity(db_booking)

    @Logger.io
    async def update_room(self, *, booking_id: int, room_id: int) -> Booking:
        async with self.session_factory() as session:
            async with session.begin():
                if self.strict_capacity:
                    await self._lock_room_and_check_vacancy(session, room_id=room_id)

                db_booking = await session.get(BookingModel, booking_id)
                if not db_booking:
                    raise BookingNotFoundError(f'booking {booking_id} vanished before update')

                db_booking.room_id = room_id
                db_booking.updated_at = utc_now()

        return booking_model_to_entity(db_booking)
