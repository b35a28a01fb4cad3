from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.driven_adapter.model.booking_model import BookingModel
from src.service.hotel_booking.driven_adapter.repo.room_query_repo_impl import (
    room_model_to_entity,
)


def booking_model_to_entity(db_booking: BookingModel) -> Booking:
    # Only map the room when it was eagerly loaded
    room = None
    if 'room' in db_booking.__dict__ and db_booking.room is not None:
        room = room_model_to_entity(db_booking.room)

    return Booking(
        id=db_booking.id,
        user_id=db_booking.user_id,
        room_id=db_booking.room_id,
        room=room,
        created_at=db_booking.created_at,
        updated_at=db_booking.updated_at,
    )


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel)
                .options(selectinload(BookingModel.room))
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.id)
                .limit(1)
            )
            db_booking = result.scalars().first()

        if not db_booking:
            return None
        return booking_model_to_entity(db_booking)

    @Logger.io
    async def count_by_room_id(self, *, room_id: int) -> int:
        async with self.session_factory() as session:
            count = await session.scalar(
                select(func.count())
                .select_from(BookingModel)
                .where(BookingModel.room_id == room_id)
            )
        return count or 0
