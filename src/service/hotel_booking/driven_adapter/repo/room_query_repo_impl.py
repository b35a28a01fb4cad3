from typing import AsyncContextManager, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.driven_adapter.model.room_model import RoomModel


def room_model_to_entity(db_room: RoomModel) -> Room:
    return Room(
        id=db_room.id,
        name=db_room.name,
        capacity=db_room.capacity,
        hotel_id=db_room.hotel_id,
        created_at=db_room.created_at,
        updated_at=db_room.updated_at,
    )


class RoomQueryRepoImpl(IRoomQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, room_id: int) -> Optional[Room]:
        async with self.session_factory() as session:
            db_room = await session.get(RoomModel, room_id)

        if not db_room:
            return None
        return room_model_to_entity(db_room)
