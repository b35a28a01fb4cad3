from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.domain.exception.booking_error import (
    AtCapacityError,
    RoomNotFoundError,
)


class RoomCapacityChecker:
    def __init__(
        self,
        *,
        room_query_repo: IRoomQueryRepo,
        booking_query_repo: IBookingQueryRepo,
    ) -> None:
        self.room_query_repo = room_query_repo
        self.booking_query_repo = booking_query_repo

    @Logger.io
    async def check_room_capacity(self, *, room_id: int) -> Room:
        """
        Return the room when it still has a free slot.

        The count includes every booking on the room, the caller's own included,
        so moving a booking into the room it already occupies needs a free slot too.
        """
        room = await self.room_query_repo.get_by_id(room_id=room_id)
        if not room:
            raise RoomNotFoundError(f'room {room_id} does not exist')

        booked_count = await self.booking_query_repo.count_by_room_id(room_id=room_id)
        if not room.has_vacancy(booked_count=booked_count):
            raise AtCapacityError(
                f'room {room_id} is full ({booked_count}/{room.capacity} booked)'
            )

        return room
