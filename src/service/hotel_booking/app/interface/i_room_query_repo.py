from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.room_entity import Room


class IRoomQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, room_id: int) -> Optional[Room]:
        pass
