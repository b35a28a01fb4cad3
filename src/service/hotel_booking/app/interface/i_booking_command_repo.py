from abc import ABC, abstractmethod

from src.service.hotel_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    """Repository interface for booking write operations"""

    @abstractmethod
    async def create(self, *, user_id: int, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def update_room(self, *, booking_id: int, room_id: int) -> Booking:
        pass
