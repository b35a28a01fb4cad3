from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        """Ticket of the enrollment with its ticket type attached"""
        pass
