"""Hotel Booking Domain Enums"""

from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus

__all__ = ['TicketStatus']
