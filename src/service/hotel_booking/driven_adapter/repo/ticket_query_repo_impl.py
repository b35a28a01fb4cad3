from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket, TicketType
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.driven_adapter.model.ticket_model import TicketModel


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_ticket: TicketModel) -> Ticket:
        db_ticket_type = db_ticket.ticket_type
        return Ticket(
            id=db_ticket.id,
            enrollment_id=db_ticket.enrollment_id,
            ticket_type=TicketType(
                id=db_ticket_type.id,
                name=db_ticket_type.name,
                price=db_ticket_type.price,
                is_remote=db_ticket_type.is_remote,
                includes_hotel=db_ticket_type.includes_hotel,
            ),
            status=TicketStatus(db_ticket.status),
            created_at=db_ticket.created_at,
            updated_at=db_ticket.updated_at,
        )

    @Logger.io
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel)
                .options(selectinload(TicketModel.ticket_type))
                .where(TicketModel.enrollment_id == enrollment_id)
                .order_by(TicketModel.id)
                .limit(1)
            )
            db_ticket = result.scalars().first()

        if not db_ticket:
            return None
        return self._to_entity(db_ticket)
