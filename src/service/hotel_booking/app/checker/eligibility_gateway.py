from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel_booking.domain.exception.booking_error import (
    NoEnrollmentError,
    NotEligibleError,
)


class EligibilityGateway:
    """
    Decides whether a user may book a hotel room at all.

    Order matters: enrollment first, then the enrollment's ticket.
    Missing, reserved, remote and hotel-less tickets all fail the same way.
    """

    def __init__(
        self,
        *,
        enrollment_query_repo: IEnrollmentQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def check_eligibility(self, *, user_id: int) -> int:
        """Return the user's enrollment id, or raise NoEnrollmentError / NotEligibleError"""
        with self.tracer.start_as_current_span(
            'checker.check_eligibility', attributes={'user.id': user_id}
        ):
            enrollment = await self.enrollment_query_repo.get_by_user_id(user_id=user_id)
            if not enrollment:
                raise NoEnrollmentError(f'user {user_id} has no enrollment')

            ticket = await self.ticket_query_repo.get_by_enrollment_id(
                enrollment_id=enrollment.id
            )
            if not ticket:
                raise NotEligibleError(f'enrollment {enrollment.id} has no ticket')
            if not ticket.grants_hotel_booking():
                raise NotEligibleError(
                    f'ticket {ticket.id} does not grant a hotel room '
                    f'(status={ticket.status}, remote={ticket.ticket_type.is_remote}, '
                    f'includes_hotel={ticket.ticket_type.includes_hotel})'
                )

            return enrollment.id
