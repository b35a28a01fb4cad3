from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.hotel_booking.app.checker.booking_existence_checker import (
    BookingExistenceChecker,
)
from src.service.hotel_booking.app.checker.eligibility_gateway import EligibilityGateway
from src.service.hotel_booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(
        self,
        *,
        eligibility_gateway: EligibilityGateway,
        booking_existence_checker: BookingExistenceChecker,
    ) -> None:
        self.eligibility_gateway = eligibility_gateway
        self.booking_existence_checker = booking_existence_checker
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        eligibility_gateway: EligibilityGateway = Depends(Provide[Container.eligibility_gateway]),
        booking_existence_checker: BookingExistenceChecker = Depends(
            Provide[Container.booking_existence_checker]
        ),
    ) -> Self:
        return cls(
            eligibility_gateway=eligibility_gateway,
            booking_existence_checker=booking_existence_checker,
        )

    @Logger.io
    async def get_current_booking(self, *, user_id: int) -> Booking:
        """The user's booking with its room, for eligible users only"""
        with (
            metrics.track_booking_request(operation='get'),
            self.tracer.start_as_current_span(
                'use_case.get_current_booking', attributes={'user.id': user_id}
            ),
        ):
            await self.eligibility_gateway.check_eligibility(user_id=user_id)
            return await self.booking_existence_checker.find_current_booking(user_id=user_id)
