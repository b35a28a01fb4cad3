"""
Hotel booking business errors

Every failure carries a BookingErrorKind. The three forbidden kinds share one
outward message so a response never reveals which check rejected the user;
the specific reason stays on the exception for logs and metrics.
"""

from enum import StrEnum

from src.platform.exception.exceptions import ForbiddenError, NotFoundError


class BookingErrorKind(StrEnum):
    NO_ENROLLMENT = 'no_enrollment'
    NOT_ELIGIBLE = 'not_eligible'
    NOT_FOUND = 'not_found'
    AT_CAPACITY = 'at_capacity'


BOOKING_FORBIDDEN_MESSAGE = 'Booking not allowed'


class BookingForbiddenError(ForbiddenError):
    kind: BookingErrorKind

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(BOOKING_FORBIDDEN_MESSAGE)

    def __str__(self) -> str:
        return f'{self.message} ({self.kind}: {self.reason})'


class NoEnrollmentError(BookingForbiddenError):
    kind = BookingErrorKind.NO_ENROLLMENT


class NotEligibleError(BookingForbiddenError):
    kind = BookingErrorKind.NOT_ELIGIBLE


class AtCapacityError(BookingForbiddenError):
    kind = BookingErrorKind.AT_CAPACITY


class BookingNotFoundError(NotFoundError):
    kind = BookingErrorKind.NOT_FOUND

    def __init__(self, reason: str = 'Booking not found') -> None:
        self.reason = reason
        super().__init__('Booking not found')


class RoomNotFoundError(NotFoundError):
    kind = BookingErrorKind.NOT_FOUND

    def __init__(self, reason: str = 'Room not found') -> None:
        self.reason = reason
        super().__init__('Room not found')
