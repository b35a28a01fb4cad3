from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.hotel_booking.app.command.update_booking_use_case import UpdateBookingUseCase
from src.service.hotel_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.hotel_booking.driving_adapter.http_controller.auth.current_user import (
    get_current_user_id,
)
from src.service.hotel_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingDetailResponse,
    BookingIdResponse,
    BookingRoomRequest,
    RoomResponse,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_my_booking(
    user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingDetailResponse:
    booking = await use_case.get_current_booking(user_id=user_id)
    assert booking.room is not None, 'Booking lookup must attach the room'

    return BookingDetailResponse(
        id=booking.id,
        room=RoomResponse(
            id=booking.room.id,
            name=booking.room.name,
            capacity=booking.room.capacity,
            hotel_id=booking.room.hotel_id,
        ),
    )


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: BookingRoomRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingIdResponse:
    booking_id = await use_case.create_booking(user_id=user_id, room_id=request.room_id)
    return BookingIdResponse(booking_id=booking_id)


@router.put('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_booking(
    booking_id: int,
    request: BookingRoomRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: UpdateBookingUseCase = Depends(UpdateBookingUseCase.depends),
) -> BookingIdResponse:
    # booking_id is informational; the use case moves the caller's own booking
    new_booking_id = await use_case.update_booking(
        user_id=user_id, booking_id=booking_id, room_id=request.room_id
    )
    return BookingIdResponse(booking_id=new_booking_id)
