from pydantic import BaseModel, ConfigDict, Field


class BookingRoomRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={'example': {'roomId': 1}},
    )

    room_id: int = Field(alias='roomId')


class RoomResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    capacity: int
    hotel_id: int = Field(serialization_alias='hotelId')


class BookingDetailResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'room': {'id': 3, 'name': '101', 'capacity': 2, 'hotelId': 1},
            }
        }
    )

    id: int
    room: RoomResponse


class BookingIdResponse(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'bookingId': 1}})

    booking_id: int = Field(serialization_alias='bookingId')
