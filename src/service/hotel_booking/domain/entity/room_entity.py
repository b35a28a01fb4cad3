from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Hotel:
    id: int
    name: str
    image: str


@attrs.define
class Room:
    id: int
    name: str
    capacity: int = attrs.field(validator=attrs.validators.ge(0))
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_vacancy(self, *, booked_count: int) -> bool:
        return booked_count < self.capacity
