"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.hotel_booking.app.command import create_booking_use_case, update_booking_use_case
from src.service.hotel_booking.app.query import get_booking_use_case
from src.service.hotel_booking.driving_adapter.http_controller.auth import current_user


WIRE_MODULES: list[ModuleType] = [
    get_booking_use_case,
    create_booking_use_case,
    update_booking_use_case,
    current_user,
]
