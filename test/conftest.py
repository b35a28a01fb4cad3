"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- An in-memory SQLite database (aiosqlite) with all tables created, per test
- A seeder for writing users, enrollments, tickets, rooms and bookings directly

Architecture:
- Unit tests (*_unit_test.py): mock repositories, no database
- Integration tests (*_integration_test.py): real repositories over SQLite
- API tests (*_api_test.py): TestClient with DI container overrides
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time by src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['DATABASE_URL'] = 'sqlite+aiosqlite://'
    os.environ['CREATE_TABLES_ON_STARTUP'] = 'false'
    os.environ['BOOKING_STRICT_CAPACITY'] = 'false'
    os.environ['SECRET_KEY'] = 'hotel_booking_test_secret_key_0123456789'


_early_setup_test_environment()

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402

from src.platform.database.orm_db_setting import AsyncEngineManager, Base, Database  # noqa: E402
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus  # noqa: E402
from src.service.hotel_booking.driven_adapter.model import (  # noqa: E402
    BookingModel,
    EnrollmentModel,
    HotelModel,
    RoomModel,
    TicketModel,
    TicketTypeModel,
    UserModel,
)


# =============================================================================
# Database
# =============================================================================
@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory SQLite database with all tables (one connection, shared by sessions)"""
    engine_manager = AsyncEngineManager(url='sqlite+aiosqlite://')
    async with engine_manager.get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield Database(engine_manager=engine_manager)

    await engine_manager.dispose()


class SqliteSeeder:
    """Writes rows straight through the ORM, bypassing the booking workflow"""

    def __init__(self, database: Database) -> None:
        self.database = database
        self._hotel_id: int | None = None

    async def _add(self, model):
        async with self.database.session() as session:
            session.add(model)
            await session.commit()
        return model

    async def user(self, *, email: str | None = None) -> int:
        user = UserModel(email=email or f'user_{os.urandom(4).hex()}@t.com')
        return (await self._add(user)).id

    async def eligible_user(self) -> int:
        """User with an enrollment and a paid, in-person ticket that includes the hotel"""
        return await self.user_with_ticket(
            status=TicketStatus.PAID, is_remote=False, includes_hotel=True
        )

    async def user_with_enrollment(self) -> tuple[int, int]:
        user_id = await self.user()
        enrollment = await self._add(
            EnrollmentModel(user_id=user_id, name='Guest', cpf='12345678901', phone='21999999999')
        )
        return user_id, enrollment.id

    async def user_with_ticket(
        self, *, status: TicketStatus, is_remote: bool, includes_hotel: bool
    ) -> int:
        user_id, enrollment_id = await self.user_with_enrollment()
        ticket_type = await self._add(
            TicketTypeModel(
                name='Ticket', price=500, is_remote=is_remote, includes_hotel=includes_hotel
            )
        )
        await self._add(
            TicketModel(ticket_type_id=ticket_type.id, enrollment_id=enrollment_id, status=status)
        )
        return user_id

    async def room(self, *, capacity: int, name: str = '101') -> int:
        if self._hotel_id is None:
            hotel = await self._add(HotelModel(name='Seaside Hotel', image='https://img/1.jpg'))
            self._hotel_id = hotel.id
        room = await self._add(RoomModel(name=name, capacity=capacity, hotel_id=self._hotel_id))
        return room.id

    async def booking(self, *, user_id: int, room_id: int) -> int:
        return (await self._add(BookingModel(user_id=user_id, room_id=room_id))).id


@pytest.fixture
def seeder(database: Database) -> SqliteSeeder:
    return SqliteSeeder(database)
