#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data for the hotel booking API

Features:
1. Create Users - eligible guest, remote-ticket guest, guest without enrollment
2. Create Enrollments and Tickets for the first two
3. Create a Hotel with rooms of capacity 1, 2 and 3
4. Print a bearer token per user for calling /api/booking
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import text

from src.platform.database.orm_db_setting import create_db_and_tables, get_session_maker
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.driven_adapter.model import (
    EnrollmentModel,
    HotelModel,
    RoomModel,
    TicketModel,
    TicketTypeModel,
    UserModel,
)
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@dataclass
class GuestConfig:
    """Guest seed configuration"""

    email: str
    name: str
    ticket_type: Optional[str]  # key into TICKET_TYPES, None means no enrollment


TICKET_TYPES = {
    'in_person_hotel': dict(name='In person + hotel', price=600, is_remote=False, includes_hotel=True),
    'remote': dict(name='Remote', price=100, is_remote=True, includes_hotel=False),
}

TEST_GUESTS = [
    GuestConfig(email='b@t.com', name='Hotel Guest', ticket_type='in_person_hotel'),
    GuestConfig(email='r@t.com', name='Remote Guest', ticket_type='remote'),
    GuestConfig(email='n@t.com', name='Not Enrolled', ticket_type=None),
]

ROOM_CAPACITIES = [1, 2, 3]


async def create_guests(session) -> dict[str, int]:
    """Create users with their enrollment and paid ticket

    Returns:
        dict: email -> user id
    """
    print(f'👥 Creating {len(TEST_GUESTS)} guests...')

    ticket_types = {key: TicketTypeModel(**fields) for key, fields in TICKET_TYPES.items()}
    session.add_all(ticket_types.values())

    user_ids: dict[str, int] = {}
    for index, guest in enumerate(TEST_GUESTS, start=1):
        user = UserModel(email=guest.email)
        session.add(user)
        await session.flush()
        user_ids[guest.email] = user.id

        if guest.ticket_type is None:
            print(f'   ✅ Created user: ID={user.id}, Email={user.email} (no enrollment)')
            continue

        enrollment = EnrollmentModel(
            user_id=user.id, name=guest.name, cpf=f'{index:011d}', phone=f'21 9{index:08d}'
        )
        session.add(enrollment)
        await session.flush()

        session.add(
            TicketModel(
                ticket_type_id=ticket_types[guest.ticket_type].id,
                enrollment_id=enrollment.id,
                status=TicketStatus.PAID,
            )
        )
        print(f'   ✅ Created user: ID={user.id}, Email={user.email}, Ticket={guest.ticket_type}')

    await session.flush()
    return user_ids


async def create_hotel(session) -> int:
    """Create a hotel with rooms of increasing capacity"""
    print('🏨 Creating hotel and rooms...')

    hotel = HotelModel(name='Seaside Hotel', image='https://example.com/seaside.jpg')
    session.add(hotel)
    await session.flush()

    for number, capacity in enumerate(ROOM_CAPACITIES, start=101):
        room = RoomModel(name=str(number), capacity=capacity, hotel_id=hotel.id)
        session.add(room)
        await session.flush()
        print(f'   ✅ Created room: ID={room.id}, Name={room.name}, Capacity={capacity}')

    return hotel.id


async def verify_data():
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with get_session_maker()() as session:
        for table in ['user', 'enrollment', 'ticket', 'hotel', 'room', 'booking']:
            table_name = f'"{table}"' if table == 'user' else table
            result = await session.execute(text(f'SELECT COUNT(*) FROM {table_name}'))
            print(f'   {table.capitalize()} count: {result.scalar()}')

    print('   ✅ Data verification completed!')


async def _seed_data() -> dict[str, int]:
    """Seed guests and hotel in a single transaction"""
    async with get_session_maker()() as session:
        try:
            user_ids = await create_guests(session)
            print()

            await create_hotel(session)
            print()

            await session.commit()
            print('✅ All data committed successfully!')
            return user_ids

        except Exception as e:
            await session.rollback()
            print(f'❌ Rolling back: {e}')
            raise


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_db_and_tables()
        user_ids = await _seed_data()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print('📋 Bearer tokens:')
        jwt_auth = JwtAuth()
        for email, user_id in user_ids.items():
            print(f'   {email}: {jwt_auth.create_jwt_token(user_id=user_id)}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)


if __name__ == '__main__':
    asyncio.run(main())
