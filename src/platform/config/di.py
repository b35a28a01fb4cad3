"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.hotel_booking.app.checker.booking_existence_checker import (
    BookingExistenceChecker,
)
from src.service.hotel_booking.app.checker.eligibility_gateway import EligibilityGateway
from src.service.hotel_booking.app.checker.room_capacity_checker import RoomCapacityChecker
from src.service.hotel_booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.enrollment_query_repo_impl import (
    EnrollmentQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl
from src.service.hotel_booking.driven_adapter.repo.ticket_query_repo_impl import (
    TicketQueryRepoImpl,
)
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager, event-loop aware)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per call)
    enrollment_query_repo = providers.Singleton(
        EnrollmentQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    room_query_repo = providers.Singleton(
        RoomQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl,
        session_factory=database.provided.session,
        strict_capacity=config_service.provided.BOOKING_STRICT_CAPACITY,
    )

    # Checkers
    eligibility_gateway = providers.Singleton(
        EligibilityGateway,
        enrollment_query_repo=enrollment_query_repo,
        ticket_query_repo=ticket_query_repo,
    )
    booking_existence_checker = providers.Singleton(
        BookingExistenceChecker,
        booking_query_repo=booking_query_repo,
    )
    room_capacity_checker = providers.Singleton(
        RoomCapacityChecker,
        room_query_repo=room_query_repo,
        booking_query_repo=booking_query_repo,
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
