from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel_booking.domain.entity.enrollment_entity import Enrollment
from src.service.hotel_booking.driven_adapter.model.enrollment_model import EnrollmentModel


class EnrollmentQueryRepoImpl(IEnrollmentQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(db_enrollment: EnrollmentModel) -> Enrollment:
        return Enrollment(
            id=db_enrollment.id,
            user_id=db_enrollment.user_id,
            name=db_enrollment.name,
            cpf=db_enrollment.cpf,
            phone=db_enrollment.phone,
            created_at=db_enrollment.created_at,
            updated_at=db_enrollment.updated_at,
        )

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Enrollment]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EnrollmentModel).where(EnrollmentModel.user_id == user_id)
            )
            db_enrollment = result.scalars().first()

        if not db_enrollment:
            return None
        return self._to_entity(db_enrollment)
