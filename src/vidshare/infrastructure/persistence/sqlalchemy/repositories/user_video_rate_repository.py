"""SQLAlchemy implementation of UserVideoRateRepository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vidshare.domain.video import (
    UserVideoRate,
    UserVideoRateRepository,
    VideoRateType,
)
from vidshare.infrastructure.persistence.sqlalchemy.models import UserVideoRateModel
from vidshare.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_connection_errors,
)


class UserVideoRateRepositorySQLAlchemy(UserVideoRateRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find(self, user_id: int, video_id: UUID) -> UserVideoRate | None:
        stmt = select(UserVideoRateModel).where(
            UserVideoRateModel.user_id == user_id,
            UserVideoRateModel.video_id == video_id,
        )
        with translate_connection_errors():
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return UserVideoRate(
            user_id=model.user_id,
            video_id=model.video_id,
            type=VideoRateType(model.type),
        )
