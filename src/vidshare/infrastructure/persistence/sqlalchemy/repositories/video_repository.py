"""SQLAlchemy implementation of VideoRepository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vidshare.domain.video import VideoRepository
from vidshare.infrastructure.persistence.sqlalchemy.models import VideoModel
from vidshare.infrastructure.persistence.sqlalchemy.repositories._utils import (
    translate_connection_errors,
)


class VideoRepositorySQLAlchemy(VideoRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, video_id: UUID) -> bool:
        stmt = select(VideoModel.id).where(VideoModel.id == video_id)
        with translate_connection_errors():
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
