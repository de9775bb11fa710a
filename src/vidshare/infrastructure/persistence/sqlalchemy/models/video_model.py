"""SQLAlchemy model for videos."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vidshare.domain.shared.time import utc_now
from vidshare.infrastructure.persistence.sqlalchemy.models.base import Base


class VideoModel(Base):
    """Video row. Only the columns the users API reads are mapped here."""

    __tablename__ = "videos"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<VideoModel(id={self.id}, name={self.name})>"
