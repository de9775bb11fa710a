"""SQLAlchemy model for user video rates."""

import uuid

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vidshare.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserVideoRateModel(Base, TimestampMixin):
    """One rating (like/dislike) of one video by one user."""

    __tablename__ = "user_video_rates"
    __table_args__ = (
        UniqueConstraint("user_id", "video_id", name="uq_user_video_rate"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    video_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(10), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<UserVideoRateModel(user_id={self.user_id}, "
            f"video_id={self.video_id}, type={self.type})>"
        )
