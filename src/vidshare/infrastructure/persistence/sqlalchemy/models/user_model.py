"""SQLAlchemy model for User aggregate."""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vidshare.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )
    email: Mapped[str] = mapped_column(
        String(400),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    display_nsfw: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    role: Mapped[str] = mapped_column(String(20), default="user", nullable=False)

    def __repr__(self) -> str:
        return (
            f"<UserModel(id={self.id}, username={self.username}, role={self.role})>"
        )
