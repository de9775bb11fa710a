"""Declarative base shared by all VidShare tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from vidshare.domain.shared.time import utc_now


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """``created_at`` / ``updated_at`` columns, stored with their UTC offset."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
