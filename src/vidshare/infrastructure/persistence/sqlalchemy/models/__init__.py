"""SQLAlchemy models for persistence layer."""

from vidshare.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from vidshare.infrastructure.persistence.sqlalchemy.models.user_model import UserModel
from vidshare.infrastructure.persistence.sqlalchemy.models.user_video_rate_model import (  # NOQA: E501
    UserVideoRateModel,
)
from vidshare.infrastructure.persistence.sqlalchemy.models.video_model import (
    VideoModel,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UserModel",
    "UserVideoRateModel",
    "VideoModel",
]
