"""Video domain (read side used by the users API)."""

from vidshare.domain.video.entities import UserVideoRate
from vidshare.domain.video.repositories import (
    UserVideoRateRepository,
    VideoRepository,
)
from vidshare.domain.video.value_objects import VideoRateType

__all__ = [
    "UserVideoRate",
    "UserVideoRateRepository",
    "VideoRateType",
    "VideoRepository",
]
