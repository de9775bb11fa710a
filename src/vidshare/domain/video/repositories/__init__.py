from vidshare.domain.video.repositories.user_video_rate_repository import (
    UserVideoRateRepository,
)
from vidshare.domain.video.repositories.video_repository import VideoRepository

__all__ = ["UserVideoRateRepository", "VideoRepository"]
