"""User video rate repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from vidshare.domain.video.entities import UserVideoRate


class UserVideoRateRepository(ABC):
    """Read-only access to user video ratings."""

    @abstractmethod
    async def find(self, user_id: int, video_id: UUID) -> UserVideoRate | None:
        """Find the rating a user gave a video, if any."""
