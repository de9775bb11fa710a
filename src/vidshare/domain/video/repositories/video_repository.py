"""Video repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID


class VideoRepository(ABC):
    """Read-only access to videos."""

    @abstractmethod
    async def exists(self, video_id: UUID) -> bool:
        """Check whether a video with this ID exists."""
