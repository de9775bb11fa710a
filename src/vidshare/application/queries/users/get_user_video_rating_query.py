"""Query to get how the authenticated user rated a video."""

from dataclasses import dataclass
from uuid import UUID

from vidshare.domain.video import UserVideoRateRepository

NO_RATING = "none"


@dataclass(frozen=True)
class VideoRatingResult:
    video_id: UUID
    rating: str  # "like", "dislike" or "none"


class GetUserVideoRatingQuery:
    """Look up a user's rating of a video.

    A missing rating is not an error; it is reported as ``"none"``.
    """

    def __init__(self, rate_repo: UserVideoRateRepository) -> None:
        self._rate_repo = rate_repo

    async def execute(self, user_id: int, video_id: UUID) -> VideoRatingResult:
        rate = await self._rate_repo.find(user_id, video_id)
        rating = rate.type.value if rate is not None else NO_RATING
        return VideoRatingResult(video_id=video_id, rating=rating)
