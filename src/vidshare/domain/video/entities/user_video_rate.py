"""User-video rating association."""

from dataclasses import dataclass
from uuid import UUID

from vidshare.domain.video.value_objects import VideoRateType


@dataclass(frozen=True)
class UserVideoRate:
    """A single user's rating of a single video.

    Ratings are written by the video subsystem; the users API only reads
    them. A missing record means the user has not rated the video.
    """

    user_id: int
    video_id: UUID
    type: VideoRateType
