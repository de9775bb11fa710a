from enum import Enum


class VideoRateType(str, Enum):
    """How a user rated a video."""

    LIKE = "like"
    DISLIKE = "dislike"
