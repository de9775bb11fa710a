from vidshare.domain.video.value_objects.video_rate_type import VideoRateType

__all__ = ["VideoRateType"]
