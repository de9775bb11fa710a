from vidshare.domain.video.entities.user_video_rate import UserVideoRate

__all__ = ["UserVideoRate"]
