from vidshare.application.queries.users.get_user_information_query import (
    GetUserInformationQuery,
)
from vidshare.application.queries.users.get_user_video_rating_query import (
    NO_RATING,
    GetUserVideoRatingQuery,
    VideoRatingResult,
)
from vidshare.application.queries.users.list_users_query import (
    ListUsersQuery,
    UserPage,
)

__all__ = [
    "NO_RATING",
    "GetUserInformationQuery",
    "GetUserVideoRatingQuery",
    "ListUsersQuery",
    "UserPage",
    "VideoRatingResult",
]
