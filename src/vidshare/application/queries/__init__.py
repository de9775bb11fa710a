from vidshare.application.queries.users import (
    NO_RATING,
    GetUserInformationQuery,
    GetUserVideoRatingQuery,
    ListUsersQuery,
    UserPage,
    VideoRatingResult,
)

__all__ = [
    "NO_RATING",
    "GetUserInformationQuery",
    "GetUserVideoRatingQuery",
    "ListUsersQuery",
    "UserPage",
    "VideoRatingResult",
]
