"""Request and response schemas."""

from vidshare.presentation.api.schemas.auth import TokenResponse
from vidshare.presentation.api.schemas.common import (
    ErrorResponse,
    FieldError,
    HealthResponse,
    OAuthErrorResponse,
)
from vidshare.presentation.api.schemas.users import (
    ListEnvelope,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
    VideoRatingResponse,
    format_objects,
)

__all__ = [
    "ErrorResponse",
    "FieldError",
    "HealthResponse",
    "ListEnvelope",
    "OAuthErrorResponse",
    "TokenResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
    "VideoRatingResponse",
    "format_objects",
]
