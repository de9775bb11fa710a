"""User schemas for API requests and responses."""

from collections.abc import Sequence
from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from vidshare.domain.user import User, UserRole
from vidshare_auth import PasswordHashingService

USERNAME_PATTERN = r"^[a-z0-9._]+$"
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20

T = TypeVar("T")


class UserCreateRequest(BaseModel):
    """Payload for creating an account.

    Fields other than these three are ignored, so no create payload can
    choose a role or an NSFW preference.
    """

    username: str = Field(
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        pattern=USERNAME_PATTERN,
        description="Lowercase letters, digits, dots and underscores",
    )
    email: EmailStr
    password: str = Field(
        min_length=PasswordHashingService.MIN_LENGTH,
        max_length=PasswordHashingService.MAX_LENGTH,
    )

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "username": "alice",
                    "email": "alice@example.com",
                    "password": "correct-horse",
                },
            ],
        },
    )


class UserUpdateRequest(BaseModel):
    """Partial update of the caller's own account.

    A key that is absent (or null) leaves the stored value unchanged.
    """

    password: str | None = Field(
        default=None,
        min_length=PasswordHashingService.MIN_LENGTH,
        max_length=PasswordHashingService.MAX_LENGTH,
    )
    display_nsfw: bool | None = Field(default=None, alias="displayNSFW")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class UserResponse(BaseModel):
    """Public representation of a user. Never carries the password."""

    id: int
    username: str
    email: str
    display_nsfw: bool = Field(alias="displayNSFW")
    role: UserRole
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            display_nsfw=user.display_nsfw,
            role=user.role,
            created_at=user.created_at,
        )


class VideoRatingResponse(BaseModel):
    """The caller's rating of one video: ``like``, ``dislike`` or ``none``."""

    video_id: UUID
    rating: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListEnvelope(BaseModel, Generic[T]):
    """Listing envelope: the page of formatted items plus the overall total."""

    total: int
    data: list[T]


def format_objects(items: Sequence[T], total: int) -> ListEnvelope[T]:
    return ListEnvelope(total=total, data=list(items))
