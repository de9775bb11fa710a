"""SQLAlchemy repository implementations."""

from vidshare.infrastructure.persistence.sqlalchemy.repositories.user_credential_repository import (  # NOQA: E501
    UserCredentialRepositorySQLAlchemy,
)
from vidshare.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)
from vidshare.infrastructure.persistence.sqlalchemy.repositories.user_video_rate_repository import (  # NOQA: E501
    UserVideoRateRepositorySQLAlchemy,
)
from vidshare.infrastructure.persistence.sqlalchemy.repositories.video_repository import (  # NOQA: E501
    VideoRepositorySQLAlchemy,
)

__all__ = [
    "UserCredentialRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "UserVideoRateRepositorySQLAlchemy",
    "VideoRepositorySQLAlchemy",
]
