from vidshare.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceUnavailableError,
)
from vidshare.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "PersistenceUnavailableError",
    "ensure_tz_aware",
    "utc_now",
]
