"""Value objects passed between the token services."""

from dataclasses import dataclass
from datetime import datetime

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


@dataclass(frozen=True)
class TokenPayload:
    """Claims of a verified token.

    Attributes
    ----------
    user_id
        Integer id of the account the token was issued to
    username
        Login name at issue time
    exp
        Expiry, timezone-aware
    token_type
        ``access`` for API calls, ``refresh`` for the refresh grant only
    """

    user_id: int
    username: str
    exp: datetime
    token_type: str

    def is_access_token(self) -> bool:
        return self.token_type == ACCESS_TOKEN

    def is_refresh_token(self) -> bool:
        return self.token_type == REFRESH_TOKEN


@dataclass(frozen=True)
class TokenGrant:
    """Token pair issued by a successful grant."""

    access_token: str
    refresh_token: str
    expires_in: int
    token_type: str = "bearer"
