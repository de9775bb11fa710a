"""VidShare Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the video domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification
- Token issuance (OAuth2 password and refresh-token grants)

Architecture:
    vidshare_auth/
    ├── services/           # Pure logic (password hashing, JWT, grants)
    ├── repositories.py     # Abstract credential lookup
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from vidshare_auth.exceptions import (
    AuthError,
    InvalidGrantError,
    InvalidRequestError,
    InvalidTokenError,
    OAuthError,
    UnsupportedGrantTypeError,
    WeakPasswordError,
)
from vidshare_auth.repositories import UserCredentialData, UserCredentialRepository
from vidshare_auth.schemas import TokenGrant, TokenPayload
from vidshare_auth.services import (
    JWTService,
    PasswordHashingService,
    TokenGrantService,
)

__all__ = [
    # Services
    "JWTService",
    "PasswordHashingService",
    "TokenGrantService",
    # Repositories (interfaces)
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenGrant",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidGrantError",
    "InvalidRequestError",
    "InvalidTokenError",
    "OAuthError",
    "UnsupportedGrantTypeError",
    "WeakPasswordError",
]
