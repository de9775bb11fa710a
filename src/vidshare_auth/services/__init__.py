from vidshare_auth.services.jwt_service import JWTService
from vidshare_auth.services.password_service import PasswordHashingService
from vidshare_auth.services.token_grant_service import TokenGrantService

__all__ = [
    "JWTService",
    "PasswordHashingService",
    "TokenGrantService",
]
