"""Token endpoint schemas."""

from pydantic import BaseModel, Field

from vidshare_auth import TokenGrant


class TokenResponse(BaseModel):
    """OAuth2 bearer token grant."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Access token lifetime in seconds")
    refresh_token: str

    @classmethod
    def from_grant(cls, grant: TokenGrant) -> "TokenResponse":
        return cls(
            access_token=grant.access_token,
            token_type=grant.token_type,
            expires_in=grant.expires_in,
            refresh_token=grant.refresh_token,
        )
