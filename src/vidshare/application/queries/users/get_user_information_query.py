"""Query to get the profile of the authenticated user."""

from vidshare.domain.user import User, UserRepository


class GetUserInformationQuery:
    """Query to retrieve a user by username."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, username: str) -> User:
        return await self._user_repo.get_by_username(username)
