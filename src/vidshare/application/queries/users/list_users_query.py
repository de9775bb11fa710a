"""Query to list users one page at a time."""

from dataclasses import dataclass

from vidshare.domain.user import User, UserRepository


@dataclass(frozen=True)
class UserPage:
    users: list[User]
    total: int


class ListUsersQuery:
    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, start: int, count: int, sort: str) -> UserPage:
        users, total = await self._user_repo.list_for_api(start, count, sort)
        return UserPage(users=users, total=total)
