from vidshare.domain.user import UserRepository


class DeleteUserCommand:
    """Command to delete a user: load by ID, then destroy."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: int) -> None:
        user = await self._user_repo.get_by_id(user_id)
        await self._user_repo.destroy(user)
