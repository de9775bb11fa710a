from vidshare.application.commands.users import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
