from vidshare.application.commands.users.create_user_command import CreateUserCommand
from vidshare.application.commands.users.delete_user_command import DeleteUserCommand
from vidshare.application.commands.users.update_user_command import UpdateUserCommand

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
