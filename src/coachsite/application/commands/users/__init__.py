from coachsite.application.commands.users.create_user_command import CreateUserCommand
from coachsite.application.commands.users.delete_user_command import DeleteUserCommand
from coachsite.application.commands.users.update_user_command import UpdateUserCommand

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
