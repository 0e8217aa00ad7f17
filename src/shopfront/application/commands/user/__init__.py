from shopfront.application.commands.user.create_user_command import CreateUserCommand
from shopfront.application.commands.user.update_profile_command import (
    UpdateProfileCommand,
)

__all__ = [
    "CreateUserCommand",
    "UpdateProfileCommand",
]
