"""User registration: command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from identity.user.user import User
from shared.domain import shelfwise
from shared.errors import ConflictError

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="User")
class RegisterUser:
    """Add a client or administrator to the directory."""

    username = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    display_name = String(required=True, max_length=200)
    phone = String(max_length=30)
    role = String(default="client")
    subscription = String()


@shelfwise.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_username(command.username) is not None:
            raise ConflictError({"username": [f"Username '{command.username}' is already taken"]})

        user = User.register(
            username=command.username,
            email=command.email,
            display_name=command.display_name,
            phone=command.phone,
            role=command.role,
            subscription=command.subscription,
        )
        repo.add(user)

        logger.info("User registered", user_id=str(user.id), role=user.role)
        return user
