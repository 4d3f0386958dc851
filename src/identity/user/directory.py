"""UserDirectory: read access to users for other contexts."""

from protean.utils.globals import current_domain

from identity.user.user import User


def get_user(user_id: str) -> User:
    return current_domain.repository_for(User).get(user_id)
