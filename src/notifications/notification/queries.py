"""Read-side access to a user's notifications."""

from protean.utils.globals import current_domain

from notifications.notification.notification import Notification


def list_notifications_for_user(user_id: str) -> list[Notification]:
    return current_domain.repository_for(Notification).visible_for_user(user_id)
