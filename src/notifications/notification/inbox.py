"""Inbox management: commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from notifications.notification.notification import Notification
from shared.domain import shelfwise


@shelfwise.command(part_of="Notification")
class MarkNotificationRead:
    notification_id = Identifier(required=True)
    user_id = Identifier(required=True)


@shelfwise.command(part_of="Notification")
class HideNotification:
    notification_id = Identifier(required=True)
    user_id = Identifier(required=True)


@shelfwise.command_handler(part_of=Notification)
class ManageInboxHandler:
    def _owned(self, notification_id, user_id) -> Notification:
        notification = current_domain.repository_for(Notification).get_or_none(notification_id)
        if notification is None or str(notification.user_id) != str(user_id):
            raise ObjectNotFoundError(f"Notification {notification_id} not found for user {user_id}")
        return notification

    @handle(MarkNotificationRead)
    def mark_read(self, command):
        notification = self._owned(command.notification_id, command.user_id)
        notification.mark_read()
        current_domain.repository_for(Notification).add(notification)
        return notification

    @handle(HideNotification)
    def hide(self, command):
        notification = self._owned(command.notification_id, command.user_id)
        notification.hide()
        current_domain.repository_for(Notification).add(notification)
        return notification
