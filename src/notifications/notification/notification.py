"""Notification aggregate: a notice shown in a user's inbox.

Title and content are fixed per notification type.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from shared.domain import shelfwise


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationType(Enum):
    WELCOME = "Welcome"
    ORDER_RECEIVED = "OrderReceived"
    ORDER_STATUS_CHANGED = "OrderStatusChanged"
    PLAN_SUBSCRIBED = "PlanSubscribed"
    GENERIC = "Generic"


TEMPLATES = {
    NotificationType.WELCOME: ("Welcome to Shelfwise!", "We're glad to have you. Start exploring books now."),
    NotificationType.ORDER_RECEIVED: ("Order Received", "Thanks for your order! It's being processed."),
    NotificationType.ORDER_STATUS_CHANGED: ("Order Updated", "The status of one of your orders has changed."),
    NotificationType.PLAN_SUBSCRIBED: ("You just subscribed to a community plan.", "Enjoy the perks!"),
    NotificationType.GENERIC: ("Notification", "You have a new notification."),
}


def parse_type(kind: str) -> NotificationType:
    try:
        return NotificationType(kind)
    except ValueError:
        allowed = ", ".join(t.value for t in NotificationType)
        raise ValidationError({"type": [f"Unknown notification type '{kind}'. Allowed: {allowed}"]}) from None


@shelfwise.aggregate
class Notification:
    user_id = Identifier(required=True)
    type = String(required=True, max_length=40, choices=NotificationType)
    title = String(required=True, max_length=255)
    content = Text(required=True)
    created_at = DateTime()
    is_read = Boolean(default=False)
    is_hidden = Boolean(default=False)

    @classmethod
    def create(cls, user_id, kind: str, created_at: datetime | None = None):
        notification_type = parse_type(kind)
        title, content = TEMPLATES[notification_type]
        return cls(
            user_id=user_id,
            type=notification_type.value,
            title=title,
            content=content,
            created_at=created_at or datetime.now(UTC),
        )

    def mark_read(self) -> None:
        self.is_read = True

    def hide(self) -> None:
        self.is_hidden = True


@shelfwise.repository(part_of=Notification)
class NotificationRepository:
    def visible_for_user(self, user_id) -> list:
        """Visible notifications, newest first."""
        return (
            self.query.filter(user_id=user_id, is_hidden=False).order_by("-created_at").limit(None).all().items
        )
