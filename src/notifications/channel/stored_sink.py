"""Stored sink: persists notices as Notification aggregates.

Runs inside the event handler's unit of work, after the originating change
has committed.
"""

from datetime import datetime

import structlog
from protean.utils.globals import current_domain

from notifications.channel.sink_port import NotificationSink
from notifications.notification.notification import Notification

logger = structlog.get_logger(__name__)


class StoredNotificationSink(NotificationSink):
    def notify(self, user_id: str, kind: str, timestamp: datetime) -> dict:
        notification = Notification.create(user_id=user_id, kind=kind, created_at=timestamp)
        current_domain.repository_for(Notification).add(notification)

        logger.info("Notification stored", notification_id=str(notification.id), user_id=user_id, kind=kind)
        return {"notification_id": str(notification.id), "status": "stored"}
