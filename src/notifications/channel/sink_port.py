"""Notification sink port: where user notices are delivered.

Domain code programs against the port; adapters are swapped via the
``NOTIFICATION_SINK`` setting.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class NotificationSink(ABC):
    """Abstract interface for notification sinks."""

    @abstractmethod
    def notify(self, user_id: str, kind: str, timestamp: datetime) -> dict:
        """Deliver a notice of ``kind`` to ``user_id``.

        Returns:
            dict with keys: notification_id, status
        """
        ...
