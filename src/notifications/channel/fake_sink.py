"""Fake notification sink: records notices in memory for testing."""

from datetime import datetime
from uuid import uuid4

from notifications.channel.sink_port import NotificationSink


class FakeNotificationSink(NotificationSink):
    """Sink that records every call for test assertions."""

    def __init__(self):
        self.notifications: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Notification delivery failed"):
        """Configure the fake sink behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def notify(self, user_id: str, kind: str, timestamp: datetime) -> dict:
        if not self.should_succeed:
            raise ConnectionError(self.failure_reason)

        record = {
            "notification_id": f"notification-{uuid4().hex[:12]}",
            "user_id": user_id,
            "kind": kind,
            "timestamp": timestamp,
        }
        self.notifications.append(record)
        return {"notification_id": record["notification_id"], "status": "recorded"}

    def for_user(self, user_id: str) -> list[dict]:
        return [n for n in self.notifications if n["user_id"] == user_id]

    def reset(self):
        self.notifications.clear()
        self.should_succeed = True
