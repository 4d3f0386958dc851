"""Notification sink registry.

``NOTIFICATION_SINK`` names the adapter: ``stored`` persists notices as
Notification aggregates, ``fake`` records them in memory.
"""

from protean.utils.globals import current_domain

_sink_instance = None


def build_sink(name: str):
    if name == "stored":
        from notifications.channel.stored_sink import StoredNotificationSink

        return StoredNotificationSink()
    if name == "fake":
        from notifications.channel.fake_sink import FakeNotificationSink

        return FakeNotificationSink()
    raise ValueError(f"Unknown notification sink: {name}")


def get_sink():
    """Return the configured sink adapter (one per process)."""
    global _sink_instance
    if _sink_instance is None:
        _sink_instance = build_sink(str(current_domain.NOTIFICATION_SINK).strip().lower())
    return _sink_instance


def reset_sink():
    """Forget the cached sink (useful for testing)."""
    global _sink_instance
    _sink_instance = None
