"""Inbound event handler: Notifications reacts to Order events.

Runs after the order transaction has committed. A failing sink is logged
and never undoes the placed order or the status change.
"""

import structlog
from protean.utils.mixins import handle

from notifications.channel import get_sink
from notifications.notification.notification import Notification, NotificationType
from ordering.order.events import OrderPlaced, OrderStatusChanged
from shared.domain import shelfwise

logger = structlog.get_logger(__name__)


def deliver(user_id: str, kind: NotificationType, timestamp, **context) -> None:
    try:
        get_sink().notify(user_id, kind.value, timestamp)
    except Exception:
        logger.exception("Notification delivery failed", user_id=user_id, kind=kind.value, **context)


@shelfwise.event_handler(part_of=Notification, stream_category="shelfwise::order")
class OrderingEventsHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        """Confirm receipt of the order to the buyer."""
        deliver(str(event.user_id), NotificationType.ORDER_RECEIVED, event.placed_at, order_id=str(event.order_id))

    @handle(OrderStatusChanged)
    def on_order_status_changed(self, event: OrderStatusChanged) -> None:
        if event.previous_status == event.new_status:
            return
        deliver(
            str(event.user_id),
            NotificationType.ORDER_STATUS_CHANGED,
            event.changed_at,
            order_id=str(event.order_id),
        )
