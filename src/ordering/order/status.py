"""Order status changes: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.order.order import Order
from shared.domain import shelfwise

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@shelfwise.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous = order.status
        order.update_status(command.status)
        repo.add(order)

        logger.info("Order status updated", order_id=str(order.id), previous=previous, status=order.status)
        return order
