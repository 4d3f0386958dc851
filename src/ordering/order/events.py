"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Decimal, Identifier, Integer, String

from shared.domain import shelfwise


@shelfwise.event(part_of="Order")
class OrderPlaced:
    """A cart was converted into an order and paid into the treasury."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_code = String(required=True)
    user_id = Identifier(required=True)
    total = Decimal(required=True)
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)


@shelfwise.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
