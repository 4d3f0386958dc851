"""Order fulfillment: converting a user's cart into a placed order.

``PlaceOrder`` is handled in one unit of work. The handler:

1. Loads the user and their cart (an empty cart is refused)
2. Checks the delivery flag against the shipping details
3. Walks the cart lines in order: checks stock, snapshots the line and
   decrements the book's stock
4. Builds the order under a fresh unique code and persists it
5. Empties the cart
6. Credits the treasury account with the order total

Any failure before the commit leaves books, cart, orders and ledger exactly
as they were. Every touched Book and the treasury account carry a version
stamp; a concurrent commit against any of them fails ours with
``ExpectedVersionError`` and the whole handler is re-run in a fresh unit of
work, up to ``server.version_retry.max_retries`` times. The order
notification goes out after the commit via ``OrderPlaced``.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Dict, Identifier, String
from protean.utils.globals import current_domain

from catalogue.book.book import Book
from identity.user.user import User
from ledger.account.ledger import CapitalLedger, treasury_account_id
from ordering.cart.cart import Cart
from ordering.order import order as orders
from ordering.order.order import (
    Order,
    OrderItem,
    OrderStatus,
    Shipping,
    validate_contact,
    validate_shipping,
)
from shared.domain import shelfwise
from shared.errors import InsufficientStockError, InternalError

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    user_email = String(max_length=254, default="")
    user_phone = String(max_length=30, default="")
    user_full_name = String(max_length=200, default="")
    recipient_name = String(max_length=200, default="")
    status = String(max_length=20, default=OrderStatus.PENDING.value)
    is_delivery = Boolean(default=False)
    shipping = Dict()


def _shipping_from(payload: dict | None) -> Shipping | None:
    if not payload:
        return None
    return Shipping(
        address=payload.get("address"),
        city=payload.get("city"),
        district=payload.get("district"),
        reference=payload.get("reference") or "",
    )


@shelfwise.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        status = OrderStatus.parse(command.status)
        validate_contact(
            user_email=command.user_email,
            user_phone=command.user_phone,
            user_full_name=command.user_full_name,
            recipient_name=command.recipient_name,
        )

        current_domain.repository_for(User).get(command.user_id)

        carts = current_domain.repository_for(Cart)
        cart = carts.for_user(command.user_id)
        if cart is None or not cart.items:
            raise ValidationError({"cart": ["Cannot place an order from an empty cart"]})

        shipping = _shipping_from(command.shipping)
        validate_shipping(command.is_delivery, shipping)

        books = current_domain.repository_for(Book)
        order_items = []
        for position, line in enumerate(cart.lines):
            book = books.get(line.book_id)
            if book.stock < line.quantity:
                raise InsufficientStockError(book_id=book.id, available=book.stock, requested=line.quantity)
            order_items.append(OrderItem.snapshot(book, line.quantity, position=position))
            book.decrease_stock(line.quantity)
            books.add(book)

        order = Order.place(
            code=self._unique_code(),
            user_id=command.user_id,
            user_email=command.user_email,
            user_phone=command.user_phone,
            user_full_name=command.user_full_name,
            recipient_name=command.recipient_name,
            items=order_items,
            is_delivery=command.is_delivery,
            shipping=shipping,
            status=status,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        carts.add(cart)

        CapitalLedger().credit(treasury_account_id(), order.total, reason=f"order {order.code}")

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_code=order.code,
            user_id=str(order.user_id),
            total=str(order.total),
            items=len(order.items),
        )
        return order

    def _unique_code(self) -> str:
        repo = current_domain.repository_for(Order)
        max_attempts = int(current_domain.ORDER_CODE_MAX_ATTEMPTS)
        for _ in range(max_attempts):
            code = orders.code_generator.generate()
            if not repo.code_exists(code):
                return code

        logger.error("Order code space exhausted", attempts=max_attempts)
        raise InternalError({"code": ["Could not allocate a unique order code"]})
