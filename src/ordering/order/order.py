"""Order aggregate: an immutable snapshot of a checked-out cart.

Orders carry a copy of everything they were priced on (book title, author,
sale price, cover) so later catalogue edits never change a placed order.
Only the status moves after placement.

Status machine:
    pending <-> in progress <-> delivered (any state may move to any other)
"""

import decimal
import random
import string
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Decimal, HasMany, Identifier, Integer, String, ValueObject

from shared.domain import shelfwise
from shared.money import to_money

ORDER_CODE_LENGTH = 6
ORDER_CODE_ALPHABET = string.ascii_uppercase + string.digits


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in progress"
    DELIVERED = "delivered"

    @classmethod
    def parse(cls, value: str | None) -> "OrderStatus":
        """Case- and whitespace-insensitive lookup."""
        normalized = (value or "").strip().lower()
        for status in cls:
            if status.value == normalized:
                return status
        allowed = ", ".join(f"'{s.value}'" for s in cls)
        raise ValidationError({"status": [f"Invalid status '{value}'. Allowed values are: {allowed}"]})


class OrderCodeGenerator:
    """Seedable source of short human-readable order codes."""

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def generate(self) -> str:
        return "".join(self._random.choice(ORDER_CODE_ALPHABET) for _ in range(ORDER_CODE_LENGTH))


# Process-wide code source; replace it to pin codes.
code_generator = OrderCodeGenerator()


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@shelfwise.value_object(part_of="Order")
class Shipping:
    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    district = String(required=True, max_length=100)
    reference = String(max_length=255, default="")

    @invariant.post
    def address_lines_must_not_be_blank(self):
        errors = {}
        for field in ("address", "city", "district"):
            value = getattr(self, field)
            if value is None or not str(value).strip():
                errors[f"shipping.{field}"] = [f"Shipping {field} cannot be empty"]
        if errors:
            raise ValidationError(errors)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@shelfwise.entity(part_of="Order")
class OrderItem:
    book_id = Identifier(required=True)
    book_title = String(required=True, max_length=255)
    book_author = String(required=True, max_length=255)
    book_price = Decimal(required=True, precision=12, scale=2)
    book_cover = String(max_length=500, default="")
    quantity = Integer(required=True, min_value=1)
    item_total = Decimal(required=True, precision=12, scale=2)
    position = Integer(default=0)

    @classmethod
    def snapshot(cls, book, quantity: int, position: int = 0):
        """Freeze the book's current details and sale price into an order line."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Order item quantity must be greater than zero"]})
        price = to_money(book.sale_price)
        return cls(
            book_id=str(book.id),
            book_title=book.title,
            book_author=book.author,
            book_price=price,
            book_cover=book.cover or "",
            quantity=quantity,
            item_total=to_money(price * quantity),
            position=position,
        )


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@shelfwise.aggregate
class Order:
    code = String(required=True, max_length=ORDER_CODE_LENGTH, unique=True)
    user_id = Identifier(required=True)
    user_email = String(required=True, max_length=254)
    user_phone = String(required=True, max_length=30)
    user_full_name = String(required=True, max_length=200)
    recipient_name = String(required=True, max_length=200)
    is_delivery = Boolean(default=False)
    shipping = ValueObject(Shipping)
    items = HasMany(OrderItem)
    total = Decimal(required=True, precision=12, scale=2)
    placed_at = DateTime()
    status = String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)

    @invariant.post
    def shipping_present_only_for_delivery(self):
        validate_shipping(self.is_delivery, self.shipping)

    @invariant.post
    def total_must_match_items(self):
        if not self.items:
            return
        expected = to_money(sum((item.item_total for item in self.items), decimal.Decimal("0.00")))
        if to_money(self.total) != expected:
            raise ValidationError({"total": [f"Order total {self.total} does not match its items ({expected})"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        code,
        user_id,
        user_email,
        user_phone,
        user_full_name,
        recipient_name,
        items,
        is_delivery=False,
        shipping=None,
        status=OrderStatus.PENDING,
    ):
        from ordering.order.events import OrderPlaced

        validate_contact(
            user_email=user_email,
            user_phone=user_phone,
            user_full_name=user_full_name,
            recipient_name=recipient_name,
        )
        validate_shipping(is_delivery, shipping)
        if not items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

        order = cls(
            code=code,
            user_id=user_id,
            user_email=user_email.strip(),
            user_phone=user_phone.strip(),
            user_full_name=user_full_name.strip(),
            recipient_name=recipient_name.strip(),
            is_delivery=is_delivery,
            shipping=shipping,
            items=list(items),
            total=to_money(sum((item.item_total for item in items), decimal.Decimal("0.00"))),
            placed_at=datetime.now(UTC),
            status=status.value,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_code=order.code,
                user_id=str(order.user_id),
                total=order.total,
                item_count=len(order.items),
                placed_at=order.placed_at,
            )
        )
        return order

    @property
    def lines(self) -> list[OrderItem]:
        """Order lines in cart order."""
        return sorted(self.items, key=lambda item: item.position)

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def update_status(self, status: str) -> None:
        from ordering.order.events import OrderStatusChanged

        new_status = OrderStatus.parse(status)
        previous = self.status
        self.status = new_status.value
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                user_id=str(self.user_id),
                previous_status=previous,
                new_status=self.status,
                changed_at=datetime.now(UTC),
            )
        )


def validate_contact(**fields) -> None:
    errors = {
        name: [f"{name.replace('_', ' ').capitalize()} cannot be empty"]
        for name, value in fields.items()
        if value is None or not value.strip()
    }
    if errors:
        raise ValidationError(errors)


def validate_shipping(is_delivery: bool, shipping) -> None:
    if is_delivery and shipping is None:
        raise ValidationError({"shipping": ["Shipping details are required for delivery orders"]})
    if not is_delivery and shipping is not None:
        raise ValidationError({"shipping": ["Shipping details must not be provided for pickup orders"]})


@shelfwise.repository(part_of=Order)
class OrderRepository:
    def find_by_code(self, code: str):
        return self.query.filter(code=code.strip().upper()).first

    def code_exists(self, code: str) -> bool:
        return self.query.filter(code=code).count() > 0

    def list_by_user(self, user_id) -> list:
        return self.query.filter(user_id=user_id).order_by("-placed_at").limit(None).all().items

    def list_all(self) -> list:
        return self.query.order_by("-placed_at").limit(None).all().items
