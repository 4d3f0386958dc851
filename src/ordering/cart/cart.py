"""Cart aggregate: a user's shopping cart and its lines.

A user holds one cart and at most one line per book; adding the same book
again merges into the existing line. Quantities stay within
1..MAX_CART_ITEM_QUANTITY. Lines keep the order they were first added in.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from shared.domain import shelfwise

MAX_CART_ITEM_QUANTITY = 10


def _check_quantity(quantity: int) -> None:
    if quantity < 1 or quantity > MAX_CART_ITEM_QUANTITY:
        raise ValidationError({"quantity": [f"Quantity must be between 1 and {MAX_CART_ITEM_QUANTITY}, got {quantity}"]})


@shelfwise.entity(part_of="Cart")
class CartItem:
    book_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, max_value=MAX_CART_ITEM_QUANTITY)
    position = Integer(default=0)
    added_at = DateTime()


@shelfwise.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    updated_at = DateTime()

    @invariant.post
    def one_line_per_book(self):
        book_ids = [str(item.book_id) for item in self.items]
        if len(book_ids) != len(set(book_ids)):
            raise ValidationError({"items": ["A cart holds at most one line per book"]})

    @classmethod
    def open_for(cls, user_id):
        return cls(user_id=user_id, updated_at=datetime.now(UTC))

    @property
    def lines(self) -> list[CartItem]:
        """Cart lines in the order they were added."""
        return sorted(self.items, key=lambda item: item.position)

    def line_for_book(self, book_id):
        return next((item for item in self.items if str(item.book_id) == str(book_id)), None)

    def owned_line(self, item_id) -> CartItem:
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ObjectNotFoundError(f"Cart item {item_id} not found for user {self.user_id}")
        return item

    def add_book(self, book_id, quantity: int) -> CartItem:
        """Add ``quantity`` copies of a book, merging into an existing line."""
        existing = self.line_for_book(book_id)
        if existing is not None:
            if quantity < 1:
                raise ValidationError({"quantity": ["Quantity to add must be at least 1"]})
            _check_quantity(existing.quantity + quantity)
            existing.quantity += quantity
            self.updated_at = datetime.now(UTC)
            return existing

        _check_quantity(quantity)
        item = CartItem(
            book_id=book_id,
            quantity=quantity,
            position=max((i.position for i in self.items), default=-1) + 1,
            added_at=datetime.now(UTC),
        )
        self.add_items(item)
        self.updated_at = datetime.now(UTC)
        return item

    def set_quantity(self, item_id, quantity: int) -> CartItem | None:
        """Set a line's quantity. Zero removes the line and returns None."""
        item = self.owned_line(item_id)
        if quantity == 0:
            self.remove_items(item)
            self.updated_at = datetime.now(UTC)
            return None

        _check_quantity(quantity)
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)
        return item

    def remove_line(self, item_id) -> None:
        self.remove_items(self.owned_line(item_id))
        self.updated_at = datetime.now(UTC)

    def clear(self) -> None:
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)


@shelfwise.repository(part_of=Cart)
class CartRepository:
    def for_user(self, user_id):
        return self.query.filter(user_id=user_id).first
