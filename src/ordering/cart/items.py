"""Cart item management: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from catalogue.book.book import Book
from identity.user.user import User
from ordering.cart.cart import Cart
from shared.domain import shelfwise

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="Cart")
class AddToCart:
    book_id = Identifier(required=True)
    user_id = Identifier(required=True)
    quantity = Integer(required=True)


@shelfwise.command(part_of="Cart")
class UpdateCartQuantity:
    item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    new_quantity = Integer(required=True)


@shelfwise.command(part_of="Cart")
class RemoveFromCart:
    item_id = Identifier(required=True)
    user_id = Identifier(required=True)


def _owned_cart(user_id) -> Cart:
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        raise ObjectNotFoundError(f"User {user_id} has no cart")
    return cart


@shelfwise.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        book = current_domain.repository_for(Book).get_or_none(command.book_id)
        if book is None:
            raise ObjectNotFoundError(f"Book with id {command.book_id} does not exist")
        if current_domain.repository_for(User).get_or_none(command.user_id) is None:
            raise ObjectNotFoundError(f"User with id {command.user_id} does not exist")
        if not book.is_active:
            raise ValidationError({"book_id": [f"Book {book.id} is not available"]})

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id) or Cart.open_for(command.user_id)
        item = cart.add_book(command.book_id, command.quantity)
        repo.add(cart)

        logger.info("Cart item saved", item_id=str(item.id), user_id=str(cart.user_id), quantity=item.quantity)
        return item

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        """Set a line's quantity. Zero removes the line and returns None."""
        cart = _owned_cart(command.user_id)
        item = cart.set_quantity(command.item_id, command.new_quantity)
        current_domain.repository_for(Cart).add(cart)
        return item

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = _owned_cart(command.user_id)
        cart.remove_line(command.item_id)
        current_domain.repository_for(Cart).add(cart)
        logger.info("Cart item removed", item_id=str(command.item_id), user_id=str(cart.user_id))
