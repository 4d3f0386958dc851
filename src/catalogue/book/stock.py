"""Book restocking: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from catalogue.book.book import Book
from ledger.account.ledger import CapitalLedger, treasury_account_id
from shared.domain import shelfwise

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="Book")
class AddBookStock:
    book_id = Identifier(required=True)
    quantity = Integer(required=True)


@shelfwise.command(part_of="Book")
class SetBookStock:
    book_id = Identifier(required=True)
    stock = Integer(required=True)


@shelfwise.command_handler(part_of=Book)
class ManageBookStockHandler:
    @handle(AddBookStock)
    def add_book_stock(self, command):
        if command.quantity <= 0:
            raise ValidationError({"quantity": ["Quantity to add must be greater than zero"]})

        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)
        if not book.is_active:
            raise ValidationError({"book_id": [f"Cannot add stock to deactivated book {book.id}"]})

        book.add_stock(command.quantity)
        repo.add(book)
        CapitalLedger().debit(
            treasury_account_id(),
            book.purchase_price * command.quantity,
            reason=f"restock of book {book.id}",
        )

        logger.info("Book restocked", book_id=str(book.id), added=command.quantity, stock=book.stock)
        return book

    @handle(SetBookStock)
    def set_book_stock(self, command):
        """Stock-take correction. No capital moves."""
        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)
        book.set_stock(command.stock)
        repo.add(book)

        logger.info("Book stock set", book_id=str(book.id), stock=book.stock)
        return book
