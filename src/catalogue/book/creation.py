"""Book creation: command and handler.

Stocking a new title is an inventory purchase: the treasury account pays
purchase price times initial stock in the same transaction, so a treasury
that cannot cover it leaves no book behind.
"""

import structlog
from protean import handle
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.book import pricing
from catalogue.book.book import Book, normalize_genre
from ledger.account.ledger import CapitalLedger, treasury_account_id
from shared.domain import shelfwise
from shared.errors import ConflictError

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="Book")
class CreateBook:
    title = String(required=True, max_length=255)
    author = String(required=True, max_length=255)
    description = Text(default="")
    stock = Integer(default=0)
    cover = String(max_length=500, default="")
    genre = String(required=True)
    language = String(required=True)


@shelfwise.command_handler(part_of=Book)
class CreateBookHandler:
    @handle(CreateBook)
    def create_book(self, command):
        repo = current_domain.repository_for(Book)
        if repo.find_active_by_title_author(command.title, command.author) is not None:
            raise ConflictError(
                {"title": [f"An active book titled '{command.title}' by {command.author} already exists"]}
            )

        book = Book.create(
            title=command.title,
            author=command.author,
            description=command.description,
            stock=command.stock,
            cover=command.cover,
            genre=command.genre,
            language=command.language,
            purchase_price=pricing.generator.purchase_price(normalize_genre(command.genre)),
        )
        repo.add(book)

        cost = book.purchase_price * book.stock
        if cost > 0:
            CapitalLedger().debit(treasury_account_id(), cost, reason=f"initial stock for book {book.id}")

        logger.info(
            "Book created",
            book_id=str(book.id),
            genre=book.genre,
            purchase_price=str(book.purchase_price),
            sale_price=str(book.sale_price),
            stock=book.stock,
        )
        return book
