"""Book lifecycle management: commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from catalogue.book.book import Book
from shared.domain import shelfwise
from shared.errors import ConflictError

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="Book")
class DeactivateBook:
    book_id = Identifier(required=True)


@shelfwise.command(part_of="Book")
class ReactivateBook:
    book_id = Identifier(required=True)


@shelfwise.command_handler(part_of=Book)
class ManageBookLifecycleHandler:
    @handle(DeactivateBook)
    def deactivate_book(self, command):
        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)
        book.deactivate()
        repo.add(book)

        logger.info("Book deactivated", book_id=str(book.id))
        return book

    @handle(ReactivateBook)
    def reactivate_book(self, command):
        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)
        if book.is_active:
            return book

        if repo.find_active_by_title_author(book.title, book.author, exclude_id=book.id):
            raise ConflictError(
                {"title": [f"Another active book titled '{book.title}' by {book.author} already exists"]}
            )
        book.reactivate()
        repo.add(book)

        logger.info("Book reactivated", book_id=str(book.id))
        return book
