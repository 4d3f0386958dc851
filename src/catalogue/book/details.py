"""Book details update: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Decimal, Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.book.book import Book
from shared.domain import shelfwise
from shared.errors import ConflictError


@shelfwise.command(part_of="Book")
class UpdateBook:
    book_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    description = Text(default="")
    author = String(required=True, max_length=255)
    purchase_price = Decimal(required=True)
    cover = String(max_length=500, default="")
    genre = String(required=True)
    language = String(required=True)


@shelfwise.command_handler(part_of=Book)
class UpdateBookHandler:
    @handle(UpdateBook)
    def update_book(self, command):
        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)
        if not book.is_active:
            raise ValidationError({"book_id": [f"Cannot update deactivated book {book.id}"]})

        identity_changed = command.title.strip() != book.title or command.author.strip() != book.author
        if identity_changed and repo.find_active_by_title_author(command.title, command.author, exclude_id=book.id):
            raise ConflictError(
                {"title": [f"An active book titled '{command.title}' by {command.author} already exists"]}
            )

        book.update(
            title=command.title,
            description=command.description,
            author=command.author,
            purchase_price=command.purchase_price,
            cover=command.cover,
            genre=command.genre,
            language=command.language,
        )
        repo.add(book)
        return book
