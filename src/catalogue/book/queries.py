"""Read-side access to the catalogue."""

from protean.utils.globals import current_domain

from catalogue.book.book import Book


def get_book(book_id: str) -> Book:
    return current_domain.repository_for(Book).get(book_id)


def list_active_books() -> list[Book]:
    return current_domain.repository_for(Book).list_active()


def list_deactivated_books() -> list[Book]:
    return current_domain.repository_for(Book).list_inactive()
