"""Error kinds raised across bounded contexts.

Malformed input raises ``protean.exceptions.ValidationError`` and missing
records raise ``ObjectNotFoundError``. The kinds below complete the set.
"""

from protean.exceptions import ProteanExceptionWithMessage


class ConflictError(ProteanExceptionWithMessage):
    """A uniqueness rule would be broken, e.g. two active books with the same title and author."""


class InsufficientStockError(ProteanExceptionWithMessage):
    """Requested quantity exceeds a book's available stock."""

    def __init__(self, book_id: str, available: int, requested: int):
        self.book_id = book_id
        self.available = available
        self.requested = requested
        super().__init__(
            {"stock": [f"Insufficient stock for book {book_id}. Available: {available}, Requested: {requested}"]}
        )


class InternalError(ProteanExceptionWithMessage):
    """Storage or commit failure. The only kind worth retrying."""
