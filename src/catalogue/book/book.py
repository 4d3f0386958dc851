"""Book aggregate: a catalogued title with stock and prices.

Stock only moves through ``add_stock``, ``decrease_stock`` and ``set_stock``.
Deactivated books stay in storage (soft delete) so existing orders keep
their references.
"""

from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Decimal, Integer, String, Text

from catalogue.book.pricing import sale_price_for
from shared.domain import shelfwise
from shared.errors import InsufficientStockError
from shared.money import to_money


class Genre(Enum):
    LITERATURE = "literature"
    NON_FICTION = "non_fiction"
    FICTION = "fiction"
    MANGAS_COMICS = "mangas_comics"
    JUVENILE = "juvenile"
    CHILDREN = "children"
    EBOOKS_AUDIOBOOKS = "ebooks_audiobooks"


class Language(Enum):
    ENGLISH = "english"
    SPANISH = "spanish"


def _normalize_choice(value: str | None, enum_cls: type[Enum], field: str) -> str:
    normalized = (value or "").strip().lower()
    allowed = [member.value for member in enum_cls]
    if normalized not in allowed:
        raise ValidationError({field: [f"Invalid {field} '{value}'. Allowed values are: {', '.join(allowed)}"]})
    return normalized


def normalize_genre(value: str | None) -> str:
    return _normalize_choice(value, Genre, "genre")


def normalize_language(value: str | None) -> str:
    return _normalize_choice(value, Language, "language")


def _require_text(field: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationError({field: [f"{field.capitalize()} cannot be empty"]})
    return value.strip()


@shelfwise.aggregate
class Book:
    title = String(required=True, max_length=255)
    author = String(required=True, max_length=255)
    description = Text(default="")
    cover = String(max_length=500, default="")
    stock = Integer(default=0, min_value=0)
    purchase_price = Decimal(required=True, precision=12, scale=2)
    sale_price = Decimal(required=True, precision=12, scale=2)
    genre = String(required=True, max_length=50, choices=Genre)
    language = String(required=True, max_length=20, choices=Language)
    is_active = Boolean(default=True)

    @invariant.post
    def sale_price_must_follow_purchase_price(self):
        if self.purchase_price is None:
            return
        if self.purchase_price <= 0:
            raise ValidationError({"purchase_price": ["Purchase price must be greater than zero"]})
        if self.sale_price != sale_price_for(self.purchase_price):
            raise ValidationError({"sale_price": ["Sale price must be the purchase price times the markup"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, title, author, description, stock, cover, genre, language, purchase_price):
        genre = normalize_genre(genre)
        language = normalize_language(language)
        if stock is None or stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})
        purchase_price = to_money(purchase_price, "purchase_price")

        return cls(
            title=_require_text("title", title),
            author=_require_text("author", author),
            description=description or "",
            cover=cover or "",
            stock=stock,
            genre=genre,
            language=language,
            purchase_price=purchase_price,
            sale_price=sale_price_for(purchase_price),
            is_active=True,
        )

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def add_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError({"quantity": ["Quantity to add cannot be negative"]})
        self.stock += quantity

    def decrease_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError({"quantity": ["Quantity to decrease cannot be negative"]})
        if self.stock < quantity:
            raise InsufficientStockError(book_id=str(self.id), available=self.stock, requested=quantity)
        self.stock -= quantity

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})
        self.stock = quantity

    # -------------------------------------------------------------------
    # Details
    # -------------------------------------------------------------------
    def update(self, title, description, author, purchase_price, cover, genre, language) -> None:
        """Replace editable details. Sale price follows the new purchase price."""
        genre = normalize_genre(genre)
        language = normalize_language(language)
        title = _require_text("title", title)
        author = _require_text("author", author)
        purchase_price = to_money(purchase_price, "purchase_price")
        if purchase_price <= 0:
            raise ValidationError({"purchase_price": ["Purchase price must be greater than zero"]})

        with atomic_change(self):
            self.title = title
            self.author = author
            self.description = description or ""
            self.cover = cover or ""
            self.genre = genre
            self.language = language
            self.purchase_price = purchase_price
            self.sale_price = sale_price_for(purchase_price)

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def deactivate(self) -> None:
        self.is_active = False

    def reactivate(self) -> None:
        self.is_active = True


@shelfwise.repository(part_of=Book)
class BookRepository:
    def find_active_by_title_author(self, title: str, author: str, exclude_id: str | None = None):
        query = self.query.filter(title=title.strip(), author=author.strip(), is_active=True)
        if exclude_id is not None:
            query = query.exclude(id=exclude_id)
        return query.first

    def list_active(self) -> list:
        return self.query.filter(is_active=True).order_by("title").limit(None).all().items

    def list_inactive(self) -> list:
        return self.query.filter(is_active=False).order_by("title").limit(None).all().items
