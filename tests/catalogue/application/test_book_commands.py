"""Application tests for book commands: creation, restocking, updates and lifecycle."""

from decimal import Decimal

import pytest
from catalogue.book.creation import CreateBook
from catalogue.book.details import UpdateBook
from catalogue.book.lifecycle import DeactivateBook, ReactivateBook
from catalogue.book.queries import get_book, list_active_books, list_deactivated_books
from catalogue.book.stock import AddBookStock, SetBookStock
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from shared.domain import shelfwise
from shared.errors import ConflictError


def _create_book(**overrides):
    defaults = {
        "title": "Ficciones",
        "author": "Jorge Luis Borges",
        "description": "Short stories.",
        "stock": 4,
        "cover": "",
        "genre": "fiction",
        "language": "spanish",
    }
    defaults.update(overrides)
    return current_domain.process(CreateBook(**defaults), asynchronous=False)


class TestCreateBookCommand:
    def test_create_book_persists(self):
        book = _create_book()
        stored = get_book(book.id)
        assert stored.title == "Ficciones"
        assert stored.stock == 4
        assert stored.genre == "fiction"

    def test_purchase_price_within_genre_band_and_sale_price_marked_up(self):
        book = _create_book(genre="children")
        assert Decimal("15") <= book.purchase_price <= Decimal("20")
        assert book.sale_price == (book.purchase_price * Decimal("1.65")).quantize(Decimal("0.01"))

    def test_prices_are_stored_as_cent_precision_decimals(self):
        stored = get_book(_create_book().id)
        for price in (stored.purchase_price, stored.sale_price):
            assert isinstance(price, Decimal)
            assert price == price.quantize(Decimal("0.01"))

    def test_treasury_pays_for_initial_stock(self, treasury_balance):
        book = _create_book(stock=3)
        assert treasury_balance() == Decimal("5000.00") - book.purchase_price * 3

    def test_zero_stock_costs_nothing(self, treasury_balance):
        _create_book(stock=0)
        assert treasury_balance() == Decimal("5000.00")

    def test_duplicate_active_title_author_conflicts(self):
        _create_book()
        with pytest.raises(ConflictError):
            _create_book(stock=1)

    def test_same_title_by_another_author_allowed(self):
        _create_book()
        other = _create_book(author="Someone Else")
        assert other.author == "Someone Else"

    def test_invalid_genre_rejected_without_touching_treasury(self, treasury_balance):
        with pytest.raises(ValidationError):
            _create_book(genre="poetry")
        assert treasury_balance() == Decimal("5000.00")

    def test_treasury_that_cannot_pay_rolls_back_creation(self, treasury_balance):
        with pytest.raises(ValidationError) as exc:
            _create_book(stock=1000)
        assert "balance" in exc.value.messages
        assert list_active_books() == []
        assert treasury_balance() == Decimal("5000.00")

    def test_missing_treasury_account_fails(self, monkeypatch):
        monkeypatch.setattr(shelfwise, "TREASURY_ACCOUNT_ID", "missing-account")
        with pytest.raises(ObjectNotFoundError):
            _create_book()
        assert list_active_books() == []


class TestBookStockCommands:
    def test_add_stock_increases_stock_and_debits_treasury(self, treasury_balance):
        book = _create_book(stock=1)
        balance_before = treasury_balance()

        updated = current_domain.process(AddBookStock(book_id=book.id, quantity=4), asynchronous=False)

        assert updated.stock == 5
        assert treasury_balance() == balance_before - book.purchase_price * 4

    def test_add_zero_stock_rejected(self):
        book = _create_book()
        with pytest.raises(ValidationError):
            current_domain.process(AddBookStock(book_id=book.id, quantity=0), asynchronous=False)

    def test_add_stock_to_deactivated_book_rejected(self):
        book = _create_book()
        current_domain.process(DeactivateBook(book_id=book.id), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(AddBookStock(book_id=book.id, quantity=1), asynchronous=False)

    def test_add_stock_to_unknown_book(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(AddBookStock(book_id="nope", quantity=1), asynchronous=False)

    def test_set_stock_moves_no_capital(self, treasury_balance):
        book = _create_book(stock=2)
        balance_before = treasury_balance()
        current_domain.process(SetBookStock(book_id=book.id, stock=9), asynchronous=False)
        assert get_book(book.id).stock == 9
        assert treasury_balance() == balance_before

    def test_set_negative_stock_rejected(self):
        book = _create_book()
        with pytest.raises(ValidationError):
            current_domain.process(SetBookStock(book_id=book.id, stock=-1), asynchronous=False)
        assert get_book(book.id).stock == 4


class TestUpdateBookCommand:
    def _update(self, book_id, **overrides):
        defaults = {
            "book_id": book_id,
            "title": "Ficciones",
            "description": "Revised edition",
            "author": "Jorge Luis Borges",
            "purchase_price": Decimal("22.00"),
            "cover": "",
            "genre": "fiction",
            "language": "spanish",
        }
        defaults.update(overrides)
        return current_domain.process(UpdateBook(**defaults), asynchronous=False)

    def test_update_persists_and_recomputes_sale_price(self):
        book = _create_book()
        self._update(book.id)
        stored = get_book(book.id)
        assert stored.description == "Revised edition"
        assert stored.sale_price == Decimal("36.30")

    def test_update_into_existing_title_author_conflicts(self):
        _create_book(title="El Aleph")
        book = _create_book()
        with pytest.raises(ConflictError):
            self._update(book.id, title="El Aleph")

    def test_update_deactivated_book_rejected(self):
        book = _create_book()
        current_domain.process(DeactivateBook(book_id=book.id), asynchronous=False)
        with pytest.raises(ValidationError):
            self._update(book.id)


class TestBookLifecycleCommands:
    def test_deactivate_moves_book_to_deactivated_list(self):
        book = _create_book()
        current_domain.process(DeactivateBook(book_id=book.id), asynchronous=False)
        assert [b.id for b in list_deactivated_books()] == [book.id]
        assert list_active_books() == []

    def test_deactivated_title_can_be_recreated(self):
        book = _create_book()
        current_domain.process(DeactivateBook(book_id=book.id), asynchronous=False)
        again = _create_book()
        assert again.id != book.id

    def test_reactivate_conflicts_with_active_duplicate(self):
        book = _create_book()
        current_domain.process(DeactivateBook(book_id=book.id), asynchronous=False)
        _create_book()
        with pytest.raises(ConflictError):
            current_domain.process(ReactivateBook(book_id=book.id), asynchronous=False)

    def test_reactivate_active_book_is_noop(self):
        book = _create_book()
        result = current_domain.process(ReactivateBook(book_id=book.id), asynchronous=False)
        assert result.is_active is True

    def test_reactivate(self):
        book = _create_book()
        current_domain.process(DeactivateBook(book_id=book.id), asynchronous=False)
        current_domain.process(ReactivateBook(book_id=book.id), asynchronous=False)
        assert get_book(book.id).is_active is True


def test_unknown_book_lookup():
    with pytest.raises(ObjectNotFoundError):
        get_book("does-not-exist")


def test_each_save_advances_the_version_stamp():
    book = _create_book()
    before = get_book(book.id)._version
    current_domain.process(SetBookStock(book_id=book.id, stock=7), asynchronous=False)
    assert get_book(book.id)._version == before + 1


class TestReadQueries:
    def test_query_results_stay_usable_after_the_read(self):
        book = _create_book(stock=3)

        fetched = get_book(book.id)
        listed = list_active_books()

        assert fetched.stock == 3
        assert fetched.sale_price == book.sale_price
        assert [(b.title, b.stock) for b in listed] == [("Ficciones", 3)]

    def test_deactivated_listing_stays_usable(self):
        book = _create_book()
        current_domain.process(DeactivateBook(book_id=book.id), asynchronous=False)
        (listed,) = list_deactivated_books()
        assert listed.is_active is False
        assert listed.author == "Jorge Luis Borges"
