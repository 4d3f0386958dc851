"""Shared BDD fixtures and step definitions for the Ordering domain."""

from decimal import Decimal

import pytest
from catalogue.book import pricing
from catalogue.book.queries import get_book
from ledger.account.ledger import CapitalLedger
from ordering.cart.queries import list_cart_items
from ordering.order.queries import list_orders
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from shared.errors import InsufficientStockError

_ERRORS = {
    "ValidationError": ValidationError,
    "InsufficientStockError": InsufficientStockError,
}


class _ListedPrice:
    """Purchase price that yields the requested sale price after markup."""

    def __init__(self, sale_price):
        self.price = Decimal(sale_price) / pricing.SALE_MARKUP

    def purchase_price(self, genre):
        return self.price


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def books():
    """Books created by Given steps, keyed by their label in the feature."""
    return {}


@pytest.fixture()
def error():
    """Container for the error raised by a When step."""
    return {"exc": None}


@pytest.fixture()
def ledger_before():
    return {"balance": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('book "{label}" has stock {stock:d} and sells at {price}'))
def _(monkeypatch, make_book, books, label, stock, price):
    monkeypatch.setattr(pricing, "generator", _ListedPrice(price))
    books[label] = make_book(title=label, stock=stock)
    assert books[label].sale_price == Decimal(price)


@given(parsers.cfparse('the buyer\'s cart holds {quantity:d} copies of "{label}"'))
def _(add_to_cart, books, label, quantity):
    add_to_cart(books[label], quantity)


@given("the treasury balance is noted")
def _(treasury, ledger_before):
    ledger_before["balance"] = CapitalLedger().balance(str(treasury.id))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the order fails with an {error_type}"))
def _(error, error_type):
    assert error["exc"] is not None, f"Expected {error_type} but nothing was raised"
    assert isinstance(error["exc"], _ERRORS[error_type])


@then(parsers.cfparse("the order fails with a {error_type}"))
def _(error, error_type):
    assert error["exc"] is not None, f"Expected {error_type} but nothing was raised"
    assert isinstance(error["exc"], _ERRORS[error_type])


@then(parsers.cfparse('the stock of "{label}" is {stock:d}'))
def _(books, label, stock):
    assert get_book(books[label].id).stock == stock


@then("no order is created")
def _():
    assert list_orders() == []


@then("the buyer's cart is empty")
def _(buyer):
    assert list_cart_items(buyer.id) == []


@then(parsers.cfparse("the buyer's cart still holds {count:d} line"))
def _(buyer, count):
    assert len(list_cart_items(buyer.id)) == count


@then(parsers.cfparse("the treasury balance grew by {amount}"))
def _(treasury, ledger_before, amount):
    assert CapitalLedger().balance(str(treasury.id)) == ledger_before["balance"] + Decimal(amount)


@then("the treasury balance is unchanged")
def _(treasury, ledger_before):
    assert CapitalLedger().balance(str(treasury.id)) == ledger_before["balance"]
