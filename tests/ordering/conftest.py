import pytest
from protean.utils.globals import current_domain


@pytest.fixture()
def buyer():
    """A registered client with a known contact profile."""
    from identity.user.registration import RegisterUser

    return current_domain.process(
        RegisterUser(
            username="buyer",
            email="buyer@example.com",
            display_name="Buyer One",
            phone="999888777",
        ),
        asynchronous=False,
    )


@pytest.fixture()
def make_book():
    """Factory creating active books through the catalogue."""
    from catalogue.book.creation import CreateBook

    counter = {"n": 0}

    def _make_book(**overrides):
        counter["n"] += 1
        defaults = {
            "title": f"Book {counter['n']}",
            "author": "Author",
            "description": "",
            "stock": 10,
            "cover": f"cover-{counter['n']}.jpg",
            "genre": "fiction",
            "language": "english",
        }
        defaults.update(overrides)
        return current_domain.process(CreateBook(**defaults), asynchronous=False)

    return _make_book


@pytest.fixture()
def add_to_cart(buyer):
    """Put copies of a book in the buyer's cart."""
    from ordering.cart.items import AddToCart

    def _add(book, quantity=1, user_id=None):
        return current_domain.process(
            AddToCart(book_id=book.id, user_id=user_id or buyer.id, quantity=quantity),
            asynchronous=False,
        )

    return _add


@pytest.fixture()
def place_order(buyer):
    """Place an order for the buyer's cart; keyword overrides go to the command."""
    from ordering.order.fulfillment import PlaceOrder

    def _place(**overrides):
        fields = {
            "user_id": buyer.id,
            "user_email": "buyer@example.com",
            "user_phone": "999888777",
            "user_full_name": "Buyer One",
            "recipient_name": "Buyer One",
        }
        fields.update(overrides)
        return current_domain.process(PlaceOrder(**fields), asynchronous=False)

    return _place
