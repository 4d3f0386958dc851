"""Shelfwise domain composition root.

Catalogue, identity, ledger, ordering and notifications are registered on a
single domain. Placing an order touches books, the buyer's cart, the new
order and the treasury account in one unit of work, and a unit of work is
bound to one domain.

Configuration lives in ``domain.toml`` next to this module. ``PROTEAN_ENV``
selects an overlay section (``test`` in the test suite).
"""

import importlib

from protean.domain import Domain

shelfwise = Domain(name="shelfwise")

# Modules that register aggregates, entities, events, commands and handlers.
ELEMENT_MODULES = (
    "catalogue.book.book",
    "catalogue.book.creation",
    "catalogue.book.details",
    "catalogue.book.lifecycle",
    "catalogue.book.stock",
    "identity.user.user",
    "identity.user.events",
    "identity.user.registration",
    "identity.user.subscription",
    "ledger.account.account",
    "ledger.account.opening",
    "ordering.cart.cart",
    "ordering.cart.items",
    "ordering.order.order",
    "ordering.order.events",
    "ordering.order.fulfillment",
    "ordering.order.status",
    "notifications.notification.notification",
    "notifications.notification.inbox",
    "notifications.notification.ordering_events",
    "notifications.notification.identity_events",
)


def load_elements() -> None:
    """Import every element module so the domain registry is complete before ``init``."""
    for module in ELEMENT_MODULES:
        importlib.import_module(module)
