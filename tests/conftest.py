import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_configure(config):
    # The domain reads its config overlay when shared.domain is first imported.
    os.environ["PROTEAN_ENV"] = config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def shelfwise_bed():
    from shared.domain import load_elements, shelfwise

    load_elements()
    bed = DomainFixture(shelfwise)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shelfwise_bed):
    from notifications.channel import reset_sink

    with shelfwise_bed.domain_context():
        yield
    reset_sink()


@pytest.fixture(autouse=True)
def pinned_prices(monkeypatch):
    """Seeded purchase prices, so catalogue costs are reproducible."""
    from catalogue.book import pricing

    monkeypatch.setattr(pricing, "generator", pricing.PriceGenerator(seed=1234))


@pytest.fixture(autouse=True)
def treasury(_ctx, monkeypatch):
    """Open the treasury account with the default capital and point the domain at it."""
    from ledger.account.opening import OpenAccount
    from protean.utils.globals import current_domain
    from shared.domain import shelfwise

    account = current_domain.process(OpenAccount(), asynchronous=False)
    monkeypatch.setattr(shelfwise, "TREASURY_ACCOUNT_ID", str(account.id))
    return account


@pytest.fixture()
def sink(monkeypatch):
    """Route notifications to an in-memory sink."""
    from notifications.channel import get_sink, reset_sink
    from shared.domain import shelfwise

    monkeypatch.setattr(shelfwise, "NOTIFICATION_SINK", "fake")
    reset_sink()
    return get_sink()


@pytest.fixture()
def treasury_balance(treasury):
    """Callable returning the current treasury balance."""
    from ledger.account.ledger import CapitalLedger

    def _balance():
        return CapitalLedger().balance(str(treasury.id))

    return _balance


@pytest.fixture()
def api_client():
    """Build a TestClient over the given routers, wired the way the app wires them."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from shared.api import register_domain_context, register_error_handlers
    from shared.domain import shelfwise

    def _client(*routers):
        app = FastAPI()
        register_domain_context(app, shelfwise, tuple(router.prefix for router in routers))
        register_error_handlers(app)
        for router in routers:
            app.include_router(router)
        return TestClient(app)

    return _client
