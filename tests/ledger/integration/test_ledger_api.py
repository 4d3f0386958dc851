"""Integration tests for Ledger API endpoints via TestClient."""

import pytest
from ledger.api import router


@pytest.fixture()
def client(api_client):
    return api_client(router)


def test_open_and_read_account(client):
    response = client.post("/ledger/accounts", json={"owner_user_id": "admin-9", "opening_balance": "250.00"})
    assert response.status_code == 201
    account_id = response.json()["id"]
    assert response.json()["balance"] == "250.00"

    response = client.get(f"/ledger/accounts/{account_id}")
    assert response.status_code == 200
    assert response.json() == {"id": account_id, "balance": "250.00"}


def test_read_treasury(client, treasury):
    response = client.get(f"/ledger/accounts/{treasury.id}")
    assert response.json()["balance"] == "5000.00"


def test_negative_opening_balance_returns_400(client):
    response = client.post("/ledger/accounts", json={"opening_balance": "-1"})
    assert response.status_code == 400
    assert "opening_balance" in response.json()["error"]


def test_unknown_account_returns_404(client):
    response = client.get("/ledger/accounts/missing")
    assert response.status_code == 404
    assert "missing" in response.json()["error"]
