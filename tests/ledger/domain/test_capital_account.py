"""Domain tests for the CapitalAccount aggregate."""

from decimal import Decimal

import pytest
from ledger.account.account import CapitalAccount
from protean.exceptions import ValidationError


class TestCapitalAccount:
    def test_open_with_balance(self):
        account = CapitalAccount.open(owner_user_id="admin-1", opening_balance="5000")
        assert account.balance == Decimal("5000.00")

    def test_open_with_negative_balance_rejected(self):
        with pytest.raises(ValidationError):
            CapitalAccount.open(opening_balance=Decimal("-1"))

    def test_credit(self):
        account = CapitalAccount.open(opening_balance=Decimal("10.00"))
        account.credit(Decimal("5.55"))
        assert account.balance == Decimal("15.55")

    def test_credit_zero_is_allowed(self):
        account = CapitalAccount.open(opening_balance=Decimal("10.00"))
        account.credit(Decimal("0"))
        assert account.balance == Decimal("10.00")

    def test_negative_credit_rejected(self):
        account = CapitalAccount.open(opening_balance=Decimal("10.00"))
        with pytest.raises(ValidationError):
            account.credit(Decimal("-1"))

    def test_debit(self):
        account = CapitalAccount.open(opening_balance=Decimal("10.00"))
        account.debit(Decimal("10.00"))
        assert account.balance == Decimal("0.00")

    def test_overdraw_rejected(self):
        account = CapitalAccount.open(opening_balance=Decimal("10.00"))
        with pytest.raises(ValidationError) as exc:
            account.debit(Decimal("10.01"))
        assert "balance" in exc.value.messages
        assert account.balance == Decimal("10.00")

    def test_negative_debit_rejected(self):
        account = CapitalAccount.open(opening_balance=Decimal("10.00"))
        with pytest.raises(ValidationError):
            account.debit(Decimal("-3"))
