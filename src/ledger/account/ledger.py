"""CapitalLedger: credit and debit accounts inside the caller's unit of work.

The ledger never commits: it is always one step of a larger transaction
(order placement, inventory purchase, subscription upgrade). The treasury
account id comes from the domain's ``TREASURY_ACCOUNT_ID`` constant.
"""

from decimal import Decimal

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ledger.account.account import CapitalAccount

logger = structlog.get_logger(__name__)


def treasury_account_id() -> str | None:
    return str(getattr(current_domain, "TREASURY_ACCOUNT_ID", "") or "").strip() or None


class CapitalLedger:
    def __init__(self):
        self.repo = current_domain.repository_for(CapitalAccount)

    def _load(self, account_id: str | None) -> CapitalAccount:
        if not account_id:
            raise ObjectNotFoundError("No treasury account is configured")
        account = self.repo.get_or_none(account_id)
        if account is None:
            raise ObjectNotFoundError(f"Capital account with id {account_id} does not exist")
        return account

    def credit(self, account_id: str | None, amount: Decimal, reason: str) -> CapitalAccount:
        account = self._load(account_id)
        account.credit(amount)
        self.repo.add(account)
        logger.info("Capital credited", account_id=str(account.id), amount=str(amount), reason=reason)
        return account

    def debit(self, account_id: str | None, amount: Decimal, reason: str) -> CapitalAccount:
        account = self._load(account_id)
        account.debit(amount)
        self.repo.add(account)
        logger.info("Capital debited", account_id=str(account.id), amount=str(amount), reason=reason)
        return account

    def balance(self, account_id: str | None) -> Decimal:
        return self._load(account_id).balance
