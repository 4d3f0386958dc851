"""Open a capital account: command and handler."""

import structlog
from protean import handle
from protean.fields import Decimal, Identifier
from protean.utils.globals import current_domain

from ledger.account.account import CapitalAccount
from shared.domain import shelfwise

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="CapitalAccount")
class OpenAccount:
    owner_user_id = Identifier()
    opening_balance = Decimal()


@shelfwise.command_handler(part_of=CapitalAccount)
class OpenAccountHandler:
    @handle(OpenAccount)
    def open_account(self, command):
        opening_balance = command.opening_balance
        if opening_balance is None:
            opening_balance = current_domain.OPENING_CAPITAL

        account = CapitalAccount.open(owner_user_id=command.owner_user_id, opening_balance=opening_balance)
        current_domain.repository_for(CapitalAccount).add(account)

        logger.info("Capital account opened", account_id=str(account.id), balance=str(account.balance))
        return account
