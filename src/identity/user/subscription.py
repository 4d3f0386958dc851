"""Subscription plan changes: command and handler.

Upgrading a client to the community plan is billed: the treasury account is
credited with the plan fee in the same transaction as the plan change.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from identity.user.user import User
from ledger.account.ledger import CapitalLedger, treasury_account_id
from shared.domain import shelfwise

logger = structlog.get_logger(__name__)


@shelfwise.command(part_of="User")
class ChangeSubscription:
    user_id = Identifier(required=True)
    plan = String(required=True)


@shelfwise.command_handler(part_of=User)
class ChangeSubscriptionHandler:
    @handle(ChangeSubscription)
    def change_subscription(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        upgraded = user.change_subscription(command.plan)
        repo.add(user)

        if upgraded:
            CapitalLedger().credit(
                treasury_account_id(),
                current_domain.COMMUNITY_PLAN_FEE,
                reason=f"community plan for user {user.id}",
            )

        logger.info("Subscription changed", user_id=str(user.id), plan=user.subscription, billed=upgraded)
        return user
