"""User aggregate: a role-tagged member of the platform.

Clients and administrators share one profile. Only clients carry a
subscription plan; the treasury account an administrator owns lives in the
ledger.
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from shared.domain import shelfwise

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Role(Enum):
    CLIENT = "client"
    ADMIN = "admin"


class SubscriptionPlan(Enum):
    FREE = "freeplan"
    COMMUNITY = "communityplan"


def _normalize_plan(plan: str | None) -> str:
    normalized = (plan or "").strip().lower()
    if normalized not in {p.value for p in SubscriptionPlan}:
        raise ValidationError(
            {"subscription": [f"Invalid subscription '{plan}'. Allowed values are: freeplan, communityplan"]}
        )
    return normalized


@shelfwise.aggregate
class User:
    username = String(required=True, max_length=100, unique=True)
    email = String(required=True, max_length=254)
    display_name = String(required=True, max_length=200)
    phone = String(max_length=30)
    role = String(required=True, max_length=20, choices=Role)
    subscription = String(max_length=30, choices=SubscriptionPlan)
    registered_at = DateTime()

    @invariant.post
    def only_clients_hold_a_subscription(self):
        if self.role == Role.ADMIN.value and self.subscription:
            raise ValidationError({"subscription": ["Administrators cannot hold a subscription plan"]})

    @classmethod
    def register(cls, username, email, display_name, phone=None, role=Role.CLIENT.value, subscription=None):
        from identity.user.events import UserRegistered

        errors = {}
        if not username or not username.strip():
            errors["username"] = ["Username cannot be empty"]
        if not email or not EMAIL_PATTERN.match(email.strip()):
            errors["email"] = [f"Invalid email address '{email}'"]
        if not display_name or not display_name.strip():
            errors["display_name"] = ["Display name cannot be empty"]
        role = (role or "").strip().lower()
        if role not in {r.value for r in Role}:
            errors["role"] = [f"Invalid role '{role}'. Allowed values are: client, admin"]
        if errors:
            raise ValidationError(errors)

        if role == Role.ADMIN.value:
            if subscription:
                raise ValidationError({"subscription": ["Administrators cannot hold a subscription plan"]})
        else:
            subscription = _normalize_plan(subscription or SubscriptionPlan.FREE.value)

        user = cls(
            username=username.strip(),
            email=email.strip(),
            display_name=display_name.strip(),
            phone=phone.strip() if phone else None,
            role=role,
            subscription=subscription if role == Role.CLIENT.value else None,
            registered_at=datetime.now(UTC),
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=user.username,
                role=user.role,
                registered_at=user.registered_at,
            )
        )
        return user

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    def change_subscription(self, plan: str) -> bool:
        """Move the client onto ``plan``.

        Returns True when this is an upgrade onto the community plan, which
        is the transition that is billed.
        """
        from identity.user.events import SubscriptionUpgraded

        if self.is_admin:
            raise ValidationError({"subscription": ["Administrators cannot hold a subscription plan"]})
        plan = _normalize_plan(plan)
        previous = self.subscription
        self.subscription = plan

        upgraded = plan == SubscriptionPlan.COMMUNITY.value and previous != plan
        if upgraded:
            self.raise_(
                SubscriptionUpgraded(
                    user_id=str(self.id),
                    previous_plan=previous or SubscriptionPlan.FREE.value,
                    new_plan=plan,
                    upgraded_at=datetime.now(UTC),
                )
            )
        return upgraded


@shelfwise.repository(part_of=User)
class UserRepository:
    def find_by_username(self, username: str):
        return self.query.filter(username=username.strip()).first
