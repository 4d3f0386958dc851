"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from shared.domain import shelfwise


@shelfwise.event(part_of="User")
class UserRegistered:
    """A client or administrator joined the platform."""

    __version__ = 1

    user_id = Identifier(required=True)
    username = String(required=True)
    role = String(required=True)
    registered_at = DateTime(required=True)


@shelfwise.event(part_of="User")
class SubscriptionUpgraded:
    """A client moved onto the billed community plan."""

    __version__ = 1

    user_id = Identifier(required=True)
    previous_plan = String(required=True)
    new_plan = String(required=True)
    upgraded_at = DateTime(required=True)
