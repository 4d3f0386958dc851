"""Inbound event handler: Notifications reacts to User events."""

from protean.utils.mixins import handle

from identity.user.events import SubscriptionUpgraded, UserRegistered
from notifications.notification.notification import Notification, NotificationType
from notifications.notification.ordering_events import deliver
from shared.domain import shelfwise


@shelfwise.event_handler(part_of=Notification, stream_category="shelfwise::user")
class IdentityEventsHandler:
    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        # Administrators get no welcome notice.
        if event.role != "client":
            return
        deliver(str(event.user_id), NotificationType.WELCOME, event.registered_at)

    @handle(SubscriptionUpgraded)
    def on_subscription_upgraded(self, event: SubscriptionUpgraded) -> None:
        deliver(str(event.user_id), NotificationType.PLAN_SUBSCRIBED, event.upgraded_at)
