"""FastAPI routes for the Notifications domain.

Thin adapters that translate HTTP requests into commands and queries.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from notifications.api.schemas import InboxActionRequest
from notifications.notification.inbox import HideNotification, MarkNotificationRead
from notifications.notification.notification import Notification
from notifications.notification.queries import list_notifications_for_user

router = APIRouter(prefix="/notifications", tags=["notifications"])


def notification_payload(notification: Notification) -> dict:
    return {
        "id": str(notification.id),
        "user_id": str(notification.user_id),
        "type": notification.type,
        "title": notification.title,
        "content": notification.content,
        "created_at": notification.created_at.isoformat(),
        "is_read": notification.is_read,
        "is_hidden": notification.is_hidden,
    }


@router.get("/users/{user_id}")
async def user_notifications(user_id: str):
    return JSONResponse(content=[notification_payload(n) for n in list_notifications_for_user(user_id)])


@router.patch("/{notification_id}/read")
async def mark_read(notification_id: str, body: InboxActionRequest):
    notification = current_domain.process(
        MarkNotificationRead(notification_id=notification_id, user_id=body.user_id),
        asynchronous=False,
    )
    return JSONResponse(content=notification_payload(notification))


@router.patch("/{notification_id}/hide")
async def hide(notification_id: str, body: InboxActionRequest):
    notification = current_domain.process(
        HideNotification(notification_id=notification_id, user_id=body.user_id),
        asynchronous=False,
    )
    return JSONResponse(content=notification_payload(notification))
