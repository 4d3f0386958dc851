"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from identity.user.directory import get_user
from identity.user.registration import RegisterUser
from identity.user.subscription import ChangeSubscription
from identity.user.user import User

router = APIRouter(prefix="/users", tags=["users"])


def user_payload(user: User) -> dict:
    return {
        "id": str(user.id),
        "username": user.username,
        "email": user.email,
        "display_name": user.display_name,
        "phone": user.phone,
        "role": user.role,
        "subscription": user.subscription,
        "registered_at": user.registered_at.isoformat() if user.registered_at else None,
    }


@router.post("", status_code=201)
async def register_user(request: Request):
    payload = await request.json()
    command = RegisterUser(
        username=payload.get("username"),
        email=payload.get("email"),
        display_name=payload.get("display_name"),
        phone=payload.get("phone"),
        role=payload.get("role", "client"),
        subscription=payload.get("subscription"),
    )
    user = current_domain.process(command, asynchronous=False)
    return JSONResponse(status_code=201, content=user_payload(user))


@router.get("/{user_id}")
async def read_user(user_id: str):
    return JSONResponse(content=user_payload(get_user(user_id)))


@router.put("/{user_id}/subscription")
async def change_subscription(user_id: str, request: Request):
    payload = await request.json()
    user = current_domain.process(ChangeSubscription(user_id=user_id, plan=payload.get("plan")), asynchronous=False)
    return JSONResponse(content=user_payload(user))
