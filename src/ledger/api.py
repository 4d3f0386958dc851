"""FastAPI endpoints for the Ledger domain."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from ledger.account.ledger import CapitalLedger
from ledger.account.opening import OpenAccount

router = APIRouter(prefix="/ledger", tags=["ledger"])


@router.post("/accounts", status_code=201)
async def open_account(request: Request):
    payload = await request.json()
    account = current_domain.process(
        OpenAccount(
            owner_user_id=payload.get("owner_user_id"),
            opening_balance=payload.get("opening_balance"),
        ),
        asynchronous=False,
    )
    return JSONResponse(
        status_code=201,
        content={
            "id": str(account.id),
            "owner_user_id": str(account.owner_user_id) if account.owner_user_id else None,
            "balance": str(account.balance),
        },
    )


@router.get("/accounts/{account_id}")
async def read_account(account_id: str):
    return JSONResponse(content={"id": account_id, "balance": str(CapitalLedger().balance(account_id))})
