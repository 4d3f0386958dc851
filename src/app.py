"""Shelfwise FastAPI application.

Single web server for every bounded context. Commands are processed
synchronously inside the request; each request runs in the shelfwise
domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from shared/domain.toml.
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.domain import load_elements, shelfwise

load_elements()
shelfwise.init(traverse=False)

DOMAIN_ROUTES = ("/books", "/users", "/cart-items", "/orders", "/ledger", "/notifications")


def create_app() -> FastAPI:
    from catalogue.api import book_router
    from identity.api import router as identity_router
    from ledger.api import router as ledger_router
    from notifications.api.routes import router as notifications_router
    from ordering.api import cart_router, order_router
    from shared.api import register_domain_context, register_error_handlers

    shelfwise.configure_logging()

    application = FastAPI(
        title="Shelfwise API",
        description="Bookstore commerce: catalogue, carts, orders and the capital ledger",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_domain_context(application, shelfwise, DOMAIN_ROUTES)
    register_error_handlers(application)

    application.include_router(identity_router)
    application.include_router(book_router)
    application.include_router(cart_router)
    application.include_router(order_router)
    application.include_router(ledger_router)
    application.include_router(notifications_router)

    @application.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "domain": shelfwise.name,
                "contexts": ["catalogue", "identity", "ledger", "notifications", "ordering"],
            }
        )

    return application


app = create_app()
