"""HTTP error mapping shared by every router.

Protean's handlers cover validation (400), missing records (404) and invalid
state (409). The handlers below add the bookstore's own error kinds and map
an exhausted optimistic-concurrency retry onto a retryable 503.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, TransactionError
from protean.integrations.fastapi import register_exception_handlers

from shared.errors import ConflictError, InsufficientStockError, InternalError

logger = structlog.get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": exc.messages})

    @app.exception_handler(InsufficientStockError)
    async def insufficient_stock_handler(request: Request, exc: InsufficientStockError) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": exc.messages,
                "book_id": str(exc.book_id),
                "available": exc.available,
                "requested": exc.requested,
            },
        )

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"error": exc.messages})

    @app.exception_handler(ExpectedVersionError)
    @app.exception_handler(TransactionError)
    async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Transaction could not be committed", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=503, content={"error": "The change could not be saved, please retry"})


def register_domain_context(app: FastAPI, domain, prefixes: tuple[str, ...]) -> None:
    """Push the domain context for every request under one of ``prefixes``."""

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        if request.url.path.startswith(prefixes):
            with domain.domain_context():
                return await call_next(request)
        # Health check, docs
        return await call_next(request)
