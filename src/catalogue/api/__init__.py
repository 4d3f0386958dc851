"""Catalogue domain API package."""

from catalogue.api.routes import book_router

__all__ = ["book_router"]
