"""FastAPI routes for the Catalogue domain: books."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from catalogue.api.schemas import AddStockRequest, CreateBookRequest, SetStockRequest, UpdateBookRequest
from catalogue.book.book import Book
from catalogue.book.creation import CreateBook
from catalogue.book.details import UpdateBook
from catalogue.book.lifecycle import DeactivateBook, ReactivateBook
from catalogue.book.queries import get_book, list_active_books, list_deactivated_books
from catalogue.book.stock import AddBookStock, SetBookStock

book_router = APIRouter(prefix="/books", tags=["books"])


def book_payload(book: Book) -> dict:
    return {
        "id": str(book.id),
        "title": book.title,
        "author": book.author,
        "description": book.description,
        "stock": book.stock,
        "cover": book.cover,
        "purchase_price": str(book.purchase_price),
        "sale_price": str(book.sale_price),
        "genre": book.genre,
        "language": book.language,
        "is_active": book.is_active,
    }


@book_router.post("", status_code=201)
async def create_book(body: CreateBookRequest):
    book = current_domain.process(CreateBook(**body.model_dump()), asynchronous=False)
    return JSONResponse(status_code=201, content=book_payload(book))


@book_router.get("")
async def list_books():
    return JSONResponse(content=[book_payload(book) for book in list_active_books()])


@book_router.get("/deactivated")
async def list_deactivated():
    return JSONResponse(content=[book_payload(book) for book in list_deactivated_books()])


@book_router.get("/{book_id}")
async def read_book(book_id: str):
    return JSONResponse(content=book_payload(get_book(book_id)))


@book_router.put("/{book_id}")
async def update_book(book_id: str, body: UpdateBookRequest):
    book = current_domain.process(UpdateBook(book_id=book_id, **body.model_dump()), asynchronous=False)
    return JSONResponse(content=book_payload(book))


@book_router.post("/{book_id}/stock")
async def add_stock(book_id: str, body: AddStockRequest):
    book = current_domain.process(AddBookStock(book_id=book_id, quantity=body.quantity), asynchronous=False)
    return JSONResponse(content=book_payload(book))


@book_router.put("/{book_id}/stock")
async def set_stock(book_id: str, body: SetStockRequest):
    book = current_domain.process(SetBookStock(book_id=book_id, stock=body.stock), asynchronous=False)
    return JSONResponse(content=book_payload(book))


@book_router.patch("/{book_id}/deactivate")
async def deactivate_book(book_id: str):
    book = current_domain.process(DeactivateBook(book_id=book_id), asynchronous=False)
    return JSONResponse(content=book_payload(book))


@book_router.patch("/{book_id}/reactivate")
async def reactivate_book(book_id: str):
    book = current_domain.process(ReactivateBook(book_id=book_id), asynchronous=False)
    return JSONResponse(content=book_payload(book))
