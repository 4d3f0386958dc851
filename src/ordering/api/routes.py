"""FastAPI routes for the Ordering domain: cart items and orders."""

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddToCartRequest,
    PlaceOrderRequest,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
)
from ordering.cart.cart import CartItem
from ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from ordering.cart.queries import list_cart_items
from ordering.order.fulfillment import PlaceOrder
from ordering.order.order import Order
from ordering.order.queries import get_order, get_order_by_code, list_orders, list_orders_for_user
from ordering.order.status import UpdateOrderStatus


def cart_item_payload(item: CartItem, user_id: str) -> dict:
    return {
        "id": str(item.id),
        "book_id": str(item.book_id),
        "user_id": str(user_id),
        "quantity": item.quantity,
    }


def order_payload(order: Order) -> dict:
    shipping = None
    if order.shipping is not None:
        shipping = {
            "address": order.shipping.address,
            "city": order.shipping.city,
            "district": order.shipping.district,
            "reference": order.shipping.reference,
        }
    return {
        "id": str(order.id),
        "code": order.code,
        "user_id": str(order.user_id),
        "user_email": order.user_email,
        "user_phone": order.user_phone,
        "user_full_name": order.user_full_name,
        "recipient_name": order.recipient_name,
        "is_delivery": order.is_delivery,
        "shipping": shipping,
        "status": order.status,
        "total": str(order.total),
        "placed_at": order.placed_at.isoformat(),
        "items": [
            {
                "book_id": str(item.book_id),
                "book_title": item.book_title,
                "book_author": item.book_author,
                "book_price": str(item.book_price),
                "book_cover": item.book_cover,
                "quantity": item.quantity,
                "item_total": str(item.item_total),
            }
            for item in order.lines
        ],
    }


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart-items", tags=["cart"])


@cart_router.post("", status_code=201)
async def add_cart_item(body: AddToCartRequest):
    item = current_domain.process(
        AddToCart(book_id=body.book_id, user_id=body.user_id, quantity=body.quantity),
        asynchronous=False,
    )
    return JSONResponse(status_code=201, content=cart_item_payload(item, body.user_id))


@cart_router.get("/users/{user_id}")
async def list_user_cart(user_id: str):
    return JSONResponse(content=[cart_item_payload(item, user_id) for item in list_cart_items(user_id)])


@cart_router.put("/{item_id}/users/{user_id}")
async def update_cart_item_quantity(item_id: str, user_id: str, body: UpdateCartQuantityRequest):
    item = current_domain.process(
        UpdateCartQuantity(item_id=item_id, user_id=user_id, new_quantity=body.new_quantity),
        asynchronous=False,
    )
    if item is None:
        return Response(status_code=204)
    return JSONResponse(content=cart_item_payload(item, user_id))


@cart_router.delete("/{item_id}/users/{user_id}", status_code=204)
async def remove_cart_item(item_id: str, user_id: str):
    current_domain.process(RemoveFromCart(item_id=item_id, user_id=user_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201)
async def place_order(body: PlaceOrderRequest):
    """Convert the user's whole cart into an order."""
    order = current_domain.process(PlaceOrder(**body.model_dump()), asynchronous=False)
    return JSONResponse(status_code=201, content=order_payload(order))


@order_router.get("")
async def all_orders():
    return JSONResponse(content=[order_payload(order) for order in list_orders()])


@order_router.get("/code/{code}")
async def order_by_code(code: str):
    return JSONResponse(content=order_payload(get_order_by_code(code)))


@order_router.get("/users/{user_id}")
async def orders_for_user(user_id: str):
    return JSONResponse(content=[order_payload(order) for order in list_orders_for_user(user_id)])


@order_router.get("/{order_id}")
async def read_order(order_id: str):
    return JSONResponse(content=order_payload(get_order(order_id)))


@order_router.put("/{order_id}/status")
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest):
    order = current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return JSONResponse(content=order_payload(order))
