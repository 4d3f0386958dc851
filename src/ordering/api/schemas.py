"""Pydantic request schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from the
internal commands.
"""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    book_id: str
    user_id: str
    quantity: int = 1


class UpdateCartQuantityRequest(BaseModel):
    new_quantity: int


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class ShippingSchema(BaseModel):
    address: str
    city: str
    district: str
    reference: str = ""


class PlaceOrderRequest(BaseModel):
    user_id: str
    user_email: str
    user_phone: str
    user_full_name: str
    recipient_name: str
    status: str = "pending"
    is_delivery: bool = False
    shipping: ShippingSchema | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "2f1e0c7a-1111-4c2b-9a53-3b7f7c0d9e01",
                    "user_email": "ana@example.com",
                    "user_phone": "987654321",
                    "user_full_name": "Ana Torres",
                    "recipient_name": "Ana Torres",
                    "status": "pending",
                    "is_delivery": True,
                    "shipping": {
                        "address": "Av. Larco 123",
                        "city": "Lima",
                        "district": "Miraflores",
                        "reference": "Blue door",
                    },
                }
            ]
        }
    }


class UpdateOrderStatusRequest(BaseModel):
    status: str
