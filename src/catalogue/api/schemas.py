"""Pydantic request schemas for the Catalogue API.

These are external contracts, kept separate from the internal commands.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class CreateBookRequest(BaseModel):
    title: str
    author: str
    description: str = ""
    stock: int = 0
    cover: str = ""
    genre: str
    language: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Pedro Páramo",
                    "author": "Juan Rulfo",
                    "description": "A son returns to Comala to find his father.",
                    "stock": 10,
                    "cover": "https://covers.example.com/pedro-paramo.jpg",
                    "genre": "literature",
                    "language": "spanish",
                }
            ]
        }
    }


class UpdateBookRequest(BaseModel):
    title: str
    description: str = ""
    author: str
    purchase_price: Decimal = Field(gt=0)
    cover: str = ""
    genre: str
    language: str


class AddStockRequest(BaseModel):
    quantity: int


class SetStockRequest(BaseModel):
    stock: int
