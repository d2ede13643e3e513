"""Data-transfer types for backend payloads.

Everything the backend sends is parsed into one of these at the boundary,
so templates and cart logic never touch raw JSON.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def clamp_rating(value: Any) -> int:
    try:
        rating = int(value)
    except (TypeError, ValueError):
        return 1
    return min(max(rating, 1), 5)


def as_text(value: Any) -> str:
    return "" if value is None else str(value)


class Category(BaseModel):
    slug: str
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return as_text(value)


class Review(BaseModel):
    rating: int = 1
    comment: str = ""
    user_name: str = ""

    @field_validator("rating", mode="before")
    @classmethod
    def rating_in_range(cls, value: Any) -> int:
        return clamp_rating(value)

    @field_validator("comment", "user_name", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return as_text(value)


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", alias="_id")
    slug: str
    title: str = ""
    price: Decimal = Decimal("0")
    fragility_rating: int = Field(default=1, description="1 (sturdy) .. 5 (very delicate)")
    description: str = ""
    handling_instructions: Optional[str] = None
    reviews: list[Review] = Field(default_factory=list)

    @field_validator("id", "title", "description", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return as_text(value)

    @field_validator("fragility_rating", mode="before")
    @classmethod
    def rating_in_range(cls, value: Any) -> int:
        return clamp_rating(value)

    @field_validator("price", mode="before")
    @classmethod
    def default_price(cls, value: Any) -> Any:
        return Decimal("0") if value is None else value

    @field_validator("reviews", mode="before")
    @classmethod
    def default_reviews(cls, value: Any) -> Any:
        return value or []

    @property
    def display_price(self) -> str:
        return f"{self.price:.2f}"


class CartItem(BaseModel):
    # The backend may attach more fields per line; keep them for the write-back.
    model_config = ConfigDict(extra="allow")

    product_id: str
    quantity: int = 1

    @field_validator("product_id", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return as_text(value)


class Cart(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    items: list[CartItem] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return as_text(value)

    @field_validator("items", mode="before")
    @classmethod
    def default_items(cls, value: Any) -> Any:
        return value or []

    def items_payload(self) -> list[dict[str, Any]]:
        return [item.model_dump() for item in self.items]


class OrderSummary(BaseModel):
    order_id: str
    amount_total: Any = None

    @field_validator("order_id", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return as_text(value)


class PackagingGuide(BaseModel):
    title: str = ""
    content_md: str = ""

    @field_validator("title", "content_md", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return as_text(value)


class AboutDocument(BaseModel):
    headline: str = ""
    story: str = ""
    badges: list[str] = Field(default_factory=list)

    @field_validator("headline", "story", mode="before")
    @classmethod
    def text_fields(cls, value: Any) -> str:
        return as_text(value)

    @field_validator("badges", mode="before")
    @classmethod
    def badges_as_text(cls, value: Any) -> list[str]:
        return [str(b) for b in value or []]
