"""Domain Models - Pydantic models for catalog entities."""
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, field_validator

from storefront.services.money import to_decimal as _to_decimal


class Product(BaseModel):
    """Catalog product. Fixture data, never mutated at runtime."""
    id: str
    slug: str
    name: str
    description: str = ""
    price: Decimal
    images: list[str] = []
    category: str
    in_stock: bool = True
    featured: bool = False
    attributes: Optional[dict[str, str]] = None

    class Config:
        frozen = True
        extra = "ignore"

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("price must not be negative")
        return v

    @property
    def primary_image(self) -> Optional[str]:
        """First image reference, used by cards and cart rows."""
        return self.images[0] if self.images else None
