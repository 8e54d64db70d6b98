"""
Storefront API Pydantic Models

Request bodies shared by the cart and checkout routers.
"""
from pydantic import BaseModel, field_validator


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    quantity: int  # 0 or less removes the line


# ==================== CHECKOUT MODELS ====================

class CheckoutRequest(BaseModel):
    full_name: str
    email: str
    address: str
    city: str
    postal_code: str
    country: str = "US"

    @field_validator("full_name", "address", "city", "postal_code", "country")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def looks_like_email(cls, v: str) -> str:
        v = v.strip()
        local, _, domain = v.partition("@")
        if not local or "." not in domain or domain.startswith(".") or domain.endswith("."):
            raise ValueError("must be a valid email address")
        return v
