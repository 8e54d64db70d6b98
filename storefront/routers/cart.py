"""
Cart Router

Reads and mutates the session cart. Every mutation responds with the
full cart view so the client never recomputes totals itself.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import CartManager
from storefront.catalog import CatalogProvider
from storefront.errors import (
    ERROR_PRODUCT_NOT_FOUND,
    InvalidQuantityError,
    ProductUnavailableError,
)
from storefront.logging import get_logger, sanitize_string_for_logging
from .deps import get_cart_manager, get_loaded_catalog
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("")
async def get_cart(cart: CartManager = Depends(get_cart_manager)):
    return cart.summary()


@router.post("/items")
async def add_to_cart(
    request: AddToCartRequest,
    catalog: CatalogProvider = Depends(get_loaded_catalog),
    cart: CartManager = Depends(get_cart_manager),
):
    """Add a product; repeated adds accumulate on one line."""
    product = catalog.find_by_id(request.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    try:
        await cart.add_to_cart(product, request.quantity)
    except ProductUnavailableError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidQuantityError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.debug(
        f"Added {request.quantity} x {sanitize_string_for_logging(product.slug)} to cart"
    )
    return cart.summary()


@router.patch("/items/{product_id}")
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    cart: CartManager = Depends(get_cart_manager),
):
    """Set a line's quantity; 0 or less removes it."""
    await cart.update_quantity(product_id, request.quantity)
    return cart.summary()


@router.delete("/items/{product_id}")
async def remove_cart_item(
    product_id: str,
    cart: CartManager = Depends(get_cart_manager),
):
    await cart.remove_from_cart(product_id)
    return cart.summary()


@router.delete("")
async def clear_cart(cart: CartManager = Depends(get_cart_manager)):
    await cart.clear_cart()
    return cart.summary()
