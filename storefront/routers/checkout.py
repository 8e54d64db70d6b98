"""
Checkout Router

Shows the order summary and accepts the contact/shipping form. There is
no payment step: placing an order returns a confirmation carrying the
totals snapshot and empties the cart.
"""
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import CartManager
from storefront.errors import EmptyCartError
from storefront.logging import get_logger
from .deps import get_cart_manager
from .models import CheckoutRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.get("")
async def get_checkout(cart: CartManager = Depends(get_cart_manager)):
    try:
        return cart.checkout_summary()
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("")
async def place_order(
    request: CheckoutRequest,
    cart: CartManager = Depends(get_cart_manager),
):
    """Confirm the order and clear the cart."""
    try:
        summary = cart.checkout_summary()
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))

    order_number = f"ORD-{uuid.uuid4().hex[:8].upper()}"
    await cart.clear_cart()

    logger.info(f"Order {order_number} placed: {summary['item_count']} items, {summary['total']['amount']}")
    return {
        "order_number": order_number,
        "placed_at": datetime.now(timezone.utc).isoformat(),
        "shipping_to": request.model_dump(exclude={"email"}),
        "email": request.email,
        "items": summary["items"],
        "subtotal": summary["subtotal"],
        "tax": summary["tax"],
        "shipping": summary["shipping"],
        "total": summary["total"],
    }
