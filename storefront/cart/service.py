"""Cart manager: owns one Cart aggregate and persists it through a CartStore."""
import json
from typing import Optional

from pydantic import ValidationError

from storefront.errors import EmptyCartError, ProductUnavailableError
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.models import Product
from storefront.services.money import money_dict
from .models import Cart, CartTotals
from .storage import CartStore, MemoryCartStore

logger = get_logger(__name__)

DEFAULT_CART_KEY = "cart"

# Anything a damaged or outdated snapshot can raise while being parsed
_SNAPSHOT_ERRORS = (
    json.JSONDecodeError, KeyError, TypeError, ValueError, ValidationError, RecursionError,
)


class CartManager:
    """
    Shopping cart for one session.

    Mutations apply to the in-memory Cart first, then the snapshot is
    written to the store. A failed write is logged and otherwise ignored:
    the caller always gets the new totals.

    Usage:
        manager = CartManager(store, key="cart:abc123")
        await manager.load()
        totals = await manager.add_to_cart(product, 2)
    """

    def __init__(self, store: Optional[CartStore] = None, key: str = DEFAULT_CART_KEY):
        self.store = store if store is not None else MemoryCartStore()
        self.key = key
        self.cart = Cart()

    @property
    def totals(self) -> CartTotals:
        return self.cart.totals

    async def load(self) -> Cart:
        """
        Rehydrate from the stored snapshot.

        A missing snapshot gives an empty cart. An unparseable one is
        logged and discarded, also giving an empty cart.
        """
        data = await self.store.get(self.key)
        if not data:
            self.cart = Cart()
            return self.cart

        try:
            self.cart = Cart.from_dict(json.loads(data))
        except _SNAPSHOT_ERRORS as e:
            logger.warning(
                f"Discarding corrupted cart snapshot {sanitize_string_for_logging(self.key, 16)}: {e}"
            )
            self.cart = Cart()
        return self.cart

    async def save(self) -> None:
        """Write the snapshot. Storage failures are logged, not raised."""
        try:
            if self.cart.is_empty:
                await self.store.delete(self.key)
            else:
                await self.store.set(self.key, json.dumps(self.cart.to_dict()))
        except Exception:
            logger.exception(f"Failed to persist cart {sanitize_string_for_logging(self.key, 16)}")

    async def add_to_cart(self, product: Product, quantity: int = 1) -> CartTotals:
        """
        Add units of a product.

        Raises:
            ProductUnavailableError: product is flagged out of stock.
            InvalidQuantityError: quantity is not a positive integer.
        """
        if not product.in_stock:
            raise ProductUnavailableError(product.id)
        totals = self.cart.add(product, quantity)
        await self.save()
        return totals

    async def remove_from_cart(self, product_id: str) -> CartTotals:
        totals = self.cart.remove(product_id)
        await self.save()
        return totals

    async def update_quantity(self, product_id: str, quantity: int) -> CartTotals:
        """Replace a line's quantity; zero or negative removes it."""
        totals = self.cart.update_quantity(product_id, quantity)
        await self.save()
        return totals

    async def clear_cart(self) -> CartTotals:
        totals = self.cart.clear()
        await self.save()
        return totals

    def is_in_cart(self, product_id: str) -> bool:
        return self.cart.contains(product_id)

    def checkout_summary(self) -> dict:
        """Summary for checkout; raises EmptyCartError when there is nothing to order."""
        if self.cart.is_empty:
            raise EmptyCartError()
        return self.summary()

    def summary(self) -> dict:
        """Cart view for the cart and checkout endpoints."""
        cart = self.cart
        return {
            "is_empty": cart.is_empty,
            "item_count": cart.item_count,
            "items": [
                {
                    "product_id": item.product_id,
                    "slug": item.product.slug,
                    "name": item.product.name,
                    "image": item.product.primary_image,
                    "quantity": item.quantity,
                    "unit_price": money_dict(item.unit_price),
                    "line_total": money_dict(item.line_total),
                }
                for item in cart.items
            ],
            "subtotal": money_dict(cart.subtotal),
            "tax": money_dict(cart.tax),
            "shipping": money_dict(cart.shipping),
            "total": money_dict(cart.total),
        }
