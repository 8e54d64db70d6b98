"""Cart package: aggregate models, pricing, storage, and manager."""
from .models import Cart, CartLineItem, CartTotals
from .service import CartManager
from .storage import CartStore, FileCartStore, MemoryCartStore, RedisCartStore, create_cart_store

__all__ = [
    "Cart",
    "CartLineItem",
    "CartTotals",
    "CartManager",
    "CartStore",
    "FileCartStore",
    "MemoryCartStore",
    "RedisCartStore",
    "create_cart_store",
]
