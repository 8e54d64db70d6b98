"""Storefront view routers, combined into one router."""

from fastapi import APIRouter

from .cart import router as cart_router
from .checkout import router as checkout_router
from .pages import router as pages_router
from .products import router as products_router

router = APIRouter()

router.include_router(pages_router)
router.include_router(products_router)
router.include_router(cart_router)
router.include_router(checkout_router)

__all__ = ["router"]
