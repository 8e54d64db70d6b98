"""
Shared Dependencies for Routers

Catalog and cart store are process-wide singletons; a CartManager is
built per request for the session named by the cart cookie.
"""

import re
import uuid
from typing import Optional

from fastapi import HTTPException, Request, Response

from storefront import config
from storefront.cart import CartManager, CartStore, create_cart_store
from storefront.catalog import CatalogProvider, get_catalog
from storefront.db import RedisKeys
from storefront.errors import CatalogUnavailableError, ERROR_CATALOG_UNAVAILABLE
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)

_SESSION_ID = re.compile(r"^[0-9a-f]{32}$")

_cart_store: Optional[CartStore] = None


def get_cart_store() -> CartStore:
    """Get or create the configured CartStore singleton."""
    global _cart_store
    if _cart_store is None:
        _cart_store = create_cart_store()
    return _cart_store


def set_cart_store(store: Optional[CartStore]) -> None:
    """Replace the CartStore singleton (None resets to the configured one)."""
    global _cart_store
    _cart_store = store


async def get_loaded_catalog() -> CatalogProvider:
    """Catalog with its products loaded; 503 if loading fails."""
    catalog = get_catalog()
    try:
        await catalog.list()
    except CatalogUnavailableError:
        raise HTTPException(status_code=503, detail=catalog.error or ERROR_CATALOG_UNAVAILABLE)
    return catalog


def _session_id(request: Request, response: Response) -> str:
    session_id = request.cookies.get(config.CART_COOKIE_NAME, "")
    if _SESSION_ID.match(session_id):
        return session_id

    session_id = uuid.uuid4().hex
    logger.info(f"New cart session {sanitize_id_for_logging(session_id)}")
    response.set_cookie(
        config.CART_COOKIE_NAME,
        session_id,
        httponly=True,
        samesite="lax",
        max_age=60 * 60 * 24 * 30,
    )
    return session_id


async def get_cart_manager(request: Request, response: Response) -> CartManager:
    """CartManager for this request's session, rehydrated from the store."""
    session_id = _session_id(request, response)
    manager = CartManager(get_cart_store(), key=RedisKeys.cart_key(session_id))
    await manager.load()
    return manager
