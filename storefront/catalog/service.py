"""
Catalog Provider

Serves the fixed product dataset. Loading simulates fetch latency so
views can render a loading state; after the first load every lookup
and filter is a pure function over the loaded list.
"""

import asyncio
from typing import Callable, List, Optional

from storefront import config
from storefront.catalog.fixtures import PRODUCTS
from storefront.errors import (
    ERROR_CATALOG_UNAVAILABLE,
    CatalogNotLoadedError,
    CatalogUnavailableError,
)
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.models import Product

logger = get_logger(__name__)


def _fixture_loader() -> List[dict]:
    return PRODUCTS


class CatalogProvider:
    """
    Read-only product catalog.

    Usage:
        catalog = CatalogProvider()
        products = await catalog.list()
        lamp = catalog.find_by_slug("desk-lamp")
    """

    def __init__(
        self,
        loader: Callable[[], List[dict]] = _fixture_loader,
        delay_ms: Optional[int] = None,
    ):
        self._loader = loader
        self._delay_s = (config.CATALOG_DELAY_MS if delay_ms is None else delay_ms) / 1000
        self._products: Optional[List[Product]] = None
        self.loading = False
        self.error: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self._products is not None

    @property
    def products(self) -> List[Product]:
        """Loaded products; raises CatalogNotLoadedError before list() ran."""
        if self._products is None:
            raise CatalogNotLoadedError()
        return self._products

    async def list(self) -> List[Product]:
        """
        Return the full product list, loading it on first call.

        Raises:
            CatalogUnavailableError: If the loader fails. The message is
                kept in ``error`` for views to render a fallback.
        """
        if self._products is not None:
            return self._products

        self.loading = True
        self.error = None
        try:
            if self._delay_s > 0:
                await asyncio.sleep(self._delay_s)
            raw = self._loader()
            self._products = [Product.model_validate(item) for item in raw]
        except Exception as e:
            self.error = f"{ERROR_CATALOG_UNAVAILABLE}: {e}"
            logger.error(f"Failed to load catalog: {e}")
            raise CatalogUnavailableError(self.error) from e
        finally:
            self.loading = False

        logger.debug(f"Catalog loaded with {len(self._products)} products")
        return self._products

    def find_by_slug(self, slug: str) -> Optional[Product]:
        """Product with the given slug, or None."""
        product = next((p for p in self.products if p.slug == slug), None)
        if product is None:
            logger.debug(f"No product for slug {sanitize_string_for_logging(slug)}")
        return product

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Product with the given id, or None."""
        return next((p for p in self.products if p.id == product_id), None)

    def filter_by_category(self, category: str) -> List[Product]:
        """Products in the category, compared case-insensitively."""
        wanted = category.strip().casefold()
        return [p for p in self.products if p.category.casefold() == wanted]

    def filter_featured(self) -> List[Product]:
        return [p for p in self.products if p.featured]

    def categories(self) -> List[str]:
        """Distinct category labels in fixture order."""
        seen: List[str] = []
        for product in self.products:
            if product.category not in seen:
                seen.append(product.category)
        return seen

    def related(self, product: Product, limit: int = 4) -> List[Product]:
        """Other products from the same category, for the detail view."""
        return [
            p for p in self.products
            if p.category == product.category and p.id != product.id
        ][:limit]


# Singleton instance
_catalog: Optional[CatalogProvider] = None


def get_catalog() -> CatalogProvider:
    """Get CatalogProvider singleton."""
    global _catalog
    if _catalog is None:
        _catalog = CatalogProvider()
    return _catalog
