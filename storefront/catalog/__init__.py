"""Catalog package: fixture data and the provider facade."""
from .service import CatalogProvider, get_catalog

__all__ = [
    "CatalogProvider",
    "get_catalog",
]
