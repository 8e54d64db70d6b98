"""
Products Router

Product listing (optionally by category) and product detail by slug.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.cart import CartManager
from storefront.catalog import CatalogProvider
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from .deps import get_cart_manager, get_loaded_catalog
from .helpers import product_card, product_detail

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
async def list_products(
    category: Optional[str] = Query(None, description="Category label, case-insensitive"),
    catalog: CatalogProvider = Depends(get_loaded_catalog),
):
    """All products, or those in one category."""
    products = catalog.filter_by_category(category) if category else catalog.products
    return {
        "category": category,
        "categories": catalog.categories(),
        "count": len(products),
        "products": [product_card(p) for p in products],
    }


@router.get("/{slug}")
async def get_product(
    slug: str,
    catalog: CatalogProvider = Depends(get_loaded_catalog),
    cart: CartManager = Depends(get_cart_manager),
):
    """Product detail with related products from the same category."""
    product = catalog.find_by_slug(slug)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    return {
        "product": product_detail(product, in_cart=cart.is_in_cart(product.id)),
        "related": [product_card(p) for p in catalog.related(product)],
    }
