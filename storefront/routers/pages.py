"""
Pages Router

Home and static content pages.
"""
from fastapi import APIRouter, Depends

from storefront.cart import CartManager
from storefront.catalog import CatalogProvider
from .deps import get_cart_manager, get_loaded_catalog
from .helpers import cart_badge, product_card

router = APIRouter(tags=["pages"])

ABOUT_CONTENT = {
    "title": "About Us",
    "body": (
        "We are a small team curating everyday goods we use ourselves: "
        "electronics, accessories, home essentials and apparel."
    ),
}

CONTACT_CONTENT = {
    "title": "Contact",
    "email": "support@storefront.example",
    "phone": "+1 (555) 010-0199",
    "address": "100 Market Street, San Francisco, CA 94105",
    "hours": "Mon-Fri 9:00-17:00 PT",
}


@router.get("/")
async def home(
    catalog: CatalogProvider = Depends(get_loaded_catalog),
    cart: CartManager = Depends(get_cart_manager),
):
    """Featured products and category navigation."""
    return {
        "featured": [product_card(p) for p in catalog.filter_featured()],
        "categories": catalog.categories(),
        "cart": cart_badge(cart),
    }


@router.get("/about")
async def about():
    return ABOUT_CONTENT


@router.get("/contact")
async def contact():
    return CONTACT_CONTENT
