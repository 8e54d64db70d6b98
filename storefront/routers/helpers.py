"""Response shaping shared by the view routers."""
from storefront.cart import CartManager
from storefront.services.models import Product
from storefront.services.money import money_dict


def product_card(product: Product) -> dict:
    """Compact product view for lists and grids."""
    return {
        "id": product.id,
        "slug": product.slug,
        "name": product.name,
        "price": money_dict(product.price),
        "image": product.primary_image,
        "category": product.category,
        "in_stock": product.in_stock,
        "featured": product.featured,
    }


def product_detail(product: Product, in_cart: bool = False) -> dict:
    """Full product view for the detail page."""
    return {
        **product_card(product),
        "description": product.description,
        "images": list(product.images),
        "attributes": dict(product.attributes or {}),
        "in_cart": in_cart,
    }


def cart_badge(manager: CartManager) -> dict:
    """Header cart indicator."""
    return {
        "item_count": manager.cart.item_count,
        "total": money_dict(manager.cart.total),
    }
