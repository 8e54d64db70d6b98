"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal

# Set test environment variables before storefront modules read them
os.environ.setdefault("CATALOG_DELAY_MS", "0")
os.environ.setdefault("CART_STORAGE", "memory")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from storefront.cart import CartManager, MemoryCartStore
from storefront.catalog.fixtures import PRODUCTS
from storefront.services.models import Product


def make_product(product_id="p-1", price="10.00", **overrides) -> Product:
    """Build a Product with sensible defaults."""
    data = {
        "id": product_id,
        "slug": f"product-{product_id}",
        "name": f"Product {product_id}",
        "description": "Test product",
        "price": price,
        "images": [f"/images/{product_id}.jpg"],
        "category": "Test",
        "in_stock": True,
    }
    data.update(overrides)
    return Product(**data)


@pytest.fixture
def fixture_products():
    """The catalog fixture as Product models"""
    return [Product.model_validate(item) for item in PRODUCTS]


@pytest.fixture
def lamp():
    """$39.99 product"""
    return make_product("lamp", price="39.99", name="Desk Lamp")


@pytest.fixture
def mug():
    """$24.99 product"""
    return make_product("mug", price="24.99", name="Coffee Mug")


@pytest.fixture
def hundred():
    """Product priced exactly at the free-shipping threshold"""
    return make_product("hundred", price=Decimal("100.00"))


@pytest.fixture
def memory_store():
    return MemoryCartStore()


@pytest.fixture
def cart_manager(memory_store):
    return CartManager(memory_store, key="cart:test")


@pytest.fixture
def product_factory():
    """make_product as a fixture"""
    return make_product
