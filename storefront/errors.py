"""
Storefront Errors

Message constants shared by routers and services, and the exception
types the catalog and cart raise.
"""

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCT_OUT_OF_STOCK = "Product out of stock"

# Catalog errors
ERROR_CATALOG_NOT_LOADED = "Catalog has not been loaded"
ERROR_CATALOG_UNAVAILABLE = "Catalog unavailable"

# Cart errors
ERROR_INVALID_QUANTITY = "quantity must be a positive integer"
ERROR_CART_EMPTY = "Cart is empty"


class StorefrontError(Exception):
    """Base class for storefront errors."""


class InvalidQuantityError(StorefrontError, ValueError):
    """Quantity argument is not a positive integer."""

    def __init__(self, quantity=None):
        self.quantity = quantity
        super().__init__(f"{ERROR_INVALID_QUANTITY}, got {quantity!r}")


class ProductUnavailableError(StorefrontError):
    """Product exists but is flagged out of stock."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"{ERROR_PRODUCT_OUT_OF_STOCK}: {product_id}")


class CatalogNotLoadedError(StorefrontError):
    """A catalog filter was used before the fixture was loaded."""

    def __init__(self):
        super().__init__(ERROR_CATALOG_NOT_LOADED)


class CatalogUnavailableError(StorefrontError):
    """Loading the catalog failed."""


class EmptyCartError(StorefrontError):
    """Checkout was attempted with no line items."""

    def __init__(self):
        super().__init__(ERROR_CART_EMPTY)
