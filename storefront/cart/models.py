"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, List

from storefront.errors import InvalidQuantityError
from storefront.services.models import Product
from storefront.services.money import ZERO, multiply
from .pricing import calculate_shipping, calculate_tax


def _validate_quantity(quantity) -> int:
    # bool is an int subclass; True is not a quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantityError(quantity)
    return quantity


@dataclass
class CartLineItem:
    """One product-and-quantity pair, with the product as it was when added."""
    product_id: str
    quantity: int
    product: Product

    @property
    def unit_price(self) -> Decimal:
        return self.product.price

    @property
    def line_total(self) -> Decimal:
        """Price for all units of this line."""
        return multiply(self.product.price, self.quantity)

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "quantity": self.quantity,
            "product": self.product.model_dump(mode="json"),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLineItem":
        return cls(
            product_id=str(data["product_id"]),
            quantity=_validate_quantity(data["quantity"]),
            product=Product.model_validate(data["product"]),
        )


@dataclass(frozen=True)
class CartTotals:
    """Derived money fields of a cart at one point in time."""
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    shipping: Decimal = ZERO
    total: Decimal = ZERO
    item_count: int = 0


@dataclass
class Cart:
    """
    Shopping cart aggregate.

    Line items keep insertion order. subtotal, tax, shipping and total
    are only written by recalculate(), which every mutation calls, so
    total == subtotal + tax + shipping holds whenever the cart is observed.
    """
    items: List[CartLineItem] = field(default_factory=list)
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    shipping: Decimal = ZERO
    total: Decimal = ZERO

    def __post_init__(self):
        self.recalculate()

    @property
    def item_count(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def totals(self) -> CartTotals:
        return CartTotals(
            subtotal=self.subtotal,
            tax=self.tax,
            shipping=self.shipping,
            total=self.total,
            item_count=self.item_count,
        )

    def recalculate(self) -> CartTotals:
        """Recompute the derived fields from the line items."""
        subtotal = sum((item.line_total for item in self.items), ZERO)
        self.subtotal = subtotal
        self.tax = calculate_tax(subtotal)
        self.shipping = calculate_shipping(subtotal, is_empty=self.is_empty)
        self.total = self.subtotal + self.tax + self.shipping
        return self.totals

    def get_item(self, product_id: str) -> Optional[CartLineItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    def contains(self, product_id: str) -> bool:
        return self.get_item(product_id) is not None

    def add(self, product: Product, quantity: int = 1) -> CartTotals:
        """
        Add units of a product.

        An existing line for the product is incremented, otherwise a new
        line is appended.

        Raises:
            InvalidQuantityError: quantity is not a positive int.
        """
        _validate_quantity(quantity)
        existing = self.get_item(product.id)
        if existing:
            existing.quantity += quantity
        else:
            self.items.append(CartLineItem(product_id=product.id, quantity=quantity, product=product))
        return self.recalculate()

    def remove(self, product_id: str) -> CartTotals:
        """Drop the line for product_id. Absent ids are ignored."""
        self.items = [item for item in self.items if item.product_id != product_id]
        return self.recalculate()

    def update_quantity(self, product_id: str, quantity: int) -> CartTotals:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            return self.remove(product_id)
        _validate_quantity(quantity)
        existing = self.get_item(product_id)
        if existing:
            existing.quantity = quantity
        return self.recalculate()

    def clear(self) -> CartTotals:
        self.items = []
        return self.recalculate()

    def to_dict(self) -> dict:
        """Snapshot for storage: items plus the derived fields as strings."""
        return {
            "items": [item.to_dict() for item in self.items],
            "subtotal": str(self.subtotal),
            "tax": str(self.tax),
            "shipping": str(self.shipping),
            "total": str(self.total),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        """
        Rebuild a cart from a snapshot.

        Stored derived fields are ignored and recomputed from the items.
        Repeated lines for one product id are merged by summing quantities.
        """
        if not isinstance(data, dict):
            raise TypeError(f"cart snapshot must be an object, got {type(data).__name__}")
        items: List[CartLineItem] = []
        for raw in data.get("items", []):
            item = CartLineItem.from_dict(raw)
            existing = next((i for i in items if i.product_id == item.product_id), None)
            if existing:
                existing.quantity += item.quantity
            else:
                items.append(item)
        return cls(items=items)


__all__ = ["Cart", "CartLineItem", "CartTotals"]
