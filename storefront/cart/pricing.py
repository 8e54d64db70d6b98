"""
Cart pricing rules.

subtotal is exact, tax is rounded to cents half up, and the total is
the plain sum of the three so it always reconciles.
"""
from decimal import Decimal

from storefront.services.money import ZERO, multiply, round_money

TAX_RATE = Decimal("0.08")
FREE_SHIPPING_THRESHOLD = Decimal("100.00")
FLAT_SHIPPING = Decimal("10.00")


def calculate_tax(subtotal: Decimal) -> Decimal:
    return round_money(multiply(subtotal, TAX_RATE))


def calculate_shipping(subtotal: Decimal, is_empty: bool = False) -> Decimal:
    """Flat rate unless the subtotal is strictly above the threshold."""
    if is_empty:
        return ZERO
    if subtotal > FREE_SHIPPING_THRESHOLD:
        return ZERO
    return FLAT_SHIPPING
