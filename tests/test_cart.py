"""
Tests for the Cart aggregate
"""

import pytest
from decimal import Decimal

from storefront.cart import Cart, CartLineItem, CartTotals
from storefront.cart.pricing import FLAT_SHIPPING, calculate_shipping, calculate_tax
from storefront.errors import InvalidQuantityError


def assert_reconciles(cart: Cart):
    """Derived fields agree with the line items."""
    assert cart.subtotal == sum((i.product.price * i.quantity for i in cart.items), Decimal("0"))
    assert cart.total == cart.subtotal + cart.tax + cart.shipping


class TestPricing:

    def test_tax_rounds_to_cents(self):
        assert calculate_tax(Decimal("89.97")) == Decimal("7.20")

    def test_shipping_boundary(self):
        assert calculate_shipping(Decimal("100.00")) == FLAT_SHIPPING
        assert calculate_shipping(Decimal("100.01")) == Decimal("0")

    def test_empty_cart_ships_free(self):
        assert calculate_shipping(Decimal("0"), is_empty=True) == Decimal("0")


class TestCartAdd:

    def test_add_new_item(self, lamp):
        cart = Cart()
        totals = cart.add(lamp, 2)

        assert len(cart.items) == 1
        assert cart.items[0].product_id == "lamp"
        assert cart.items[0].quantity == 2
        assert isinstance(totals, CartTotals)
        assert totals.subtotal == Decimal("79.98")
        assert totals.item_count == 2

    def test_repeated_adds_accumulate_on_one_line(self, lamp):
        cart = Cart()
        for quantity in (1, 3, 2):
            cart.add(lamp, quantity)

        assert len(cart.items) == 1
        assert cart.get_item("lamp").quantity == 6
        assert_reconciles(cart)

    def test_insertion_order_kept(self, lamp, mug):
        cart = Cart()
        cart.add(mug)
        cart.add(lamp)
        cart.add(mug)

        assert [i.product_id for i in cart.items] == ["mug", "lamp"]

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True])
    def test_invalid_quantity_rejected(self, lamp, quantity):
        cart = Cart()
        cart.add(lamp, 1)

        with pytest.raises(InvalidQuantityError):
            cart.add(lamp, quantity)

        assert cart.get_item("lamp").quantity == 1

    def test_invalid_quantity_is_value_error(self, lamp):
        with pytest.raises(ValueError):
            Cart().add(lamp, 0)

    def test_snapshot_is_kept(self, lamp):
        cart = Cart()
        cart.add(lamp)

        assert cart.items[0].product == lamp
        assert cart.items[0].unit_price == Decimal("39.99")


class TestCartRemoveAndUpdate:

    def test_remove(self, lamp, mug):
        cart = Cart()
        cart.add(lamp)
        cart.add(mug, 2)

        totals = cart.remove("lamp")

        assert not cart.contains("lamp")
        assert totals.subtotal == Decimal("49.98")

    def test_remove_absent_is_noop(self, lamp):
        cart = Cart()
        cart.add(lamp, 2)
        before = cart.to_dict()

        cart.remove("missing")

        assert cart.to_dict() == before

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_update_to_zero_or_less_removes(self, lamp, mug, quantity):
        updated = Cart()
        removed = Cart()
        for cart in (updated, removed):
            cart.add(lamp)
            cart.add(mug, 2)

        updated.update_quantity("lamp", quantity)
        removed.remove("lamp")

        assert updated == removed
        assert not updated.contains("lamp")

    def test_update_replaces_quantity(self, lamp):
        cart = Cart()
        cart.add(lamp, 5)

        totals = cart.update_quantity("lamp", 2)

        assert cart.get_item("lamp").quantity == 2
        assert totals.subtotal == Decimal("79.98")

    def test_update_absent_is_noop(self, lamp):
        cart = Cart()
        cart.add(lamp)

        cart.update_quantity("missing", 4)

        assert [i.product_id for i in cart.items] == ["lamp"]

    def test_clear(self, lamp, mug):
        cart = Cart()
        cart.add(lamp)
        cart.add(mug)

        totals = cart.clear()

        assert cart.is_empty
        assert totals == CartTotals()


class TestCartTotals:

    def test_worked_example(self, lamp, mug):
        """39.99 x1 + 24.99 x2: raw tax 7.1976 rounds to 7.20."""
        cart = Cart()
        cart.add(lamp, 1)
        cart.add(mug, 2)

        assert cart.subtotal == Decimal("89.97")
        assert cart.tax == Decimal("7.20")
        assert cart.shipping == Decimal("10.00")
        assert cart.total == Decimal("107.17")
        assert_reconciles(cart)

    def test_shipping_charged_at_exactly_threshold(self, hundred):
        cart = Cart()
        cart.add(hundred)

        assert cart.subtotal == Decimal("100.00")
        assert cart.shipping == Decimal("10.00")
        assert cart.total == Decimal("118.00")

    def test_shipping_free_just_above_threshold(self, product_factory):
        cart = Cart()
        cart.add(product_factory("a", price="100.01"))

        assert cart.shipping == Decimal("0")
        assert cart.total == Decimal("108.01")

    def test_empty_cart_is_all_zero(self):
        cart = Cart()
        assert cart.totals == CartTotals()
        assert_reconciles(cart)

    def test_recalculate_is_idempotent(self, lamp, mug):
        cart = Cart()
        cart.add(lamp, 3)
        cart.add(mug, 1)

        first = cart.recalculate()
        second = cart.recalculate()

        assert first == second

    def test_invariant_after_every_mutation(self, lamp, mug, hundred):
        cart = Cart()
        steps = [
            lambda: cart.add(lamp, 2),
            lambda: cart.add(mug, 1),
            lambda: cart.add(hundred, 1),
            lambda: cart.update_quantity("lamp", 1),
            lambda: cart.remove("hundred"),
            lambda: cart.update_quantity("mug", 0),
            lambda: cart.clear(),
        ]
        for step in steps:
            totals = step()
            assert_reconciles(cart)
            assert totals == cart.totals


class TestCartSerialization:

    def test_round_trip(self, lamp, mug):
        cart = Cart()
        cart.add(lamp, 1)
        cart.add(mug, 2)

        restored = Cart.from_dict(cart.to_dict())

        assert restored == cart
        assert restored.total == Decimal("107.17")

    def test_snapshot_shape(self, lamp):
        cart = Cart()
        cart.add(lamp)
        data = cart.to_dict()

        assert set(data) == {"items", "subtotal", "tax", "shipping", "total"}
        assert data["items"][0]["product"]["price"] == "39.99"
        assert data["total"] == "53.19"

    def test_stored_totals_are_recomputed(self, lamp):
        cart = Cart()
        cart.add(lamp)
        data = cart.to_dict()
        data["total"] = "0.01"

        assert Cart.from_dict(data).total == Decimal("53.19")

    def test_line_item_rejects_zero_quantity(self, lamp):
        data = CartLineItem(product_id="lamp", quantity=1, product=lamp).to_dict()
        data["quantity"] = 0

        with pytest.raises(InvalidQuantityError):
            CartLineItem.from_dict(data)

    def test_repeated_product_lines_merge(self, lamp, mug):
        cart = Cart()
        cart.add(lamp, 1)
        cart.add(mug, 2)
        data = cart.to_dict()
        data["items"].append({**data["items"][0], "quantity": 4})

        restored = Cart.from_dict(data)

        assert [i.product_id for i in restored.items] == ["lamp", "mug"]
        assert restored.get_item("lamp").quantity == 5
        restored.remove("lamp")
        assert restored.item_count == 2

    def test_non_object_snapshot(self):
        with pytest.raises(TypeError):
            Cart.from_dict(["not", "a", "cart"])
