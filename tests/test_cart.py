"""
Tests for line items and the cart aggregate
"""

import dataclasses

import pytest

from warung_pos.cart import AdHocItem, CatalogItem, Cart, identity_of, describe
from warung_pos.errors import (
    CheckoutInProgress,
    InvalidAmount,
    InvalidLineItem,
    InvalidQuantity,
)


def assert_total_consistent(cart: Cart):
    assert cart.total_amount == sum(i.unit_price * i.quantity for i in cart.items)


class TestLineItems:
    """Tests for AdHocItem and CatalogItem."""

    def test_ad_hoc_identity_depends_on_price(self):
        assert identity_of(AdHocItem(1000)) == identity_of(AdHocItem(1000, quantity=3))
        assert identity_of(AdHocItem(1000)) != identity_of(AdHocItem(2000))

    def test_catalog_identity_depends_on_id(self):
        a = CatalogItem("p1", "Tea", 4000)
        b = CatalogItem("p1", "Iced Tea", 5000)
        assert identity_of(a) == identity_of(b) == "catalog:p1"

    def test_kinds_never_collide(self):
        assert identity_of(AdHocItem(1)) != identity_of(CatalogItem("1", "X", 1))

    def test_rejects_non_positive_price(self):
        with pytest.raises(InvalidAmount):
            AdHocItem(0)
        with pytest.raises(InvalidLineItem):
            CatalogItem("p1", "Tea", -5)

    def test_rejects_quantity_below_one(self):
        with pytest.raises(InvalidQuantity):
            AdHocItem(1000, quantity=0)

    def test_rejects_empty_catalog_id(self):
        with pytest.raises(InvalidLineItem):
            CatalogItem("", "Tea", 4000)

    @pytest.mark.parametrize("display_name", [None, "", "   ", 42])
    def test_rejects_bad_display_name(self, display_name):
        with pytest.raises(InvalidLineItem):
            CatalogItem("p1", display_name, 4000)

    def test_items_are_frozen(self):
        item = AdHocItem(1000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.quantity = 5

    def test_descriptions(self):
        assert describe(AdHocItem(1000)) == "Ad-hoc Rp1000"
        assert describe(CatalogItem("p1", "Tea", 4000)) == "Tea"


class TestAddAdHoc:
    """Tests for quick-price additions."""

    def test_same_price_merges(self, cart):
        for _ in range(5):
            cart.add_ad_hoc(500)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5
        assert cart.total_amount == 2500

    def test_different_prices_are_separate_lines(self, cart):
        cart.add_ad_hoc(500)
        cart.add_ad_hoc(1000)

        assert [i.unit_price for i in cart.items] == [500, 1000]
        assert_total_consistent(cart)

    def test_invalid_price_leaves_cart_unchanged(self, sample_cart):
        before = sample_cart.summary()

        with pytest.raises(InvalidAmount):
            sample_cart.add_ad_hoc(0)

        assert sample_cart.summary() == before


class TestAddCatalogItem:
    """Tests for catalog additions."""

    def test_merge_keeps_position(self, cart):
        cart.add_catalog_item("p1", "Tea", 4000)
        cart.add_ad_hoc(1000)
        cart.add_catalog_item("p1", "Tea", 4000)

        assert [i.identity for i in cart.items] == ["catalog:p1", "ad_hoc:1000"]
        assert cart.get("catalog:p1").quantity == 2
        assert cart.total_amount == 9000

    def test_rejects_empty_catalog_id(self, cart):
        with pytest.raises(InvalidLineItem):
            cart.add_catalog_item("", "Tea", 4000)
        assert cart.is_empty

    def test_rejects_invalid_price(self, cart):
        with pytest.raises(InvalidAmount):
            cart.add_catalog_item("p1", "Tea", 0)
        assert cart.is_empty

    @pytest.mark.parametrize("display_name", [None, ""])
    def test_rejects_bad_display_name(self, sample_cart, display_name):
        """A nameless product never reaches the cart (or the receipt)"""
        before = sample_cart.summary()

        with pytest.raises(InvalidLineItem):
            sample_cart.add_catalog_item("p2", display_name, 3000)

        assert sample_cart.summary() == before


class TestQuantityCommands:
    """Tests for increment, decrement, set_quantity and remove."""

    def test_example_cart(self, sample_cart):
        assert [(i.identity, i.quantity) for i in sample_cart.items] == [
            ("ad_hoc:1000", 2),
            ("catalog:p1", 1),
        ]
        assert sample_cart.total_amount == 6000

    def test_decrement_to_zero_removes(self, sample_cart):
        result = sample_cart.decrement("catalog:p1")

        assert result is None
        assert sample_cart.get("catalog:p1") is None
        assert sample_cart.total_amount == 2000

    def test_decrement_keeps_line_above_zero(self, sample_cart):
        item = sample_cart.decrement("ad_hoc:1000")

        assert item.quantity == 1
        assert sample_cart.total_amount == 5000

    def test_decrement_unknown_is_noop(self, sample_cart):
        assert sample_cart.decrement("catalog:nope") is None
        assert sample_cart.total_amount == 6000

    def test_increment_uses_merge_path(self, sample_cart):
        sample_cart.increment("catalog:p1")
        sample_cart.increment("ad_hoc:1000")

        assert len(sample_cart.items) == 2
        assert sample_cart.get("catalog:p1").quantity == 2
        assert sample_cart.get("ad_hoc:1000").quantity == 3
        assert sample_cart.total_amount == 11000

    def test_increment_unknown_is_noop(self, cart):
        assert cart.increment("ad_hoc:1000") is None
        assert cart.is_empty

    def test_set_quantity(self, sample_cart):
        sample_cart.set_quantity("catalog:p1", 4)

        assert sample_cart.get("catalog:p1").quantity == 4
        assert sample_cart.total_amount == 18000

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_set_quantity_below_one_removes(self, sample_cart, quantity):
        sample_cart.set_quantity("ad_hoc:1000", quantity)

        assert sample_cart.get("ad_hoc:1000") is None
        assert sample_cart.total_amount == 4000

    def test_set_quantity_rejects_non_int(self, sample_cart):
        with pytest.raises(InvalidQuantity):
            sample_cart.set_quantity("ad_hoc:1000", 2.5)
        assert sample_cart.total_amount == 6000

    def test_remove_ignores_quantity(self, sample_cart):
        assert sample_cart.remove("ad_hoc:1000") is True
        assert sample_cart.remove("ad_hoc:1000") is False
        assert sample_cart.total_amount == 4000

    def test_clear(self, sample_cart):
        sample_cart.clear()

        assert sample_cart.is_empty
        assert sample_cart.total_amount == 0

    def test_total_consistent_after_mixed_mutations(self, cart):
        cart.add_ad_hoc(500)
        cart.add_catalog_item("p2", "Indomie", 3000)
        cart.add_ad_hoc(500)
        cart.set_quantity("catalog:p2", 3)
        assert_total_consistent(cart)
        cart.decrement("ad_hoc:500")
        assert_total_consistent(cart)
        cart.increment("catalog:p2")
        assert_total_consistent(cart)
        assert cart.total_amount == 500 + 4 * 3000


class TestCheckoutLock:
    """Tests for the in-flight checkout guard."""

    def test_mutations_rejected_while_locked(self, sample_cart):
        with sample_cart.checkout_lock():
            with pytest.raises(CheckoutInProgress):
                sample_cart.add_ad_hoc(1000)
            with pytest.raises(CheckoutInProgress):
                sample_cart.remove("catalog:p1")
            with pytest.raises(CheckoutInProgress):
                sample_cart.clear()

        assert sample_cart.total_amount == 6000
        assert not sample_cart.is_locked

    def test_lock_is_not_reentrant(self, sample_cart):
        with sample_cart.checkout_lock():
            with pytest.raises(CheckoutInProgress):
                with sample_cart.checkout_lock():
                    pass

    def test_lock_released_on_error(self, sample_cart):
        with pytest.raises(RuntimeError):
            with sample_cart.checkout_lock():
                raise RuntimeError("boom")

        assert not sample_cart.is_locked
        sample_cart.add_ad_hoc(1000)


class TestSummary:
    """Tests for the display summary."""

    def test_summary(self, sample_cart):
        summary = sample_cart.summary()

        assert summary["total_amount"] == 6000
        assert summary["total_display"] == "Rp6.000"
        assert summary["total_quantity"] == 3
        assert summary["items"][0]["description"] == "Ad-hoc Rp1000"
        assert summary["items"][1]["kind"] == "catalog"

    def test_empty_summary(self, cart):
        summary = cart.summary()

        assert summary["is_empty"] is True
        assert summary["items"] == []
        assert summary["total_amount"] == 0


class TestLineItemsReadOnly:
    """Lines handed out by the cart cannot change it behind its back."""

    def test_cannot_edit_quantity_through_items(self, cart):
        cart.add_ad_hoc(1000)

        with pytest.raises(dataclasses.FrozenInstanceError):
            cart.items[0].quantity = 5

        assert cart.items[0].quantity == 1
        assert_total_consistent(cart)

    def test_cannot_edit_price_through_returned_line(self, sample_cart):
        line = sample_cart.increment("catalog:p1")

        with pytest.raises(dataclasses.FrozenInstanceError):
            line.unit_price = 1

        assert sample_cart.get("catalog:p1").unit_price == 4000
        assert sample_cart.total_amount == 10000

    def test_earlier_reference_is_not_updated(self, cart):
        first = cart.add_ad_hoc(500)
        second = cart.add_ad_hoc(500)

        assert first.quantity == 1
        assert second.quantity == 2
        assert cart.get("ad_hoc:500") == second
        assert_total_consistent(cart)

    def test_set_quantity_replaces_in_place(self, sample_cart):
        sample_cart.set_quantity("ad_hoc:1000", 7)

        assert [i.identity for i in sample_cart.items] == ["ad_hoc:1000", "catalog:p1"]
        assert sample_cart.items[0].quantity == 7
        assert_total_consistent(sample_cart)
