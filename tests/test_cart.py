import logging

import pytest

from bullion_cart.models import (
    PhysicalProduct, FractionalProduct, ProductKind,
    Cart, PhysicalProductCart, FractionalProductCart, cart_for_kind,
    CartView, UnitsAggregate, GramsAggregate,
)


def snapshot(cart):
    return cart.model_dump(exclude={"created_at", "last_updated"})


def test_new_cart_is_empty():
    cart = PhysicalProductCart()
    assert cart.get_list() == []
    assert cart.get_total() == 0
    assert cart.get_total_units() == 0
    assert FractionalProductCart().get_total_grams() == 0


def test_physical_scenario(physical_cart):
    assert physical_cart.get_list() == ["Bullion Bar 10g (2 units)", "Bullion Bar 5g (3 units)"]
    assert physical_cart.get_total() == 19
    assert physical_cart.get_total_units() == 5


def test_fractional_scenario(fractional_cart):
    assert fractional_cart.get_list() == ["Gold Dust (25.5g)", "Silver Shavings (50.0g)"]
    assert fractional_cart.get_total() == pytest.approx(50.5)
    assert fractional_cart.get_total_grams() == pytest.approx(75.5)


def test_total_is_sum_of_price_times_quantity():
    products = [PhysicalProduct(f"Coin {i}", i + 0.25, i) for i in range(1, 6)]
    cart = PhysicalProductCart()
    for p in products:
        cart.add_item(p)

    assert cart.get_total() == pytest.approx(sum(p.price * p.units for p in products))
    assert cart.get_list() == [p.get_display_info() for p in products]


def test_duplicates_are_kept():
    cart = PhysicalProductCart()
    bar = PhysicalProduct("Bar", 2, 1)
    cart.add_item(bar)
    cart.add_item(bar)
    assert cart.get_list() == ["Bar (1 units)", "Bar (1 units)"]
    assert cart.get_total() == 4
    assert cart.get_total_units() == 2


def test_mismatched_product_is_ignored(physical_cart, fractional_cart, bars, dust):
    before_physical = snapshot(physical_cart)
    before_fractional = snapshot(fractional_cart)

    for p in dust:
        physical_cart.add_item(p)
    for p in bars:
        fractional_cart.add_item(p)

    assert snapshot(physical_cart) == before_physical
    assert snapshot(fractional_cart) == before_fractional


def test_mismatch_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="bullion_cart.models.cart")
    PhysicalProductCart().add_item(FractionalProduct("Gold Dust", 1, 25.5))
    assert any("ignoring FractionalProduct" in r.getMessage() for r in caplog.records)


def test_list_length_counts_only_matching_adds():
    cart = FractionalProductCart()
    cart.add_item(FractionalProduct("A", 1, 1))
    cart.add_item(PhysicalProduct("B", 1, 1))
    cart.add_item(FractionalProduct("C", 1, 2))
    assert cart.get_list() == ["A (1.0g)", "C (2.0g)"]


def test_get_list_returns_copy(physical_cart):
    items = physical_cart.get_list()
    items.append("Forged (1 units)")
    items.clear()
    assert len(physical_cart.get_list()) == 2


def test_remove_item_matches_display_prefix(physical_cart):
    physical_cart.add_item(PhysicalProduct("Coin", 1, 1))

    physical_cart.remove_item("Bullion Bar 1")
    assert physical_cart.get_list() == ["Bullion Bar 5g (3 units)", "Coin (1 units)"]

    physical_cart.remove_item("Bullion")
    assert physical_cart.get_list() == ["Coin (1 units)"]


def test_remove_item_keeps_totals(physical_cart):
    physical_cart.remove_item("Bullion")
    assert physical_cart.get_list() == []
    assert physical_cart.get_total() == 19
    assert physical_cart.get_total_units() == 5


def test_remove_item_without_match_is_noop(fractional_cart):
    before = snapshot(fractional_cart)
    fractional_cart.remove_item("Platinum")
    assert snapshot(fractional_cart) == before


def test_update_item_equals_remove_then_add(bars):
    replacement = PhysicalProduct("Bullion Bar 20g", 9, 1)
    updated = PhysicalProductCart()
    manual = PhysicalProductCart()
    for cart in (updated, manual):
        for p in bars:
            cart.add_item(p)

    updated.update_item("Bullion Bar 10g", replacement)
    manual.remove_item("Bullion Bar 10g")
    manual.add_item(replacement)

    assert snapshot(updated) == snapshot(manual)
    assert updated.get_list() == ["Bullion Bar 5g (3 units)", "Bullion Bar 20g (1 units)"]
    assert updated.get_total() == 19 + 9
    assert updated.get_total_units() == 6


def test_update_item_with_mismatched_product_only_removes(physical_cart):
    physical_cart.update_item("Bullion Bar 5g", FractionalProduct("Gold Dust", 1, 25.5))
    assert physical_cart.get_list() == ["Bullion Bar 10g (2 units)"]
    assert physical_cart.get_total() == 19
    assert physical_cart.get_total_units() == 5


def test_add_refreshes_last_updated():
    cart = FractionalProductCart()
    first = cart.last_updated
    cart.add_item(FractionalProduct("Gold Dust", 1, 25.5))
    assert cart.last_updated >= first


def test_capability_protocols(physical_cart, fractional_cart):
    assert isinstance(physical_cart, CartView)
    assert isinstance(fractional_cart, CartView)
    assert isinstance(physical_cart, UnitsAggregate)
    assert not isinstance(physical_cart, GramsAggregate)
    assert isinstance(fractional_cart, GramsAggregate)
    assert not isinstance(fractional_cart, UnitsAggregate)


def test_base_cart_cannot_be_built():
    with pytest.raises(TypeError):
        Cart()


def test_cart_for_kind():
    assert isinstance(cart_for_kind(ProductKind.PHYSICAL), PhysicalProductCart)
    assert isinstance(cart_for_kind(ProductKind.FRACTIONAL), FractionalProductCart)
    with pytest.raises(ValueError):
        cart_for_kind("liquid")
