import pytest

from bullion_cart.models import (
    PhysicalProduct, FractionalProduct, PhysicalProductCart, FractionalProductCart
)


@pytest.fixture
def bars():
    return [
        PhysicalProduct("Bullion Bar 10g", 5, 2),
        PhysicalProduct("Bullion Bar 5g", 3, 3),
    ]


@pytest.fixture
def dust():
    return [
        FractionalProduct("Gold Dust", 1, 25.5),
        FractionalProduct("Silver Shavings", 0.5, 50),
    ]


@pytest.fixture
def physical_cart(bars):
    cart = PhysicalProductCart()
    for p in bars:
        cart.add_item(p)
    return cart


@pytest.fixture
def fractional_cart(dust):
    cart = FractionalProductCart()
    for p in dust:
        cart.add_item(p)
    return cart
