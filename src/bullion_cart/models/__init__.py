"""
Models package - products, carts and checkout receipts.
"""

# Product models
from .product import (
    ProductKind, Product, PhysicalProduct, FractionalProduct, AnyProduct, parse_product
)

# Cart models
from .cart import (
    CartView, UnitsAggregate, GramsAggregate,
    Cart, PhysicalProductCart, FractionalProductCart, cart_for_kind
)

# Checkout models
from .receipt import Receipt

__all__ = [
    # Product
    "ProductKind",
    "Product",
    "PhysicalProduct",
    "FractionalProduct",
    "AnyProduct",
    "parse_product",
    # Cart
    "CartView",
    "UnitsAggregate",
    "GramsAggregate",
    "Cart",
    "PhysicalProductCart",
    "FractionalProductCart",
    "cart_for_kind",
    # Checkout
    "Receipt",
]
