"""
Core module initialization.
"""

from .cart_service import CartService, CURRENCY_SYMBOL
from .catalog import build_sample_products, route_products, build_carts, CART_ORDER

__all__ = [
    # Checkout
    "CartService",
    "CURRENCY_SYMBOL",
    # Catalog
    "build_sample_products",
    "route_products",
    "build_carts",
    "CART_ORDER",
]
