"""
Sample catalog and routing of products into carts.
"""

import logging
from typing import Dict, Iterable, List

from bullion_cart.models.product import Product, PhysicalProduct, FractionalProduct, ProductKind
from bullion_cart.models.cart import Cart, cart_for_kind

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Checkout order of the demo carts
CART_ORDER = [ProductKind.PHYSICAL, ProductKind.FRACTIONAL]


def build_sample_products() -> List[Product]:
    """The demo catalog: two bullion bars and two precious metal powders."""
    return [
        PhysicalProduct("Bullion Bar 10g", 5, 2),
        PhysicalProduct("Bullion Bar 5g", 3, 3),
        FractionalProduct("Gold Dust", 1, 25.5),
        FractionalProduct("Silver Shavings", 0.5, 50),
    ]


def route_products(products: Iterable[Product], carts: Iterable[Cart]) -> int:
    """
    Add each product to the cart that takes its kind.

    Args:
        products: Products to place
        carts: Candidate carts, at most one per product kind

    Returns:
        Number of products placed; products with no matching cart are skipped
    """
    by_kind = {cart.product_kind: cart for cart in carts}
    placed = 0

    for product in products:
        cart = by_kind.get(product.kind)
        if cart is None:
            logger.warning(f"[CATALOG] No cart for {product.kind} product {product.name!r}")
            continue
        cart.add_item(product)
        placed += 1

    logger.info(f"[CATALOG] Routed {placed} product(s) into {len(by_kind)} cart(s)")
    return placed


def build_carts(products: Iterable[Product]) -> Dict[str, Cart]:
    """One populated cart per product kind, in checkout order."""
    carts = {kind: cart_for_kind(kind) for kind in CART_ORDER}
    route_products(products, carts.values())
    return carts
