"""
Cart service - renders a cart at checkout.
Depends only on the read side of a cart (item list + total), never on its variant.
"""

import sys
import logging
from typing import List, Optional, TextIO

from bullion_cart.models.cart import CartView
from bullion_cart.models.receipt import Receipt

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Rendering configuration
CURRENCY_SYMBOL = "$"
ITEMS_HEADER = "🛒 Cart Items:"
TOTAL_LABEL = "💵 Total:"


class CartService:
    """Checkout front for a single cart."""

    def __init__(self, cart: CartView):
        if not isinstance(cart, CartView):
            raise TypeError(f"CartService needs a cart, got {type(cart).__name__}")
        self.cart = cart

    def render(self) -> List[str]:
        """
        Render the cart as console lines.

        Returns:
            Header, one " - <item>" line per item in order, then the total line
        """
        lines = [ITEMS_HEADER]
        for item in self.cart.get_list():
            lines.append(f" - {item}")
        lines.append(f"{TOTAL_LABEL} {CURRENCY_SYMBOL}{self.cart.get_total()}")
        return lines

    def checkout(self, stream: Optional[TextIO] = None) -> Receipt:
        """
        Print the cart and return a receipt. The cart is not modified.

        Args:
            stream: Where to write the rendered lines (defaults to stdout)

        Returns:
            Receipt snapshot of the cart
        """
        out = stream if stream is not None else sys.stdout
        for line in self.render():
            print(line, file=out)

        receipt = Receipt(
            items=self.cart.get_list(),
            total=self.cart.get_total(),
            cart_type=type(self.cart).__name__
        )
        logger.info(
            f"[CHECKOUT] {receipt.cart_type}: {receipt.item_count} item(s), "
            f"total {CURRENCY_SYMBOL}{receipt.total}"
        )
        return receipt
