"""
Console entry point: fills one cart per product kind from the sample catalog and checks each out.
"""

from bullion_cart.core.cart_service import CartService
from bullion_cart.core.catalog import build_sample_products, build_carts, CART_ORDER

SEPARATOR = "---------"


def main():
    carts = build_carts(build_sample_products())

    for i, kind in enumerate(CART_ORDER):
        if i > 0:
            print(SEPARATOR)
        CartService(carts[kind]).checkout()


if __name__ == "__main__":
    main()
