"""
Shopping cart models.
Each cart variant accepts exactly one product kind and ignores the other.
"""

import logging
from abc import abstractmethod
from pydantic import BaseModel, ConfigDict, Field
from typing import ClassVar, List, Protocol, runtime_checkable
from datetime import datetime

from .product import Product, ProductKind

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


@runtime_checkable
class CartView(Protocol):
    """Read side of a cart, all the checkout needs."""

    def get_list(self) -> List[str]: ...

    def get_total(self) -> float: ...


@runtime_checkable
class UnitsAggregate(Protocol):
    def get_total_units(self) -> int: ...


@runtime_checkable
class GramsAggregate(Protocol):
    def get_total_grams(self) -> float: ...


class Cart(BaseModel):
    """Shopping cart holding display strings and a running total."""
    product_kind: ClassVar[str] = ""

    items: List[str] = Field(default_factory=list)
    total: float = 0.0
    created_at: datetime = Field(default_factory=datetime.utcnow)
    last_updated: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(validate_assignment=True)

    def add_item(self, product: Product):
        """
        Add a product if it is of this cart's kind, otherwise do nothing.

        Adds price * quantity to the total and quantity to the cart's aggregate.
        """
        if getattr(product, "kind", None) != self.product_kind:
            logger.debug(
                f"[CART] {type(self).__name__} ignoring {type(product).__name__}: "
                f"{getattr(product, 'name', product)!r}"
            )
            return

        quantity = product.get_quantity()
        self.items.append(product.get_display_info())
        self.total += product.get_price() * quantity
        self._add_to_aggregate(quantity)
        self.last_updated = datetime.utcnow()
        logger.debug(f"[CART] Added {self.items[-1]!r}, total now {self.total}")

    def update_item(self, name: str, new_product: Product):
        self.remove_item(name)
        self.add_item(new_product)

    def remove_item(self, name: str):
        """
        Remove every item whose display string starts with `name`.

        Total and aggregate are left as they are.
        """
        before = len(self.items)
        self.items = [i for i in self.items if not i.startswith(name)]
        removed = before - len(self.items)
        if removed:
            self.last_updated = datetime.utcnow()
        logger.info(f"[CART] Removed {removed} item(s) matching prefix {name!r}")

    def get_list(self) -> List[str]:
        return list(self.items)

    def get_total(self) -> float:
        return self.total

    @abstractmethod
    def _add_to_aggregate(self, quantity):
        ...


class PhysicalProductCart(Cart):
    """Cart for unit-priced products. Tracks total units."""
    product_kind: ClassVar[str] = ProductKind.PHYSICAL

    total_units: int = 0

    def _add_to_aggregate(self, quantity: int):
        self.total_units += quantity

    def get_total_units(self) -> int:
        return self.total_units


class FractionalProductCart(Cart):
    """Cart for weight-priced products. Tracks total grams."""
    product_kind: ClassVar[str] = ProductKind.FRACTIONAL

    total_grams: float = 0.0

    def _add_to_aggregate(self, quantity: float):
        self.total_grams += quantity

    def get_total_grams(self) -> float:
        return self.total_grams


CART_TYPES = {
    ProductKind.PHYSICAL: PhysicalProductCart,
    ProductKind.FRACTIONAL: FractionalProductCart,
}


def cart_for_kind(kind: str) -> Cart:
    """Return a new empty cart for the given product kind."""
    try:
        return CART_TYPES[kind]()
    except KeyError:
        raise ValueError(f"Unknown product kind: {kind}") from None
