"""
Product models for the bullion cart.
Two disjoint product kinds: physical (priced per unit) and fractional (priced per gram).
"""

from abc import abstractmethod
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import Union, Literal, Annotated, Optional


class ProductKind:
    """Tags for the sealed set of product kinds."""
    PHYSICAL = "physical"
    FRACTIONAL = "fractional"


class Product(BaseModel):
    """Catalog entry. Immutable once built."""
    name: str
    price: float

    model_config = ConfigDict(frozen=True)

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return self.price

    @abstractmethod
    def get_quantity(self):
        """Units for physical products, grams for fractional ones."""

    @abstractmethod
    def get_display_info(self) -> str:
        ...


class PhysicalProduct(Product):
    """Product sold by whole units."""
    kind: Literal["physical"] = ProductKind.PHYSICAL
    units: int

    def __init__(self, name: Optional[str] = None, price: Optional[float] = None, units: Optional[int] = None, **data):
        if name is not None:
            data["name"] = name
        if price is not None:
            data["price"] = price
        if units is not None:
            data["units"] = units
        super().__init__(**data)

    def get_units(self) -> int:
        return self.units

    def get_quantity(self) -> int:
        return self.units

    def get_display_info(self) -> str:
        return f"{self.name} ({self.units} units)"


class FractionalProduct(Product):
    """Product sold by weight, in grams."""
    kind: Literal["fractional"] = ProductKind.FRACTIONAL
    weight: float

    def __init__(self, name: Optional[str] = None, price: Optional[float] = None, weight: Optional[float] = None, **data):
        if name is not None:
            data["name"] = name
        if price is not None:
            data["price"] = price
        if weight is not None:
            data["weight"] = weight
        super().__init__(**data)

    def get_weight(self) -> float:
        return self.weight

    def get_quantity(self) -> float:
        return self.weight

    def get_display_info(self) -> str:
        # weight renders as a float even when built from an int (50 -> "50.0g")
        return f"{self.name} ({float(self.weight)}g)"


AnyProduct = Annotated[
    Union[PhysicalProduct, FractionalProduct],
    Field(discriminator="kind")
]

_product_adapter = TypeAdapter(AnyProduct)


def parse_product(data: dict) -> Product:
    """
    Build the right product variant from a plain mapping.

    Args:
        data: Mapping with a "kind" key plus the variant's fields

    Returns:
        PhysicalProduct or FractionalProduct
    """
    return _product_adapter.validate_python(data)
