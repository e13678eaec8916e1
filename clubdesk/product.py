"""Products sold at the club counter."""

from __future__ import annotations

from enum import IntEnum


class ProductCategory(IntEnum):
    FOOD = 0
    DRINK = 1
    ACCESSORY = 2
    SERVICE = 3


class Product:
    """A stock item with a price and a quantity on hand."""

    def __init__(
        self, id: int, name: str, category: ProductCategory, price: float, stock: int
    ) -> None:
        self.id = id
        self.name = name
        self.category = ProductCategory(category)
        self._price = price
        self.stock = stock

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, new_price: float) -> None:
        # Negative prices are silently ignored.
        if new_price >= 0:
            self._price = new_price

    def sell(self, quantity: int = 1) -> bool:
        """Take *quantity* from stock; return False if not possible."""
        if quantity <= 0 or quantity > self.stock:
            return False
        self.stock -= quantity
        return True

    def restock(self, quantity: int) -> bool:
        """Add *quantity* to stock; return False for non-positive amounts."""
        if quantity <= 0:
            return False
        self.stock += quantity
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return (self.id, self.name, self.category, self.price, self.stock) == (
            other.id,
            other.name,
            other.category,
            other.price,
            other.stock,
        )

    def __repr__(self) -> str:
        return (
            f"Product(id={self.id!r}, name={self.name!r}, category={self.category!r}, "
            f"price={self.price!r}, stock={self.stock!r})"
        )