"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock is adjusted, products are added and removed from
the catalog.  Order composition only ever reads them.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``stock_quantity`` is informational: placing an order does not
    decrement it.
    """

    id: str
    name: str
    price: Money
    stock_quantity: int = 0
    category: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        self._validate_stock(self.stock_quantity)

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price

    def update_stock(self, quantity: int) -> None:
        self._validate_stock(quantity)
        self.stock_quantity = quantity

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()

    @staticmethod
    def _validate_stock(quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
