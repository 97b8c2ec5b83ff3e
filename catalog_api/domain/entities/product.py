"""Domain entity for catalog products."""

import math
from dataclasses import dataclass

from catalog_api.domain.entities.violation import Violation


@dataclass
class Product:
    """A sellable item with stock and merchandising flags.

    ``selected`` marks products highlighted by staff; ``available`` marks
    products that can currently be ordered.
    """

    name: str
    price: float
    quantity: int
    selected: bool = False
    available: bool = True
    id: int | None = None

    def replace(
        self,
        name: str,
        price: float,
        quantity: int,
        selected: bool,
        available: bool,
    ) -> None:
        """Overwrite every mutable field; there is no partial update."""
        self.name = name
        self.price = price
        self.quantity = quantity
        self.selected = selected
        self.available = available

    def validate(self) -> list[Violation]:
        """Check field constraints. Returns an empty list when the product is valid."""
        violations: list[Violation] = []
        if not self.name or not self.name.strip():
            violations.append(Violation("name", "This value should not be blank."))
        if not math.isfinite(self.price):
            violations.append(Violation("price", "This value should be a finite number."))
        elif self.price < 0:
            violations.append(
                Violation("price", "This value should be either positive or zero.")
            )
        if self.quantity < 0:
            violations.append(
                Violation("quantity", "This value should be either positive or zero.")
            )
        return violations
