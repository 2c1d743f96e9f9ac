"""Cart aggregate — the core of the domain.

The Cart owns its lines. Each line references a catalog Product and
carries how many units of it are in the cart.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """One product's aggregated quantity within the cart.

    Mutable only through ``increase()``; the product reference is shared
    with the catalog and never modified.
    """

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value

    def increase(self, quantity: Quantity) -> None:
        self.quantity = self.quantity + quantity


@dataclass
class Cart:
    """Aggregate root for the session's shopping cart.

    Invariants:
    - at most one line per product id
    - lines keep the order in which products were first added
    """

    _lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> None:
        """Add *quantity* units of *product*.

        Merges into the existing line for the same product id, otherwise
        appends a new line at the end. Raises ValidationError for a
        quantity that is not a positive integer, before touching state.
        """
        qty = Quantity(quantity)
        line = self.get_line(product.id)
        if line is not None:
            line.increase(qty)
        else:
            self._lines.append(CartLine(product=product, quantity=qty))

    def remove_item(self, product_id: int) -> None:
        """Drop every line for *product_id*. No-op if there is none."""
        self._lines = [line for line in self._lines if line.product_id != product_id]

    def clear(self) -> None:
        self._lines = []

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.subtotal
        return result

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(line.quantity.value for line in self._lines)

    def get_line(self, product_id: int) -> CartLine | None:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)
