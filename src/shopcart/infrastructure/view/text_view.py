"""Plain-text rendering of the catalog and the cart.

Every call renders the whole thing from a DTO snapshot; there is no
incremental update. Money arrives already formatted to cents.
"""

from __future__ import annotations

import re

from shopcart.application.dto import CartDTO, ProductDTO
from shopcart.domain.model.value_objects import Money

EMPTY_CART_MESSAGE = "Your cart is empty."

_LINE_RE = re.compile(r"^(?P<name>.+) \(x(?P<qty>\d+)\) - (?P<subtotal>\$\S+)$")
_TOTAL_RE = re.compile(r"^Total: (?P<total>\$\S+)$")


def render_products(products: list[ProductDTO]) -> str:
    if not products:
        return "No products found."

    rows = [f"{'ID':<6} {'Name':<20} {'Price':>10}", "-" * 38]
    for p in products:
        rows.append(f"{p.id:<6} {p.name:<20} {p.price:>10}")
    return "\n".join(rows)


def render_cart(cart: CartDTO) -> str:
    if cart.is_empty:
        rows = [EMPTY_CART_MESSAGE]
    else:
        rows = [
            f"{line.product_name} (x{line.quantity}) - {line.subtotal}"
            for line in cart.lines
        ]
    rows.append(f"Total: {cart.total}")
    return "\n".join(rows)


def parse_cart_totals(text: str) -> tuple[list[Money], Money]:
    """Read a rendered cart back into its line subtotals and total.

    Raises ValueError if the text has no total line.
    """
    subtotals: list[Money] = []
    total: Money | None = None
    for row in text.splitlines():
        row = row.strip()
        line_match = _LINE_RE.match(row)
        if line_match:
            subtotals.append(Money.parse(line_match.group("subtotal")))
            continue
        total_match = _TOTAL_RE.match(row)
        if total_match:
            total = Money.parse(total_match.group("total"))

    if total is None:
        raise ValueError("Rendered cart has no 'Total:' line")
    return subtotals, total
