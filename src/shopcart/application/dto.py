"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the application layer and the view without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$999.99"


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    lines: list[CartLineDTO]
    total: str
    item_count: int

    @property
    def is_empty(self) -> bool:
        return not self.lines


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, price=str(product.price))


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        lines=[
            CartLineDTO(
                product_id=line.product_id,
                product_name=line.product.name,
                quantity=line.quantity.value,
                subtotal=str(line.subtotal),
            )
            for line in cart.lines
        ],
        total=str(cart.total),
        item_count=cart.item_count,
    )
