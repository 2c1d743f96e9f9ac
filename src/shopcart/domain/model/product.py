"""Product: an entry in the shop catalog.

Products are created once when the catalog is loaded and never change
for the rest of the session. Cart lines hold references to them.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A purchasable catalog entry.

    Uniqueness of ``id`` across a catalog is the catalog provider's
    concern, not checked here.
    """

    id: int
    name: str
    price: Money
