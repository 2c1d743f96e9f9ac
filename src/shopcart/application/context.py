"""Application context: the session's cart and the catalog it shops from.

One ShopContext exists per session. It is built by the composition root
and passed explicitly to whatever needs it; nothing reaches for a
module-level cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.product_catalog import ProductCatalog


@dataclass
class ShopContext:

    catalog: ProductCatalog
    cart: Cart = field(default_factory=Cart)
