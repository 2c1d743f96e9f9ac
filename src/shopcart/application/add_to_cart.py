"""Application service: Add To Cart use case.

Resolves a product id through the catalog and adds it to the cart.
An id the catalog does not know is ignored; the cart stays as it was.
"""

from __future__ import annotations

import logging

from shopcart.application.dto import CartDTO, cart_to_dto
from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, cart: Cart, catalog: ProductCatalog) -> None:
        self._cart = cart
        self._catalog = catalog

    def handle(self, product_id: int, quantity: int = 1) -> CartDTO:
        """Add *quantity* units of the product and return the new cart state.

        Raises ValidationError for a non-positive quantity.
        """
        product = self._catalog.get_by_id(product_id)
        if product is None:
            logger.warning("Ignoring add for unknown product id %s", product_id)
            return cart_to_dto(self._cart)

        self._cart.add_item(product, quantity)
        logger.info(
            "Added %s x %s to cart (total now %s)",
            quantity,
            product.name,
            self._cart.total,
        )
        return cart_to_dto(self._cart)
