"""Application service: Remove From Cart use case."""

from __future__ import annotations

import logging

from shopcart.application.dto import CartDTO, cart_to_dto
from shopcart.domain.model.cart import Cart

logger = logging.getLogger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, product_id: int) -> CartDTO:
        """Remove the product's line, if any, and return the new cart state."""
        line = self._cart.get_line(product_id)
        if line is None:
            logger.debug("No cart line for product id %s; nothing removed", product_id)
            return cart_to_dto(self._cart)

        self._cart.remove_item(product_id)
        logger.info(
            "Removed %s from cart (total now %s)", line.product.name, self._cart.total
        )
        return cart_to_dto(self._cart)
