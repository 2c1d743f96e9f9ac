"""Application service: Clear Cart use case."""

from __future__ import annotations

import logging

from shopcart.application.dto import CartDTO, cart_to_dto
from shopcart.domain.model.cart import Cart

logger = logging.getLogger(__name__)


class ClearCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        """Drop every line and return the (empty) cart state."""
        dropped = self._cart.line_count
        self._cart.clear()
        logger.info("Cleared cart (%d lines dropped)", dropped)
        return cart_to_dto(self._cart)
