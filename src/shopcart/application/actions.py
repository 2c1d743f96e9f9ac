"""Actions the UI can perform on the cart, and the dispatcher that runs them.

The UI layer never mutates the cart itself. It builds an action and hands
it to ``ActionDispatcher.dispatch()``, which returns a fresh cart snapshot
to re-render from.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.clear_cart import ClearCartHandler
from shopcart.application.context import ShopContext
from shopcart.application.dto import CartDTO
from shopcart.application.remove_from_cart import RemoveFromCartHandler


@dataclass(frozen=True)
class AddProduct:
    product_id: int
    quantity: int = 1


@dataclass(frozen=True)
class RemoveProduct:
    product_id: int


@dataclass(frozen=True)
class ClearCart:
    pass


Action = AddProduct | RemoveProduct | ClearCart


class ActionDispatcher:

    def __init__(self, context: ShopContext) -> None:
        self._add = AddToCartHandler(cart=context.cart, catalog=context.catalog)
        self._remove = RemoveFromCartHandler(cart=context.cart)
        self._clear = ClearCartHandler(cart=context.cart)

    def dispatch(self, action: Action) -> CartDTO:
        if isinstance(action, AddProduct):
            return self._add.handle(action.product_id, action.quantity)
        if isinstance(action, RemoveProduct):
            return self._remove.handle(action.product_id)
        if isinstance(action, ClearCart):
            return self._clear.handle()
        raise TypeError(f"Unsupported action: {action!r}")
