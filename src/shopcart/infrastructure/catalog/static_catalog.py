"""In-memory implementation of ProductCatalog."""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.product_catalog import ProductCatalog

DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="Laptop", price=Money.of("999.99")),
    Product(id=2, name="Smartphone", price=Money.of("599.99")),
    Product(id=3, name="Headphones", price=Money.of("199.99")),
    Product(id=4, name="Smart Watch", price=Money.of("249.50")),
    Product(id=5, name="Tablet", price=Money.of("399.00")),
    Product(id=6, name="Keyboard", price=Money.of("49.99")),
)


class StaticProductCatalog(ProductCatalog):

    def __init__(self, products: list[Product] | None = None) -> None:
        # Later duplicates of an id are unreachable by lookup but still listed.
        self._products = list(DEFAULT_PRODUCTS if products is None else products)
        self._by_id: dict[int, Product] = {}
        for p in self._products:
            self._by_id.setdefault(p.id, p)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._by_id.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._products)
