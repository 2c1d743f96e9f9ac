"""Integration tests for the cart use cases.

Uses the in-memory fake catalog — no file I/O.
"""

import logging

import pytest

from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.clear_cart import ClearCartHandler
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.remove_from_cart import RemoveFromCartHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import Cart
from tests.fakes import FakeProductCatalog


def _setup() -> tuple[AddToCartHandler, RemoveFromCartHandler, Cart, FakeProductCatalog]:
    cart = Cart()
    catalog = FakeProductCatalog()
    return (
        AddToCartHandler(cart, catalog),
        RemoveFromCartHandler(cart),
        cart,
        catalog,
    )


class TestAddToCart:

    def test_adds_known_product(self):
        add, _, cart, catalog = _setup()
        dto = add.handle(1)
        assert catalog.lookups == [1]
        assert cart.line_count == 1
        assert dto.total == "$999.99"
        assert dto.lines[0].product_name == "Laptop"
        assert dto.lines[0].quantity == 1
        assert dto.lines[0].subtotal == "$999.99"

    def test_quantity_is_passed_through(self):
        add, _, _, _ = _setup()
        dto = add.handle(3, quantity=3)
        assert dto.lines[0].quantity == 3
        assert dto.total == "$599.97"
        assert dto.item_count == 3

    def test_unknown_product_is_noop(self, caplog):
        add, _, cart, _ = _setup()
        add.handle(1)
        with caplog.at_level(logging.WARNING):
            dto = add.handle(42)
        assert cart.line_count == 1
        assert dto.total == "$999.99"
        assert "unknown product id 42" in caplog.text

    def test_unknown_product_with_bad_quantity_is_still_noop(self):
        add, _, cart, _ = _setup()
        add.handle(42, quantity=0)
        assert cart.is_empty

    def test_bad_quantity_for_known_product_raises(self):
        add, _, cart, _ = _setup()
        with pytest.raises(ValidationError):
            add.handle(1, quantity=-2)
        assert cart.is_empty


class TestRemoveFromCart:

    def test_removes_line(self):
        add, remove, cart, _ = _setup()
        add.handle(1)
        add.handle(2)
        dto = remove.handle(1)
        assert [line.product_name for line in dto.lines] == ["Smartphone"]
        assert dto.total == "$599.99"
        assert cart.get_line(1) is None

    def test_absent_id_is_noop(self):
        add, remove, cart, _ = _setup()
        add.handle(2)
        dto = remove.handle(1)
        assert cart.line_count == 1
        assert dto.total == "$599.99"


class TestClearCart:

    def test_drops_every_line(self, caplog):
        add, _, cart, _ = _setup()
        add.handle(1)
        add.handle(2, 3)
        with caplog.at_level(logging.INFO):
            dto = ClearCartHandler(cart).handle()
        assert cart.is_empty
        assert dto.is_empty
        assert dto.item_count == 0
        assert "2 lines dropped" in caplog.text

    def test_empty_cart_stays_empty(self):
        cart = Cart()
        assert ClearCartHandler(cart).handle().total == "$0.00"
        assert cart.is_empty


class TestShowCart:

    def test_empty_cart(self):
        dto = ShowCartHandler(Cart()).handle()
        assert dto.is_empty
        assert dto.total == "$0.00"
        assert dto.item_count == 0

    def test_reflects_current_state(self):
        add, _, cart, _ = _setup()
        add.handle(1, 2)
        add.handle(3)
        dto = ShowCartHandler(cart).handle()
        assert [(l.product_id, l.quantity) for l in dto.lines] == [(1, 2), (3, 1)]
        assert dto.total == "$2199.97"


class TestListProducts:

    def test_lists_catalog_in_order(self):
        dtos = ListProductsHandler(FakeProductCatalog()).handle()
        assert [(p.id, p.name, p.price) for p in dtos] == [
            (1, "Laptop", "$999.99"),
            (2, "Smartphone", "$599.99"),
            (3, "Headphones", "$199.99"),
        ]

    def test_empty_catalog(self):
        assert ListProductsHandler(FakeProductCatalog([])).handle() == []
