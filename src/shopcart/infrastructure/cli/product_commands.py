"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shopcart.application.context import ShopContext
from shopcart.application.list_products import ListProductsHandler
from shopcart.infrastructure.view.text_view import render_products


@click.command("products")
@click.pass_obj
def product_list(context: ShopContext) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(catalog=context.catalog)
    click.echo(render_products(handler.handle()))
