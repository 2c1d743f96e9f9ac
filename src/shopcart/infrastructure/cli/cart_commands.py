"""CLI commands that drive the cart.

Both commands go through the ActionDispatcher and re-render the whole
cart after every action, the way the page redraws after each click.
"""

from __future__ import annotations

import click

from shopcart.application.actions import (
    Action,
    ActionDispatcher,
    AddProduct,
    ClearCart,
    RemoveProduct,
)
from shopcart.application.context import ShopContext
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.view.text_view import render_cart, render_products

SHOP_HELP = """Commands:
  add <id> [qty]   add a product to the cart
  remove <id>      remove a product from the cart
  clear            empty the cart
  cart             show the cart
  products         list the catalog
  quit             leave the shop"""


def _parse_int(value: str, what: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter(f"Invalid {what} '{value}'.")


def _parse_action(tokens: list[str]) -> Action:
    """Build an action from ['add', '3'], ['add', '3', '2'] or ['remove', '3']."""
    if not tokens:
        raise click.BadParameter("Empty action.")

    verb, args = tokens[0].lower(), tokens[1:]
    if verb == "add" and len(args) in (1, 2):
        product_id = _parse_int(args[0], "product id")
        quantity = _parse_int(args[1], "quantity") if len(args) == 2 else 1
        return AddProduct(product_id=product_id, quantity=quantity)
    if verb == "remove" and len(args) == 1:
        return RemoveProduct(product_id=_parse_int(args[0], "product id"))

    raise click.BadParameter(
        f"Invalid action '{' '.join(tokens)}'. Expected add <id> [qty] or remove <id>."
    )


@click.command("run")
@click.argument("actions", nargs=-1, required=True)
@click.pass_obj
def cart_run(context: ShopContext, actions: tuple[str, ...]) -> None:
    """Apply ACTIONS in order, showing the cart after each.

    Each action is 'add:<id>', 'add:<id>:<qty>' or 'remove:<id>'.
    """
    # Parse everything first so a typo in the last action applies nothing.
    parsed = [_parse_action(raw.split(":")) for raw in actions]

    dispatcher = ActionDispatcher(context)
    for raw, action in zip(actions, parsed):
        try:
            cart = dispatcher.dispatch(action)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        click.echo(f"> {raw}")
        click.echo(render_cart(cart))
        click.echo()


@click.command("shop")
@click.pass_obj
def cart_shop(context: ShopContext) -> None:
    """Start an interactive shopping session."""
    dispatcher = ActionDispatcher(context)
    show_cart = ShowCartHandler(cart=context.cart)
    list_products = ListProductsHandler(catalog=context.catalog)

    click.echo(render_products(list_products.handle()))
    click.echo()
    click.echo(SHOP_HELP)

    while True:
        try:
            line = click.prompt("shop", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            # end of input
            click.echo()
            return

        tokens = line.split()
        if not tokens:
            continue
        command = tokens[0].lower()

        if command in ("quit", "exit"):
            return
        if command == "help":
            click.echo(SHOP_HELP)
            continue
        if command == "products":
            click.echo(render_products(list_products.handle()))
            continue
        if command == "cart":
            click.echo(render_cart(show_cart.handle()))
            continue
        if command == "clear":
            click.echo(render_cart(dispatcher.dispatch(ClearCart())))
            continue

        try:
            cart = dispatcher.dispatch(_parse_action(tokens))
        except click.BadParameter as exc:
            click.echo(f"Error: {exc.format_message()}", err=True)
            continue
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
            continue
        click.echo(render_cart(cart))
