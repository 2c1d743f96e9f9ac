from pathlib import Path

import click

from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import (
    CATALOG_ENV_VAR,
    configure_logging,
    shop_context,
)
from shopcart.infrastructure.cli.cart_commands import cart_run, cart_shop
from shopcart.infrastructure.cli.product_commands import product_list


@click.group()
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CATALOG_ENV_VAR,
    default=None,
    help=f"JSON catalog file (default: built-in demo catalog; env {CATALOG_ENV_VAR}).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, catalog_path: Path | None, verbose: bool) -> None:
    """shopcart — Shopping Cart"""
    configure_logging(verbose)
    try:
        ctx.obj = shop_context(catalog_path)
    except DomainException as exc:
        raise click.ClickException(str(exc))


# Register subcommands
cli.add_command(product_list)
cli.add_command(cart_run)
cli.add_command(cart_shop)
