"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shopcart.application.context import ShopContext
from shopcart.domain.repository.product_catalog import ProductCatalog
from shopcart.infrastructure.catalog.json_catalog import JsonProductCatalog
from shopcart.infrastructure.catalog.static_catalog import StaticProductCatalog

CATALOG_ENV_VAR = "SHOPCART_CATALOG"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    # stderr, so rendered output on stdout stays clean; force so a later
    # call in the same process can still change the level
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def product_catalog(catalog_path: Path | None = None) -> ProductCatalog:
    if catalog_path is None:
        return StaticProductCatalog()
    return JsonProductCatalog(catalog_path)


def shop_context(catalog_path: Path | None = None) -> ShopContext:
    return ShopContext(catalog=product_catalog(catalog_path))
