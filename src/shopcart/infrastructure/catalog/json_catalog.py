"""JSON-file-backed implementation of ProductCatalog.

The file is a JSON array of ``{"id": 1, "name": "Laptop", "price": "999.99"}``
records. It is read once, when the catalog is constructed; the catalog is
fixed for the rest of the session.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from shopcart.domain.exceptions import CatalogError, ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.infrastructure.catalog.static_catalog import StaticProductCatalog

logger = logging.getLogger(__name__)


class JsonProductCatalog(StaticProductCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        super().__init__(self._load())
        logger.debug("Loaded %d products from %s", len(self._products), file_path)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise CatalogError(f"Cannot read catalog file {self._file_path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise CatalogError(f"Catalog file {self._file_path} is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Catalog file {self._file_path} is not valid JSON: {exc}") from exc

        if not isinstance(raw, list):
            raise CatalogError(f"Catalog file {self._file_path} must contain a JSON array")

        return [self._to_domain(item, index) for index, item in enumerate(raw)]

    def _to_domain(self, item: dict, index: int) -> Product:
        try:
            return Product(
                id=int(item["id"]),
                name=str(item["name"]),
                price=Money.of(item["price"]),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise CatalogError(
                f"Invalid product record #{index} in {self._file_path}: {exc}"
            ) from exc
