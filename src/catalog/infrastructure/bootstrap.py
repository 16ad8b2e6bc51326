"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from catalog.application.product_service import ProductService
from catalog.application.store_service import StoreService
from catalog.domain.service.association_service import AssociationService
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)
from catalog.infrastructure.persistence.json_table import JsonTable

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def _tables(data_dir: Path) -> tuple[JsonTable, JsonTable, JsonTable]:
    return (
        JsonTable(data_dir / "products.json"),
        JsonTable(data_dir / "stores.json"),
        JsonTable(data_dir / "product_stores.json"),
    )


def product_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonProductRepository:
    products, stores, links = _tables(data_dir)
    return JsonProductRepository(products, stores, links)


def store_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonStoreRepository:
    products, stores, links = _tables(data_dir)
    return JsonStoreRepository(stores, products, links)


def product_service(data_dir: Path = DEFAULT_DATA_DIR) -> ProductService:
    return ProductService(product_repository(data_dir))


def store_service(data_dir: Path = DEFAULT_DATA_DIR) -> StoreService:
    return StoreService(store_repository(data_dir))


def association_service(data_dir: Path = DEFAULT_DATA_DIR) -> AssociationService:
    return AssociationService(
        product_repo=product_repository(data_dir),
        store_repo=store_repository(data_dir),
    )
