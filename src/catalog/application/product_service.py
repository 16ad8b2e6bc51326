"""Application service: Product catalog use cases.

Plain CRUD over the ProductRepository plus the one business rule that
belongs to a product on its own: its type must be an allowed ProductType.
Associations with stores are managed by AssociationService.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from catalog.application.dto import ProductUpdate
from catalog.domain.exceptions import (
    INVALID_PRODUCT,
    PRODUCT_NOT_FOUND,
    EntityNotFoundError,
    PreconditionFailedError,
    ValidationError,
)
from catalog.domain.model.product import Product, ProductType
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def find_all(self) -> list[Product]:
        """Return every product with its stores loaded."""
        return self._product_repo.list_with_relations()

    def find_one(self, product_id: str) -> Product:
        product = self._product_repo.get_with_relations(product_id)
        if product is None:
            raise EntityNotFoundError(PRODUCT_NOT_FOUND, "product", product_id)
        return product

    def create(self, product: Product) -> Product:
        """Add a new product to the catalog."""
        if not ProductType.allows(product.type):
            raise PreconditionFailedError(INVALID_PRODUCT, "product", product.id)
        if not product.name or not product.name.strip():
            raise ValidationError("Product name is required", "product", product.id)

        product.name = product.name.strip()
        saved = self._product_repo.save(product)
        logger.info("Product %s created", saved.id, extra={"product_id": saved.id})
        return saved

    def update(self, product_id: str, changes: ProductUpdate) -> Product:
        """Merge the provided fields over the persisted product.

        The product is loaded without its stores so saving it leaves
        the associations untouched.
        """
        persisted = self._product_repo.get(product_id)
        if persisted is None:
            raise EntityNotFoundError(PRODUCT_NOT_FOUND, "product", product_id)

        if changes.type is not None and not ProductType.allows(changes.type):
            raise PreconditionFailedError(INVALID_PRODUCT, "product", product_id)
        if changes.name is not None and not changes.name.strip():
            raise ValidationError("Product name is required", "product", product_id)

        merged = replace(
            persisted,
            name=changes.name.strip() if changes.name is not None else persisted.name,
            price=(
                Money.of(changes.price, persisted.price.currency)
                if changes.price is not None else persisted.price
            ),
            type=changes.type if changes.type is not None else persisted.type,
        )
        saved = self._product_repo.save(merged)
        logger.info("Product %s updated", product_id, extra={"product_id": product_id})
        return saved

    def delete(self, product_id: str) -> None:
        product = self._product_repo.get(product_id)
        if product is None:
            raise EntityNotFoundError(PRODUCT_NOT_FOUND, "product", product_id)

        self._product_repo.remove(product)
        logger.info("Product %s deleted", product_id, extra={"product_id": product_id})
