"""Domain service: Product/Store association.

Coordinates the two repositories whenever a store is attached to,
looked up on, or detached from a product. Existence of both sides and
membership are checked before anything is mutated, and the association
is only ever persisted through the Product aggregate.

No locking is done here: two concurrent writers on the same product
each read the whole ``stores`` list and the last save wins.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import (
    PRODUCT_NOT_FOUND,
    STORE_NOT_ASSOCIATED,
    STORE_NOT_FOUND,
    EntityNotFoundError,
    PreconditionFailedError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.store import Store
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class AssociationService:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo

    def add_association(self, product_id: str, store_id: str) -> Product:
        """Attach a store to a product and return the saved product.

        No duplicate check is made: adding a store that is already a
        member appends a second entry for it.
        """
        store = self._require_store(store_id)
        product = self._require_product_with_stores(product_id)

        product.add_store(store)
        saved = self._product_repo.save(product)
        logger.info(
            "Store %s associated to product %s",
            store_id, product_id,
            extra={"product_id": product_id, "store_id": store_id},
        )
        return saved

    def list_associated(self, product_id: str) -> list[Store]:
        product = self._require_product_with_stores(product_id)
        logger.debug(
            "Product %s has %d associated stores",
            product_id, len(product.stores),
            extra={"product_id": product_id},
        )
        return product.stores

    def find_associated(self, product_id: str, store_id: str) -> Store:
        """Return the product's entry for ``store_id``.

        Raises PreconditionFailedError if the store exists but is not
        associated to the product.
        """
        store = self._require_store(store_id)
        product = self._require_product_with_stores(product_id)
        return self._require_member(product, store)

    def replace_associations(self, product_id: str, stores: list[Store]) -> Product:
        """Make ``stores`` the product's complete association list.

        Every incoming store id is checked before anything changes; the
        first missing id aborts the call. Only then is the list replaced
        and the product saved.
        """
        product = self._product_repo.get(product_id)
        if product is None:
            raise EntityNotFoundError(PRODUCT_NOT_FOUND, "product", product_id)

        # Phase 1: validate
        for store in stores:
            self._require_store(store.id)

        # Phase 2: replace and persist
        product.replace_stores(stores)
        saved = self._product_repo.save(product)
        logger.info(
            "Product %s associations replaced with %d stores",
            product_id, len(stores),
            extra={"product_id": product_id},
        )
        return saved

    def remove_association(self, product_id: str, store_id: str) -> None:
        store = self._require_store(store_id)
        product = self._require_product_with_stores(product_id)
        self._require_member(product, store)

        product.remove_store(store.id)
        self._product_repo.save(product)
        logger.info(
            "Store %s removed from product %s",
            store_id, product_id,
            extra={"product_id": product_id, "store_id": store_id},
        )

    # --- Internal helpers -----------------------------------------------------

    def _require_store(self, store_id: str | None) -> Store:
        store = self._store_repo.get(store_id) if store_id is not None else None
        if store is None:
            raise EntityNotFoundError(STORE_NOT_FOUND, "store", store_id)
        return store

    def _require_product_with_stores(self, product_id: str) -> Product:
        product = self._product_repo.get_with_relations(product_id)
        if product is None:
            raise EntityNotFoundError(PRODUCT_NOT_FOUND, "product", product_id)
        return product

    @staticmethod
    def _require_member(product: Product, store: Store) -> Store:
        member = product.find_store(store.id)
        if member is None:
            logger.warning(
                "Store %s is not associated to product %s",
                store.id, product.id,
                extra={"product_id": product.id, "store_id": store.id},
            )
            raise PreconditionFailedError(STORE_NOT_ASSOCIATED, "store", store.id)
        return member
