"""Abstract repository for the Product aggregate.

Concrete implementations (JSON, in-memory) live in the infrastructure
layer and in the test fakes.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.entity_store import EntityStore


class ProductRepository(EntityStore[Product]):
    """EntityStore for products.

    ``get_with_relations`` fills ``Product.stores``. ``save`` writes the
    association when ``stores`` is a list and leaves it untouched when it
    is ``None``.
    """
