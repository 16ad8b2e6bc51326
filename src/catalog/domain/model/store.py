"""Store entity.

A physical point of sale. Stores are created and removed on their own;
which products a store carries is decided from the Product side.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalog.domain.model.product import Product


@dataclass
class Store:
    """A store that products can be associated with.

    ``products`` is the inverse side of the product/store association.
    It is only filled in when the store is loaded with its relations and
    is never written back from here. It takes no part in equality so two
    loads of the same store compare equal.
    """

    name: str
    city: str
    address: str
    id: str | None = None
    products: list[Product] | None = field(default=None, compare=False, repr=False)
