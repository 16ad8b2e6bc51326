"""Integration tests for the ProductService use cases."""

from decimal import Decimal

import pytest

from catalog.application.dto import ProductUpdate
from catalog.application.product_service import ProductService
from catalog.domain.exceptions import (
    EntityNotFoundError,
    PreconditionFailedError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.store import Store
from catalog.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _setup() -> tuple[ProductService, FakeProductRepository]:
    store = Store(id="s1", name="Centro", city="Bogota", address="Calle 1")
    products = [
        Product(name="Milk", price=Money.of("2500"), type="Perishable", stores=[store]),
        Product(name="Rice", price=Money.of("4000"), type="NonPerishable"),
        Product(name="Salt", price=Money.of("1200"), type="NonPerishable"),
    ]
    repo = FakeProductRepository(products)
    return ProductService(repo), repo


class TestFindProducts:

    def test_find_all(self):
        service, _ = _setup()
        products = service.find_all()
        assert len(products) == 3
        assert all(p.stores is not None for p in products)

    def test_find_one(self):
        service, _ = _setup()
        product = service.find_one("1")
        assert product.name == "Milk"
        assert product.stores[0].name == "Centro"

    def test_find_one_invalid_rejected(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="The product with the given id was not found"):
            service.find_one("0")


class TestCreateProduct:

    def test_create_assigns_id_and_persists(self):
        service, repo = _setup()
        product = service.create(
            Product(name="Bread", price=Money.of("3000"), type="Perishable")
        )
        assert product.id is not None
        assert repo.get(product.id).name == "Bread"

    def test_create_strips_name(self):
        service, _ = _setup()
        product = service.create(
            Product(name="  Bread ", price=Money.of("3000"), type="Perishable")
        )
        assert product.name == "Bread"

    def test_invalid_type_rejected(self):
        service, repo = _setup()
        with pytest.raises(PreconditionFailedError, match="Invalid product data"):
            service.create(Product(name="Ice", price=Money.of("1"), type="Frozen"))
        assert len(repo.list_all()) == 3

    def test_blank_name_rejected(self):
        service, _ = _setup()
        with pytest.raises(ValidationError, match="name is required"):
            service.create(Product(name="  ", price=Money.of("1"), type="Perishable"))


class TestUpdateProduct:

    def test_update_merges_fields(self):
        service, repo = _setup()
        service.update("2", ProductUpdate(price="4500.50"))

        product = repo.get("2")
        assert product.name == "Rice"
        assert product.type == "NonPerishable"
        assert product.price.amount == Decimal("4500.50")

    def test_update_price_keeps_currency(self):
        service, repo = _setup()
        repo.save(
            Product(id="9", name="Coffee", price=Money.of("8000", "COP"), type="NonPerishable")
        )

        service.update("9", ProductUpdate(price="9500"))

        assert repo.get("9").price == Money.of("9500", "COP")

    def test_update_keeps_associations(self):
        service, repo = _setup()
        service.update("1", ProductUpdate(name="Whole milk"))

        product = repo.get_with_relations("1")
        assert product.name == "Whole milk"
        assert [s.id for s in product.stores] == ["s1"]

    def test_update_invalid_product_rejected(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="The product with the given id was not found"):
            service.update("0", ProductUpdate(name="Nothing"))

    def test_update_invalid_type_rejected(self):
        service, repo = _setup()
        with pytest.raises(PreconditionFailedError, match="Invalid product data"):
            service.update("1", ProductUpdate(type="Frozen"))
        assert repo.get("1").type == "Perishable"

    def test_update_negative_price_rejected(self):
        service, _ = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            service.update("1", ProductUpdate(price="-1"))


class TestDeleteProduct:

    def test_delete_removes_product(self):
        service, repo = _setup()
        service.delete("3")
        assert repo.get("3") is None

    def test_delete_invalid_product_rejected(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="The product with the given id was not found"):
            service.delete("0")
