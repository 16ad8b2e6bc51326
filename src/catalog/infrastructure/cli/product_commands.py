"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.application.dto import ProductUpdate
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product, ProductType
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.bootstrap import product_service
from catalog.infrastructure.cli.exitcodes import DomainCommandError

_TYPES = [t.value for t in ProductType]


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path) -> None:
    """List all products in the catalog."""
    products = product_service(data_dir).find_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<32} {'Name':<20} {'Type':<14} {'Price':>10} {'Stores':>7}")
    click.echo("-" * 87)
    for p in products:
        click.echo(
            f"{p.id:<32} {p.name:<20} {p.type:<14} {str(p.price):>10} {len(p.stores):>7}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(data_dir: Path, product_id: str) -> None:
    """Show a product and the stores that carry it."""
    try:
        product = product_service(data_dir).find_one(product_id)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Product #{product.id}")
    click.echo(f"Name:  {product.name}")
    click.echo(f"Type:  {product.type}")
    click.echo(f"Price: {product.price}")
    click.echo(f"Stores: {len(product.stores)}")
    for store in product.stores:
        click.echo(f"  {store.id}  {store.name} ({store.city})")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--type", "product_type", required=True, help=f"One of: {', '.join(_TYPES)}.")
@click.pass_obj
def product_add(data_dir: Path, name: str, price: str, product_type: str) -> None:
    """Add a new product to the catalog."""
    try:
        product = product_service(data_dir).create(
            Product(name=name, price=Money.of(price), type=product_type)
        )
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--type", "product_type", default=None, help=f"One of: {', '.join(_TYPES)}.")
@click.pass_obj
def product_update(
    data_dir: Path,
    product_id: str,
    name: str | None,
    price: str | None,
    product_type: str | None,
) -> None:
    """Update a product's name, price or type."""
    changes = ProductUpdate(name=name, price=price, type=product_type)
    try:
        product = product_service(data_dir).update(product_id, changes)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Product #{product.id} updated: '{product.name}' {product.type} {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(data_dir: Path, product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        product_service(data_dir).delete(product_id)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Product #{product_id} deleted")
