"""CLI commands for the product/store association."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.domain.exceptions import (
    PRODUCT_NOT_FOUND,
    STORE_NOT_FOUND,
    DomainException,
    EntityNotFoundError,
)
from catalog.domain.model.store import Store
from catalog.infrastructure.bootstrap import (
    association_service,
    product_repository,
    store_repository,
)
from catalog.infrastructure.cli.exitcodes import DomainCommandError


def _display_stores(stores: list[Store]) -> None:
    """Shared formatting for a product's store list."""
    if not stores:
        click.echo("No stores associated.")
        return

    click.echo(f"  {'ID':<32} {'Name':<20} {'City':<16}")
    click.echo(f"  {'-'*70}")
    for s in stores:
        click.echo(f"  {s.id:<32} {s.name:<20} {s.city:<16}")


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--store", "store_id", required=True, help="Store ID.")
@click.pass_obj
def association_add(data_dir: Path, product_id: str, store_id: str) -> None:
    """Associate a store to a product."""
    try:
        product = association_service(data_dir).add_association(product_id, store_id)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Store #{store_id} associated to product #{product.id}")
    _display_stores(product.stores)


@click.command("list")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def association_list(data_dir: Path, product_id: str) -> None:
    """List the stores associated to a product."""
    try:
        stores = association_service(data_dir).list_associated(product_id)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    _display_stores(stores)


@click.command("show")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--store", "store_id", required=True, help="Store ID.")
@click.pass_obj
def association_show(data_dir: Path, product_id: str, store_id: str) -> None:
    """Show one store associated to a product."""
    try:
        store = association_service(data_dir).find_associated(product_id, store_id)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Store #{store.id}")
    click.echo(f"Name:    {store.name}")
    click.echo(f"City:    {store.city}")
    click.echo(f"Address: {store.address}")


def _resolve_stores(data_dir: Path, product_id: str, store_ids: tuple[str, ...]) -> list[Store]:
    """Load the stores named on the command line.

    The product is checked first, then each store in order, matching the
    order in which replace_associations reports missing entities.
    """
    if product_repository(data_dir).get(product_id) is None:
        raise EntityNotFoundError(PRODUCT_NOT_FOUND, "product", product_id)

    repo = store_repository(data_dir)
    stores: list[Store] = []
    for sid in store_ids:
        store = repo.get(sid)
        if store is None:
            raise EntityNotFoundError(STORE_NOT_FOUND, "store", sid)
        stores.append(store)
    return stores


@click.command("replace")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option(
    "--store", "store_ids", multiple=True,
    help="Store ID; repeat for each store. Omit to clear the associations.",
)
@click.pass_obj
def association_replace(data_dir: Path, product_id: str, store_ids: tuple[str, ...]) -> None:
    """Replace every store associated to a product."""
    try:
        stores = _resolve_stores(data_dir, product_id, store_ids)
        product = association_service(data_dir).replace_associations(product_id, stores)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Product #{product.id} now has {len(product.stores)} stores")
    _display_stores(product.stores)


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--store", "store_id", required=True, help="Store ID.")
@click.pass_obj
def association_remove(data_dir: Path, product_id: str, store_id: str) -> None:
    """Remove a store from a product."""
    try:
        association_service(data_dir).remove_association(product_id, store_id)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Store #{store_id} removed from product #{product_id}")
