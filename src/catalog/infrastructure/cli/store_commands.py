"""CLI commands for stores."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.application.dto import StoreUpdate
from catalog.domain.exceptions import DomainException
from catalog.domain.model.store import Store
from catalog.infrastructure.bootstrap import store_service
from catalog.infrastructure.cli.exitcodes import DomainCommandError


@click.command("list")
@click.pass_obj
def store_list(data_dir: Path) -> None:
    """List all stores."""
    stores = store_service(data_dir).find_all()

    if not stores:
        click.echo("No stores found.")
        return

    click.echo(f"{'ID':<32} {'Name':<20} {'City':<16} {'Address'}")
    click.echo("-" * 90)
    for s in stores:
        click.echo(f"{s.id:<32} {s.name:<20} {s.city:<16} {s.address}")


@click.command("show")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.pass_obj
def store_show(data_dir: Path, store_id: str) -> None:
    """Show a store and the products it carries."""
    try:
        store = store_service(data_dir).find_one(store_id)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Store #{store.id}")
    click.echo(f"Name:    {store.name}")
    click.echo(f"City:    {store.city}")
    click.echo(f"Address: {store.address}")
    click.echo(f"Products: {len(store.products)}")
    for product in store.products:
        click.echo(f"  {product.id}  {product.name}")


@click.command("add")
@click.option("--name", required=True, help="Store name.")
@click.option("--city", required=True, help="City.")
@click.option("--address", required=True, help="Street address.")
@click.pass_obj
def store_add(data_dir: Path, name: str, city: str, address: str) -> None:
    """Register a new store."""
    try:
        store = store_service(data_dir).create(Store(name=name, city=city, address=address))
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Store #{store.id} '{store.name}' added in {store.city}")


@click.command("update")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--city", default=None, help="New city.")
@click.option("--address", default=None, help="New address.")
@click.pass_obj
def store_update(
    data_dir: Path,
    store_id: str,
    name: str | None,
    city: str | None,
    address: str | None,
) -> None:
    """Update a store's details."""
    changes = StoreUpdate(name=name, city=city, address=address)
    try:
        store = store_service(data_dir).update(store_id, changes)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Store #{store.id} updated: '{store.name}' {store.city}, {store.address}")


@click.command("delete")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.pass_obj
def store_delete(data_dir: Path, store_id: str) -> None:
    """Remove a store (and its product associations)."""
    try:
        store_service(data_dir).delete(store_id)
    except DomainException as exc:
        raise DomainCommandError(exc) from exc

    click.echo(f"Store #{store_id} deleted")
