from pathlib import Path

import click

from catalog.infrastructure.bootstrap import DEFAULT_DATA_DIR
from catalog.infrastructure.cli.association_commands import (
    association_add,
    association_list,
    association_remove,
    association_replace,
    association_show,
)
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.store_commands import (
    store_add,
    store_delete,
    store_list,
    store_show,
    store_update,
)
from catalog.infrastructure.observability import setup_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="CATALOG_DATA_DIR",
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="CATALOG_LOG_LEVEL",
    show_default=True,
)
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"]),
    default="text",
    envvar="CATALOG_LOG_FORMAT",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str, log_format: str) -> None:
    """Catalog: products, stores and where each product is sold"""
    setup_logging(log_level, log_format)
    ctx.obj = data_dir


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def store() -> None:
    """Manage stores."""


@cli.group("product-store")
def product_store() -> None:
    """Manage the stores associated to a product."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
store.add_command(store_add)
store.add_command(store_delete)
store.add_command(store_list)
store.add_command(store_show)
store.add_command(store_update)
product_store.add_command(association_add)
product_store.add_command(association_list)
product_store.add_command(association_remove)
product_store.add_command(association_replace)
product_store.add_command(association_show)
