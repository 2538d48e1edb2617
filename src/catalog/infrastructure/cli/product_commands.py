"""CLI commands for the Product entity.

Each command builds an intent and hands it to the same dispatcher the
message server uses.
"""

from __future__ import annotations

import click

from catalog.application.commands import CreateProduct, DeleteProduct, UpdateProduct
from catalog.application.queries import FindAllProducts, FindOneProduct, ValidateProducts
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product, ProductChanges
from catalog.infrastructure.bootstrap import dispatcher, product_repository
from catalog.infrastructure.cli._runner import run
from catalog.infrastructure.config import get_settings


def _execute(intent: object):
    return run(dispatcher(product_repository()).execute(intent))


def _echo_product(product: Product) -> None:
    state = "available" if product.available else "unavailable"
    click.echo(f"{product.id}  {product.name}  {product.price}  ({state})")


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
def product_create(name: str, price: str) -> None:
    """Add a new product to the catalog."""
    product = _execute(CreateProduct(name=name, price=price))
    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--page", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--limit", default=None, type=click.IntRange(min=1), help="Page size.")
def product_list(page: int, limit: int | None) -> None:
    """List available products, one page at a time."""
    limit = limit or get_settings().default_page_limit
    result = _execute(FindAllProducts(page=page, limit=limit))

    if not result.data:
        click.echo("No products found.")
    else:
        click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>10}")
        click.echo("-" * 70)
        for p in result.data:
            click.echo(f"{p.id:<36}  {p.name:<20} {str(p.price):>10}")

    meta = result.meta
    click.echo(f"Page {meta.page} of {meta.last_page} ({meta.total} available)")


@click.command("show")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_show(product_id) -> None:
    """Show one available product."""
    _echo_product(_execute(FindOneProduct(str(product_id))))


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
def product_update(product_id, name: str | None, price: str | None) -> None:
    """Update a product's name and/or price."""
    product = _execute(UpdateProduct(str(product_id), _changes(name, price)))
    click.echo(f"Product {product.id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_delete(product_id) -> None:
    """Mark a product unavailable."""
    product = _execute(DeleteProduct(str(product_id)))
    click.echo(f"Product {product.id} is no longer available")


@click.command("validate")
@click.argument("product_ids", nargs=-1, type=click.UUID)
def product_validate(product_ids) -> None:
    """Check that every given product exists and is available."""
    products = _execute(ValidateProducts(tuple(str(i) for i in product_ids)))
    click.echo(f"All {len(products)} product(s) are available.")
    for p in products:
        _echo_product(p)


def _changes(name: str | None, price: str | None) -> ProductChanges:
    if name is None and price is None:
        raise click.UsageError("Nothing to update: pass --name and/or --price.")
    try:
        return ProductChanges(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))
