"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from recordstore.application.dto import ProductDTO
from recordstore.application.record_store import RecordStore
from recordstore.domain.exceptions import DomainException


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", help="Free-form description.")
@click.option("--price", required=True, type=int, help="Price in the smallest currency unit.")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--owner", required=True, help="Owner account identifier.")
@click.pass_obj
def product_add(
    store: RecordStore,
    name: str,
    description: str,
    price: int,
    stock: int,
    owner: str,
) -> None:
    """Add a new product to the catalog."""
    try:
        product_id = store.add_product(
            name=name, description=description, price=price, stock=stock, owner=owner
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} '{name}' added at {price} ({stock} in stock)")


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
@click.pass_obj
def product_stock(store: RecordStore, product_id: int, quantity: int) -> None:
    """Overwrite a product's stock level."""
    try:
        store.update_product_stock(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} stock set to {quantity}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(store: RecordStore, product_id: int) -> None:
    """Show a product."""
    product = store.get_product(product_id)
    if not product.exists:
        raise click.ClickException(f"Product #{product_id} not found")

    dto = ProductDTO.from_domain(product)
    click.echo(f"Product #{dto.id}  ({'available' if dto.available else 'unavailable'})")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"Price:       {dto.price}")
    click.echo(f"Stock:       {dto.stock}")
    click.echo(f"Owner:       {dto.owner}")


@click.command("list")
@click.pass_obj
def product_list(store: RecordStore) -> None:
    """List all products in the catalog."""
    products = store.list_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8} {'Available':>10}")
    click.echo("-" * 58)
    for p in products:
        available = "yes" if p.is_available else "no"
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>8} {available:>10}")
