"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from recordstore.application.dto import OrderDTO
from recordstore.application.record_store import RecordStore
from recordstore.domain.exceptions import DomainException
from recordstore.domain.model.order import OrderStatus

_STATUS_CHOICES = [s.value for s in OrderStatus]


@click.command("place")
@click.option("--user-id", required=True, type=int, help="Buyer's user ID.")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.pass_obj
def order_place(store: RecordStore, user_id: int, product_id: int, quantity: int) -> None:
    """Place an order (decrements stock, credits loyalty points)."""
    try:
        order_id = store.place_order(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = OrderDTO.from_domain(store.get_order(order_id))
    click.echo(f"Order #{dto.id} placed  (status={dto.status})")
    click.echo(f"Total: {dto.total_price}")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice(_STATUS_CHOICES, case_sensitive=False),
    help="New status.",
)
@click.pass_obj
def order_status(store: RecordStore, order_id: int, status: str) -> None:
    """Set the status of an order."""
    try:
        store.update_order_status(order_id, OrderStatus.parse(status))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} status set to {status.upper()}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(store: RecordStore, order_id: int) -> None:
    """Show details of an existing order."""
    order = store.get_order(order_id)
    if not order.exists:
        raise click.ClickException(f"Order #{order_id} not found")

    dto = OrderDTO.from_domain(order)
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:      #{dto.user_id}")
    click.echo(f"Product:   #{dto.product_id}")
    click.echo(f"Quantity:  {dto.quantity}")
    click.echo(f"Total:     {dto.total_price}")
    click.echo(f"Ordered:   {dto.ordered}")
    click.echo(f"Delivered: {dto.delivered}")


@click.command("list")
@click.option("--user-id", type=int, default=None, help="Only orders by this user.")
@click.pass_obj
def order_list(store: RecordStore, user_id: int | None) -> None:
    """List orders."""
    orders = [OrderDTO.from_domain(o) for o in store.list_orders(user_id)]

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':>6} {'Product':>8} {'Qty':>5} {'Total':>10} {'Status':<10}")
    click.echo("-" * 50)
    for o in orders:
        click.echo(
            f"{o.id:<6} {o.user_id:>6} {o.product_id:>8} {o.quantity:>5} "
            f"{o.total_price:>10} {o.status:<10}"
        )
