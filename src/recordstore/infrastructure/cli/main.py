from __future__ import annotations

import click

from recordstore.infrastructure.bootstrap import configure_logging, record_store
from recordstore.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
)
from recordstore.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_stock,
)
from recordstore.infrastructure.cli.user_commands import (
    profile_create,
    profile_show,
    user_create,
    user_list,
    user_show,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding the JSON tables.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log each operation.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """RecordStore: users, products, orders and loyalty profiles."""
    configure_logging(verbose)
    ctx.obj = record_store(data_dir)


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def profile() -> None:
    """Manage user profiles."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
user.add_command(user_create)
user.add_command(user_list)
user.add_command(user_show)
profile.add_command(profile_create)
profile.add_command(profile_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_stock)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
