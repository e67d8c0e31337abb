"""CLI commands for users and their profiles."""

from __future__ import annotations

import click

from recordstore.application.dto import ProfileDTO, UserDTO
from recordstore.application.record_store import RecordStore
from recordstore.domain.exceptions import DomainException


@click.command("create")
@click.option("--name", required=True, help="User name.")
@click.option("--email", required=True, help="Contact email.")
@click.option("--wallet", required=True, help="Account identifier.")
@click.pass_obj
def user_create(store: RecordStore, name: str, email: str, wallet: str) -> None:
    """Register a new user."""
    user_id = store.create_user(name=name, email=email, wallet=wallet)
    click.echo(f"User #{user_id} '{name}' created")


@click.command("show")
@click.option("--id", "user_id", required=True, type=int, help="User ID.")
@click.pass_obj
def user_show(store: RecordStore, user_id: int) -> None:
    """Show a user."""
    user = store.get_user(user_id)
    if not user.exists:
        raise click.ClickException(f"User #{user_id} not found")

    dto = UserDTO.from_domain(user)
    click.echo(f"User #{dto.id}  ({'active' if dto.active else 'inactive'})")
    click.echo(f"Name:       {dto.name}")
    click.echo(f"Email:      {dto.email}")
    click.echo(f"Wallet:     {dto.wallet}")
    click.echo(f"Registered: {dto.registered}")


@click.command("list")
@click.pass_obj
def user_list(store: RecordStore) -> None:
    """List all users."""
    users = store.list_users()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<28} {'Wallet':<20}")
    click.echo("-" * 77)
    for u in users:
        click.echo(f"{u.id:<6} {u.name:<20} {u.email:<28} {u.wallet:<20}")


@click.command("create")
@click.option("--user-id", required=True, type=int, help="User ID.")
@click.option("--street", default="", help="Street address.")
@click.option("--city", default="", help="City.")
@click.option("--state", default="", help="State or region.")
@click.option("--zip", "zip_code", default="", help="Postal code.")
@click.option("--country", default="", help="Country.")
@click.pass_obj
def profile_create(
    store: RecordStore,
    user_id: int,
    street: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
) -> None:
    """Create (or replace) the profile of a user."""
    try:
        store.create_user_profile(
            user_id,
            street=street,
            city=city,
            state=state,
            zip_code=zip_code,
            country=country,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Profile for user #{user_id} created")


@click.command("show")
@click.option("--user-id", required=True, type=int, help="User ID.")
@click.pass_obj
def profile_show(store: RecordStore, user_id: int) -> None:
    """Show a user's profile with order count and loyalty points."""
    profile = store.get_user_profile(user_id)
    if not profile.exists:
        raise click.ClickException(f"No profile for user #{user_id}")

    dto = ProfileDTO.from_domain(profile)
    click.echo(f"Profile of user #{dto.user.id} '{dto.user.name}'")
    click.echo(f"Address:        {dto.address or '-'}")
    click.echo(f"Total orders:   {dto.total_orders}")
    click.echo(f"Loyalty points: {dto.loyalty_points}")
