"""CLI commands for the ClothingSet aggregate."""

from __future__ import annotations

import click

from rentals.application.add_clothing_set import AddClothingSetHandler
from rentals.application.remove_clothing_set import RemoveClothingSetHandler
from rentals.application.update_clothing_set import UpdateClothingSetHandler
from rentals.domain.exceptions import DomainException
from rentals.infrastructure.bootstrap import category_repository, clothing_set_repository
from rentals.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Clothing set name.")
@click.option("--category", required=True, help="Category name.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units owned.")
@click.option("--price", required=True, help="Price per day (e.g. 150000).")
@click.option("--description", default=None, help="Description.")
@click.option("--image-url", default=None, help="Image URL.")
@click.pass_obj
def set_add(
    settings: Settings,
    name: str,
    category: str,
    quantity: int,
    price: str,
    description: str | None,
    image_url: str | None,
) -> None:
    """Add a clothing set to the catalog."""
    handler = AddClothingSetHandler(
        clothing_set_repo=clothing_set_repository(settings),
        category_repo=category_repository(settings),
        currency=settings.currency,
    )

    try:
        clothing_set = handler.handle(
            name=name,
            category=category,
            quantity=quantity,
            price_per_day=price,
            description=description,
            image_url=image_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Clothing set #{clothing_set.id} '{clothing_set.name}' added "
        f"({clothing_set.quantity} units at {clothing_set.price_per_day}/day)"
    )


@click.command("list")
@click.option("--category", default=None, help="Only sets in this category.")
@click.pass_obj
def set_list(settings: Settings, category: str | None) -> None:
    """List active clothing sets."""
    repo = clothing_set_repository(settings)
    sets = repo.list_by_category(category) if category else repo.list_all()

    if not sets:
        click.echo("No clothing sets found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<24} {'Units':>6} {'Per day':>18}")
    click.echo("-" * 82)
    for s in sets:
        click.echo(
            f"{s.id:<6} {s.name:<24} {s.category:<24} {s.quantity:>6} {str(s.price_per_day):>18}"
        )


@click.command("show")
@click.option("--id", "set_id", required=True, type=int, help="Clothing set ID.")
@click.pass_obj
def set_show(settings: Settings, set_id: int) -> None:
    """Show one clothing set."""
    clothing_set = clothing_set_repository(settings).get_by_id(set_id)
    if clothing_set is None:
        raise click.ClickException(f"Clothing set #{set_id} not found")

    state = "active" if clothing_set.is_active else "removed"
    click.echo(f"Clothing set #{clothing_set.id} '{clothing_set.name}' ({state})")
    click.echo(f"Category:  {clothing_set.category}")
    click.echo(f"Units:     {clothing_set.quantity}")
    click.echo(f"Per day:   {clothing_set.price_per_day}")
    if clothing_set.description:
        click.echo(f"About:     {clothing_set.description}")
    if clothing_set.image_url:
        click.echo(f"Image:     {clothing_set.image_url}")


@click.command("update")
@click.option("--id", "set_id", required=True, type=int, help="Clothing set ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", default=None, help="New category name.")
@click.option("--quantity", default=None, type=int, help="New number of units owned.")
@click.option("--price", default=None, help="New price per day.")
@click.option("--description", default=None, help="New description.")
@click.option("--image-url", default=None, help="New image URL.")
@click.pass_obj
def set_update(
    settings: Settings,
    set_id: int,
    name: str | None,
    category: str | None,
    quantity: int | None,
    price: str | None,
    description: str | None,
    image_url: str | None,
) -> None:
    """Update a clothing set."""
    handler = UpdateClothingSetHandler(
        clothing_set_repo=clothing_set_repository(settings),
        category_repo=category_repository(settings),
    )

    try:
        handler.handle(
            set_id,
            name=name,
            category=category,
            quantity=quantity,
            price_per_day=price,
            description=description,
            image_url=image_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Clothing set #{set_id} updated")


@click.command("remove")
@click.option("--id", "set_id", required=True, type=int, help="Clothing set ID.")
@click.pass_obj
def set_remove(settings: Settings, set_id: int) -> None:
    """Remove a clothing set from the catalog."""
    handler = RemoveClothingSetHandler(clothing_set_repo=clothing_set_repository(settings))

    try:
        handler.handle(set_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Clothing set #{set_id} removed.")
