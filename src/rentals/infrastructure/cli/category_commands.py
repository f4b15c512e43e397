"""CLI commands for the Category aggregate."""

from __future__ import annotations

import click

from rentals.application.add_category import AddCategoryHandler
from rentals.application.delete_category import DeleteCategoryHandler
from rentals.application.seed_categories import SeedCategoriesHandler
from rentals.application.update_category import UpdateCategoryHandler
from rentals.domain.exceptions import DomainException
from rentals.infrastructure.bootstrap import category_repository, clothing_set_repository
from rentals.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--description", default=None, help="Description.")
@click.pass_obj
def category_add(settings: Settings, name: str, description: str | None) -> None:
    """Add a new category."""
    handler = AddCategoryHandler(category_repo=category_repository(settings))

    try:
        category = handler.handle(name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}' added")


@click.command("list")
@click.pass_obj
def category_list(settings: Settings) -> None:
    """List active categories."""
    categories = category_repository(settings).list_all()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} Description")
    click.echo("-" * 70)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<28} {c.description or ''}")


@click.command("show")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.pass_obj
def category_show(settings: Settings, category_id: int) -> None:
    """Show one category and the clothing sets filed under it."""
    category = category_repository(settings).get_by_id(category_id)
    if category is None or not category.is_active:
        raise click.ClickException(f"Category #{category_id} not found")

    sets = clothing_set_repository(settings).list_by_category(category.name)
    click.echo(f"Category #{category.id} '{category.name}'")
    if category.description:
        click.echo(f"About:  {category.description}")
    click.echo(f"Sets:   {', '.join(s.name for s in sets) or '-'}")


@click.command("update")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def category_update(
    settings: Settings,
    category_id: int,
    name: str | None,
    description: str | None,
) -> None:
    """Rename or re-describe a category."""
    handler = UpdateCategoryHandler(
        category_repo=category_repository(settings),
        clothing_set_repo=clothing_set_repository(settings),
    )

    try:
        category = handler.handle(category_id, name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}' updated")


@click.command("delete")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.pass_obj
def category_delete(settings: Settings, category_id: int) -> None:
    """Delete a category no active clothing set uses."""
    handler = DeleteCategoryHandler(
        category_repo=category_repository(settings),
        clothing_set_repo=clothing_set_repository(settings),
    )

    try:
        handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} deleted.")


@click.command("seed")
@click.pass_obj
def category_seed(settings: Settings) -> None:
    """Add the default categories that are missing."""
    added = SeedCategoriesHandler(category_repo=category_repository(settings)).handle()
    click.echo(f"{len(added)} default categories added.")
