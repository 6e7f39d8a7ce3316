"""CLI commands for the Category aggregate."""

from __future__ import annotations

from uuid import UUID

import click

from catalog.application.dto import UNSET
from catalog.domain.exceptions import DomainException
from catalog.domain.model.views import Pagination
from catalog.infrastructure.bootstrap import Container
from catalog.infrastructure.cli.formatting import (
    category_header,
    category_line,
    display_category_item,
    parse_order,
)


@click.command("create")
@click.option("--title", required=True, help="Category title.")
@click.option("--description", default=None, help="Optional description.")
@click.option("--parent", "parent_id", type=click.UUID, default=None, help="Parent category ID.")
@click.pass_obj
def category_create(container: Container, title: str, description: str | None, parent_id: UUID | None) -> None:
    """Create a category, optionally under a parent."""
    handler = container.create_category()

    try:
        item = handler.handle(title=title, description=description, parent_id=parent_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category '{item.category.title}' created.")
    display_category_item(item)


@click.command("update")
@click.option("--id", "category_id", type=click.UUID, required=True, help="Category ID.")
@click.option("--title", default=None, help="New title (slug follows).")
@click.option("--description", default=None, help="New description.")
@click.option("--parent", "parent_id", type=click.UUID, default=None, help="New parent category ID.")
@click.option("--root", is_flag=True, default=False, help="Detach from its parent.")
@click.pass_obj
def category_update(
    container: Container,
    category_id: UUID,
    title: str | None,
    description: str | None,
    parent_id: UUID | None,
    root: bool,
) -> None:
    """Update a category's title, description or parent."""
    if root and parent_id is not None:
        raise click.ClickException("--root and --parent are mutually exclusive")

    handler = container.update_category()
    new_parent = None if root else (parent_id if parent_id is not None else UNSET)

    try:
        item = handler.handle(
            category_id=category_id,
            title=title,
            description=description,
            parent_id=new_parent,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category_id} updated.")
    display_category_item(item)


@click.command("delete")
@click.option("--id", "category_id", type=click.UUID, required=True, help="Category ID.")
@click.pass_obj
def category_delete(container: Container, category_id: UUID) -> None:
    """Delete an empty category."""
    handler = container.delete_category()

    try:
        handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category_id} deleted.")


@click.command("show")
@click.option("--id", "category_id", type=click.UUID, required=True, help="Category ID.")
@click.pass_obj
def category_show(container: Container, category_id: UUID) -> None:
    """Show a category with its parent and children."""
    handler = container.show_category()

    try:
        item = handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_category_item(item)


@click.command("list")
@click.option("--level", type=int, default=None, help="Only categories at this depth.")
@click.option("--page", default="1", show_default=True, help="Page number; invalid values fall back to 1.")
@click.option("--per-page", "items_per_page", default="30", show_default=True)
@click.option("--order", "order", multiple=True, help="Ordering as 'field[:asc|desc]'.")
@click.pass_obj
def category_list(
    container: Container,
    level: int | None,
    page: str,
    items_per_page: str,
    order: tuple[str, ...],
) -> None:
    """List categories."""
    handler = container.list_categories()
    pagination = Pagination.from_raw(page, items_per_page)
    result = handler.handle(
        pagination,
        level=level,
        order_by=parse_order(order),
    )

    if not result.items:
        click.echo("No categories found.")
        return

    category_header()
    for category in result.items:
        click.echo(category_line(category))
    click.echo(f"Page {pagination.page}/{result.total_pages} ({result.total_items} categories)")
