"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.model.views import Pagination
from catalog.infrastructure.bootstrap import Container
from catalog.infrastructure.cli.formatting import display_product_view, parse_order


@click.command("create")
@click.option("--title", required=True, help="Product title.")
@click.option("--subtitle", required=True, help="Short subtitle.")
@click.option("--description", required=True, help="Full description.")
@click.option("--price", required=True, help="Price in major units (e.g. 12.50).")
@click.option("--category", "category_id", type=click.UUID, required=True, help="Category ID.")
@click.pass_obj
def product_create(
    container: Container,
    title: str,
    subtitle: str,
    description: str,
    price: str,
    category_id: UUID,
) -> None:
    """Add a new product to a category."""
    handler = container.create_product()

    try:
        view = handler.handle(
            title=title,
            subtitle=subtitle,
            description=description,
            price=price,
            category_id=category_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{view.product.title}' created.")
    display_product_view(view)


@click.command("update")
@click.option("--id", "product_id", type=click.UUID, required=True, help="Product ID.")
@click.option("--title", default=None, help="New title (slug follows).")
@click.option("--subtitle", default=None, help="New subtitle.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", "category_id", type=click.UUID, default=None, help="Move to category.")
@click.pass_obj
def product_update(
    container: Container,
    product_id: UUID,
    title: str | None,
    subtitle: str | None,
    description: str | None,
    price: str | None,
    category_id: UUID | None,
) -> None:
    """Update any subset of a product's fields."""
    handler = container.update_product()

    try:
        view = handler.handle(
            product_id=product_id,
            title=title,
            subtitle=subtitle,
            description=description,
            price=price,
            category_id=category_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} updated.")
    display_product_view(view)


@click.command("delete")
@click.option("--id", "product_id", type=click.UUID, required=True, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: UUID) -> None:
    """Delete a product."""
    handler = container.delete_product()

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")


@click.command("show")
@click.option("--id", "product_id", type=click.UUID, required=True, help="Product ID.")
@click.pass_obj
def product_show(container: Container, product_id: UUID) -> None:
    """Show a product with its category path."""
    handler = container.show_product()

    try:
        view = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product_view(view)


@click.command("list")
@click.option("--title", default=None, help="Filter on title (substring).")
@click.option("--subtitle", default=None, help="Filter on subtitle (substring).")
@click.option("--description", default=None, help="Filter on description (substring).")
@click.option("--page", default="1", show_default=True, help="Page number; invalid values fall back to 1.")
@click.option("--per-page", "items_per_page", default="30", show_default=True)
@click.option("--order", "order", multiple=True, help="Ordering as 'field[:asc|desc]'.")
@click.pass_obj
def product_list(
    container: Container,
    title: str | None,
    subtitle: str | None,
    description: str | None,
    page: str,
    items_per_page: str,
    order: tuple[str, ...],
) -> None:
    """List products in the catalog."""
    handler = container.list_products()
    pagination = Pagination.from_raw(page, items_per_page)
    result = handler.handle(
        pagination,
        title=title,
        subtitle=subtitle,
        description=description,
        order_by=parse_order(order),
    )

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Title':<30} {'Price':>14}")
    click.echo("-" * 84)
    for p in result.items:
        click.echo(f"{str(p.id):<36}  {p.title.value:<30} {str(p.price):>14}")
    click.echo(f"Page {pagination.page}/{result.total_pages} ({result.total_items} products)")


@click.command("image")
@click.option("--id", "product_id", type=click.UUID, required=True, help="Product ID.")
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Image file to attach.",
)
@click.pass_obj
def product_image(container: Container, product_id: UUID, file_path: Path) -> None:
    """Attach an image to a product."""
    handler = container.update_product_image()

    try:
        view = handler.handle(product_id, container.image_file(file_path))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Image '{view.product.image.file_name}' attached to product {product_id}.")
