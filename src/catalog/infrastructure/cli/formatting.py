"""Shared console formatting for the CLI commands."""

from __future__ import annotations

import click

from catalog.domain.model.category import Category
from catalog.domain.model.views import CategoryItem, ProductView


def parse_order(values: tuple[str, ...]) -> dict[str, str]:
    """Parse ('title:asc', 'created_at') into {'title': 'ASC', 'created_at': 'ASC'}."""
    order: dict[str, str] = {}
    for value in values:
        field, _, direction = value.partition(":")
        if not field.strip():
            raise click.BadParameter(f"Invalid ordering '{value}'. Expected 'field[:asc|desc]'.")
        order[field.strip()] = (direction or "ASC").strip().upper()
    return order


def category_line(category: Category) -> str:
    return (
        f"{str(category.id):<36}  {category.level:>5}  {category.product_count:>8}  "
        f"{'  ' * category.level}{category.title}"
    )


def category_header() -> None:
    click.echo(f"{'ID':<36}  {'Level':>5}  {'Products':>8}  Title")
    click.echo("-" * 80)


def display_category_item(item: CategoryItem) -> None:
    category = item.category
    click.echo(f"Category {category.id}")
    click.echo(f"  Title:       {category.title}")
    click.echo(f"  Slug:        {category.slug}")
    if category.description is not None:
        click.echo(f"  Description: {category.description}")
    click.echo(f"  Level:       {category.level}")
    click.echo(f"  Products:    {category.product_count}")
    parent = f"{item.parent.title} ({item.parent.id})" if item.parent else "-"
    click.echo(f"  Parent:      {parent}")
    if item.children:
        click.echo("  Children:")
        for child in item.children:
            click.echo(f"    - {child.title} ({child.id})")


def display_product_view(view: ProductView) -> None:
    product = view.product
    click.echo(f"Product {product.id}")
    click.echo(f"  Title:       {product.title}")
    click.echo(f"  Subtitle:    {product.subtitle}")
    click.echo(f"  Slug:        {product.slug}")
    click.echo(f"  Price:       {product.price}")
    click.echo(f"  Category:    {' > '.join(view.category_tree.path)}")
    if product.image.file_name:
        click.echo(f"  Image:       {product.image.file_name}")
    click.echo(f"  Description: {product.description}")
