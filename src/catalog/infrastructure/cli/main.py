import click

from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import Container
from catalog.infrastructure.cli.category_commands import (
    category_create,
    category_delete,
    category_list,
    category_show,
    category_update,
)
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_image,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Catalog: categories and products"""
    if ctx.obj is None:
        ctx.obj = Container()
    configure_logging(ctx.obj.settings)


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("recount")
@click.option("--dry-run", is_flag=True, default=False, help="Report drift without fixing it.")
@click.pass_obj
def recount(container: Container, dry_run: bool) -> None:
    """Reconcile each category's product count with its products."""
    handler = container.recount_products()

    try:
        report = handler.handle(dry_run=dry_run)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if report.is_clean:
        click.echo(f"Checked {report.checked} categories, all counts correct.")
        return

    click.echo(f"{'Category':<30} {'Recorded':>9} {'Actual':>7}")
    click.echo("-" * 48)
    for drift in report.drifts:
        click.echo(f"{drift.title:<30} {drift.recorded:>9} {drift.actual:>7}")
    verb = "Fixed" if report.applied else "Found"
    click.echo(f"{verb} {len(report.drifts)} of {report.checked} categories.")


# Register subcommands
category.add_command(category_create)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_show)
category.add_command(category_update)
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_image)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
