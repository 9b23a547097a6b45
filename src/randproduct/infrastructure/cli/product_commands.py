"""CLI commands for product records."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import click

from randproduct.application.add_product import AddProductHandler
from randproduct.application.export_products import FORMATTERS, ExportProductsHandler
from randproduct.application.list_products import ListProductsHandler
from randproduct.application.search_products import SearchProductsHandler
from randproduct.application.show_product import ShowProductHandler
from randproduct.application.update_cost import UpdateCostHandler
from randproduct.domain.exceptions import DomainException, StoreNotFoundError
from randproduct.domain.model.product import Product
from randproduct.infrastructure.bootstrap import product_repository

_NOT_FOUND = (
    "Product data file not found!\n"
    "Please create products first using 'randproduct product add'."
)


def _clip(text: str, width: int) -> str:
    """Shorten ``text`` to ``width`` characters, marking the cut with '...'."""
    if len(text) > width:
        return text[: width - 3] + "..."
    return text


def _open_readonly(data_file: Path | None):
    try:
        return product_repository(data_file, readonly=True)
    except StoreNotFoundError:
        raise click.ClickException(_NOT_FOUND)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _echo_table(products: Iterable[Product]) -> None:
    click.echo(f"{'ID':<8} {'Name':<35} {'Description':<40} {'Cost':>10}")
    click.echo("-" * 96)
    for p in products:
        click.echo(
            f"{p.id:<8} {_clip(p.name, 35):<35} "
            f"{_clip(p.description, 40):<40} {f'${p.cost:.2f}':>10}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name (max 35 chars).")
@click.option("--description", required=True, help="Description (max 75 chars).")
@click.option("--id", "product_id", required=True, help="Product ID (6 chars).")
@click.option("--cost", required=True, help="Cost (e.g. 1.50).")
@click.pass_obj
def product_add(
    data_file: Path | None, name: str, description: str, product_id: str, cost: str
) -> None:
    """Add a product record to the data file."""
    try:
        with product_repository(data_file) as repo:
            handler = AddProductHandler(product_repo=repo)
            dto = handler.handle(
                name=name, description=description, product_id=product_id, cost=cost
            )
            count = repo.record_count
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Record #{dto.number} '{dto.name}' added ({count} records)")


@click.command("search")
@click.argument("term")
@click.pass_obj
def product_search(data_file: Path | None, term: str) -> None:
    """Find products whose name contains TERM (case-insensitive)."""
    if not term.strip():
        raise click.BadParameter("Please enter a search term!", param_hint="TERM")

    try:
        with _open_readonly(data_file) as repo:
            products = SearchProductsHandler(product_repo=repo).handle(term)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    term = term.strip()
    if not products:
        click.echo(f'No products found matching: "{term}"')
        return

    click.echo(f'Search Results for: "{term}"')
    click.echo(f"Found {len(products)} matching product(s)")
    click.echo()
    _echo_table(products)


@click.command("list")
@click.pass_obj
def product_list(data_file: Path | None) -> None:
    """List every product record in storage order."""
    try:
        with _open_readonly(data_file) as repo:
            rows = ListProductsHandler(product_repo=repo).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No products found.")
        return

    click.echo(f"{'#':>5} {'ID':<8} {'Name':<35} {'Cost':>10}")
    click.echo("-" * 61)
    for row in rows:
        click.echo(f"{row.number:>5} {row.id:<8} {_clip(row.name, 35):<35} {row.cost:>10}")


@click.command("show")
@click.argument("number", type=int)
@click.pass_obj
def product_show(data_file: Path | None, number: int) -> None:
    """Show record NUMBER (1-based)."""
    try:
        with _open_readonly(data_file) as repo:
            dto = ShowProductHandler(product_repo=repo).handle(number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Record #{dto.number}")
    click.echo(f"ID:          {dto.id}")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"Cost:        {dto.cost}")


@click.command("count")
@click.pass_obj
def product_count(data_file: Path | None) -> None:
    """Show how many records the data file holds."""
    try:
        with _open_readonly(data_file) as repo:
            count = repo.record_count
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Record Count: {count}")


@click.command("update-cost")
@click.argument("number", type=int)
@click.argument("cost")
@click.pass_obj
def product_update_cost(data_file: Path | None, number: int, cost: str) -> None:
    """Change the cost of record NUMBER (1-based)."""
    try:
        with product_repository(data_file) as repo:
            dto = UpdateCostHandler(product_repo=repo).handle(number, cost)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Record #{dto.number} '{dto.name}' cost updated to {dto.cost}")


@click.command("export")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(sorted(FORMATTERS), case_sensitive=False),
    default="csv",
    show_default=True,
    help="Output format.",
)
@click.pass_obj
def product_export(data_file: Path | None, fmt: str) -> None:
    """Write every record to stdout as CSV, JSON or XML."""
    try:
        with _open_readonly(data_file) as repo:
            text = ExportProductsHandler(product_repo=repo).handle(fmt)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(text, nl=False)
