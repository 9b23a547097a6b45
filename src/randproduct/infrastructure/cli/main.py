from __future__ import annotations

from pathlib import Path

import click

from randproduct.infrastructure.bootstrap import DATA_FILE_ENV, configure_logging
from randproduct.infrastructure.cli.product_commands import (
    product_add,
    product_count,
    product_export,
    product_list,
    product_search,
    product_show,
    product_update_cost,
)


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=DATA_FILE_ENV,
    default=None,
    help="Product data file (default: data/ProductData.dat).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, verbose: bool) -> None:
    """randproduct: product catalogue in a fixed-length record file"""
    configure_logging(verbose)
    ctx.obj = data_file


@cli.group()
def product() -> None:
    """Manage product records."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_count)
product.add_command(product_export)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update_cost)
