"""CLI for the storefront retail simulation.

Usage:
    python -m storefront shop                        # Interactive shopping session
    python -m storefront shop --seed 7 --verbose     # Repeatable delivery dates, debug log
    python -m storefront catalog                     # Catalog with stock levels
    python -m storefront catalog --category clothing # One category only
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from storefront.catalog import build_catalog, parse_category
from storefront.config import ShopConfig
from storefront.errors import ConfigError
from storefront.inventory import Inventory
from storefront.models import Category
from storefront.pricing import format_currency
from storefront.session import ShopSession

app = typer.Typer(
    name="storefront",
    help="Text-menu retail simulation: shop, check out, return products",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config() -> ShopConfig:
    try:
        return ShopConfig.from_env()
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command("shop")
def cmd_shop(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed for delivery date offsets"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log stock and order events"),
) -> None:
    """Start an interactive shopping session."""
    _setup_logging(verbose)
    config = _load_config()
    inventory = Inventory(build_catalog(), initial_stock=config.initial_stock)
    session = ShopSession(inventory, console, config=config, rng=random.Random(seed))
    session.run()


@app.command("catalog")
def cmd_catalog(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Electronics, Clothing or Groceries"),
) -> None:
    """Show the product catalog with starting stock."""
    config = _load_config()
    inventory = Inventory(build_catalog(), initial_stock=config.initial_stock)

    categories = list(Category)
    if category:
        match = parse_category(category)
        if match is None:
            console.print(
                f"[red]Unknown category: {escape(category)}[/red]. "
                f"Choose: {', '.join(c.value for c in Category)}"
            )
            raise typer.Exit(1)
        categories = [match]

    table = Table(title="Catalog", show_header=True, header_style="bold")
    table.add_column("SKU", style="dim")
    table.add_column("Category", style="green", min_width=11)
    table.add_column("Name", min_width=12)
    table.add_column("Price", justify="right")
    table.add_column("Details", min_width=30)
    table.add_column("Stock", justify="right")

    for c in categories:
        for p in inventory.products_in(c):
            table.add_row(
                p.sku, c.value, escape(p.name), format_currency(p.price),
                escape(p.describe()), str(inventory.stock_of(p)),
            )

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    app()
