"""Storefront display: renders stock, returns, carts and orders as Rich tables.

Everything here is read-only. Functions take the object to show and the
Console to print on.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from storefront.inventory import Inventory
from storefront.models import LineItem, OrderStatus, Product
from storefront.orders import Cart, Order
from storefront.pricing import format_currency, format_short_date

NO_PRODUCTS = "No products in inventory."
NO_RETURNS = "No items have been returned."
NO_ORDER = "No order has been placed yet."

_STATUS_STYLES = {
    OrderStatus.PROCESSING: "cyan",
    OrderStatus.PARTIALLY_RETURNED: "yellow",
    OrderStatus.RETURNED: "magenta",
}


def _fmt_stock(n: int) -> str:
    """Stock count, colored when running low."""
    if n == 0:
        return "[red]out[/red]"
    if n < 5:
        return f"[yellow]{n}[/yellow]"
    return str(n)


def render_products(
    products: Sequence[Product],
    inventory: Inventory,
    console: Console,
    title: Optional[str] = None,
) -> None:
    """Numbered product list with stock, used for picking products."""
    if not products:
        console.print("[yellow]No products in this category.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Product", min_width=30)
    table.add_column("In stock", justify="right")
    for i, product in enumerate(products, 1):
        table.add_row(str(i), escape(product.describe()), _fmt_stock(inventory.stock_of(product)))
    console.print(table)


def render_stock(inventory: Inventory, console: Console) -> None:
    """Every product with its current stock."""
    if not inventory.products:
        console.print(f"[yellow]{NO_PRODUCTS}[/yellow]")
        return

    table = Table(title="Current Stock", show_header=True, header_style="bold")
    table.add_column("SKU", style="dim")
    table.add_column("Category", style="green")
    table.add_column("Product", min_width=30)
    table.add_column("Stock", justify="right")
    for product in inventory.products:
        table.add_row(
            product.sku,
            product.category.value,
            escape(product.describe()),
            _fmt_stock(inventory.stock_of(product)),
        )
    console.print()
    console.print(table)
    console.print()


def render_returns(inventory: Inventory, console: Console) -> None:
    """The returned stock log, oldest first."""
    if not inventory.returned_items:
        console.print(f"[yellow]{NO_RETURNS}[/yellow]")
        return

    table = Table(title="Returned Items", show_header=True, header_style="bold")
    table.add_column("Product", min_width=16)
    table.add_column("Quantity", justify="right")
    table.add_column("Returned", justify="right")
    for item in inventory.returned_items:
        table.add_row(
            escape(item.product.name),
            str(item.quantity),
            item.returned_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print()
    console.print(table)
    console.print()


def _line_items_table(items: Sequence[LineItem], line_total, title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Product", min_width=16)
    table.add_column("Unit price", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("Line total", justify="right")
    for i, item in enumerate(items, 1):
        total = line_total(item)
        discounted = total < item.product.price * item.quantity
        table.add_row(
            str(i),
            escape(item.product.name),
            format_currency(item.product.price),
            str(item.quantity),
            format_currency(total) + (" [green](bulk)[/green]" if discounted else ""),
        )
    return table


def render_cart(cart: Cart, console: Console) -> None:
    """Cart contents with a running total."""
    if not len(cart):
        console.print("[dim]Cart is empty.[/dim]")
        return
    table = _line_items_table(
        cart.items,
        lambda i: cart.discount.line_total(i.product.price, i.quantity),
        "Cart",
    )
    console.print(table)
    console.print(f"  Running total: [bold]{format_currency(cart.total())}[/bold]")


def render_order(order: Optional[Order], console: Console) -> None:
    """Customer, dates, status, line items and total of an order."""
    if order is None:
        console.print(f"[yellow]{NO_ORDER}[/yellow]")
        return

    style = _STATUS_STYLES.get(order.status, "white")
    console.print()
    console.print("[bold]Order Details[/bold]")
    console.print(f"  Customer: {escape(order.customer_name)}")
    console.print(f"  Address: {escape(order.customer_address)}")
    console.print(f"  Order date: {format_short_date(order.order_date)}")
    console.print(f"  Delivery date: {format_short_date(order.delivery_date)}")
    console.print(f"  Status: [{style}]{order.status.value}[/{style}]")
    console.print(_line_items_table(order.items, order.line_total, "Items"))
    if order.returned:
        for product, qty in order.returned.items():
            console.print(f"  [dim]Returned: {qty} x {escape(product.name)}[/dim]")
    console.print(f"  Total: [bold]{format_currency(order.calculate_total())}[/bold]")
    console.print()
