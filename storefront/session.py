"""Storefront session: the interactive menu loop.

Flow per session:
1. Main menu: shop, view order, return a product, inventory, exit
2. Shopping fills a Cart category by category, then checks out or cancels
3. Checkout replaces the current order (there is no order history)
4. Returns and inventory views work against the current order / inventory

Bad menu choices, indices and quantities are reported and re-asked. End of
input closes the session as if Exit was chosen.
"""

from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt

from storefront.config import ShopConfig
from storefront.display import NO_ORDER, render_cart, render_order, render_products, render_returns, render_stock
from storefront.errors import EmptyCartError, StorefrontError
from storefront.inventory import Inventory
from storefront.models import Category
from storefront.orders import Cart, Order
from storefront.pricing import format_currency, format_short_date


MAIN_MENU = ["Start Shopping", "View Order", "Return Product", "Inventory Management", "Exit"]
SHOPPING_MENU = [c.value for c in Category] + ["Checkout", "Cancel"]
INVENTORY_MENU = ["View Stock", "View Returned Items", "Back"]


class _EndOfInput:
    """Mixin: an exhausted input stream raises EOFError instead of re-asking.

    Without a stream, builtin input() already raises EOFError on its own.
    """

    @classmethod
    def get_input(cls, console, prompt, password, stream=None):
        value = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and not value:
            raise EOFError
        return value


class _IntPrompt(_EndOfInput, IntPrompt):
    pass


class _TextPrompt(_EndOfInput, Prompt):
    pass


class ShopSession:
    """One run of the shop: a console, an inventory and at most one order."""

    def __init__(
        self,
        inventory: Inventory,
        console: Console,
        config: Optional[ShopConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
        stream: Optional[TextIO] = None,
    ):
        self.inventory = inventory
        self.console = console
        self.config = config or ShopConfig()
        self.rng = rng or random.Random()
        self.clock = clock
        self.stream = stream
        self.order: Optional[Order] = None

    # -----------------------------------------------------------------------
    # Prompts
    # -----------------------------------------------------------------------

    def _menu(self, title: str, options: list[str]) -> int:
        """Show a numbered menu and return the 1-based choice."""
        self.console.print(f"\n[bold]{title}[/bold]")
        for i, label in enumerate(options, 1):
            self.console.print(f"  {i}. {label}")
        return self._pick("Choose an option", len(options))

    def _pick(self, label: str, count: int) -> int:
        return _IntPrompt.ask(
            label,
            console=self.console,
            choices=[str(i) for i in range(1, count + 1)],
            stream=self.stream,
        )

    def _quantity(self, label: str = "Quantity") -> int:
        while True:
            qty = _IntPrompt.ask(label, console=self.console, stream=self.stream)
            if qty > 0:
                return qty
            self.console.print("[prompt.invalid]Please enter a quantity of at least 1[/prompt.invalid]")

    def _text(self, label: str) -> str:
        return _TextPrompt.ask(label, console=self.console, stream=self.stream)

    def _error(self, err: StorefrontError) -> None:
        self.console.print(f"[red]{escape(str(err))}[/red]")

    # -----------------------------------------------------------------------
    # Main loop
    # -----------------------------------------------------------------------

    def run(self) -> None:
        """Run menus until Exit is chosen or input runs out."""
        self.console.print("[bold green]Welcome to the Storefront![/bold green]")
        handlers = {
            1: self.shop,
            2: self.view_order,
            3: self.return_product,
            4: self.manage_inventory,
        }
        try:
            while True:
                choice = self._menu("Main Menu", MAIN_MENU)
                if choice == len(MAIN_MENU):
                    break
                handlers[choice]()
        except EOFError:
            self.console.print("\n[dim]End of input.[/dim]")
        self.console.print("Thank you for shopping with us. Goodbye!")

    def shop(self) -> None:
        """Collect a cart across categories until checkout or cancel."""
        cart = Cart(self.inventory, self.config.discount)
        categories = list(Category)
        try:
            while True:
                choice = self._menu("Shopping Menu", SHOPPING_MENU)
                if choice <= len(categories):
                    self._add_from_category(cart, categories[choice - 1])
                elif SHOPPING_MENU[choice - 1] == "Checkout":
                    if not len(cart):
                        self._error(EmptyCartError())
                        continue
                    self._checkout(cart)
                    return
                else:
                    cart.cancel()
                    self.console.print("[yellow]Shopping cancelled. Items returned to the shelves.[/yellow]")
                    return
        except EOFError:
            cart.cancel()
            raise

    def _add_from_category(self, cart: Cart, category: Category) -> None:
        products = self.inventory.products_in(category)
        render_products(products, self.inventory, self.console, title=category.value)
        if not products:
            return
        product = products[self._pick("Select a product", len(products)) - 1]
        quantity = self._quantity()
        try:
            cart.add(product, quantity)
        except StorefrontError as e:
            self._error(e)
            return
        self.console.print(f"[green]Added {quantity} x {escape(product.name)} to your cart.[/green]")
        render_cart(cart, self.console)

    def _checkout(self, cart: Cart) -> None:
        name = self._text("Customer name")
        address = self._text("Shipping address")
        self.order = cart.checkout(
            name,
            address,
            delivery_window=self.config.delivery_window,
            rng=self.rng,
            clock=self.clock,
        )
        self.console.print(
            f"[bold green]Order placed![/bold green] Total: {format_currency(self.order.calculate_total())}, "
            f"estimated delivery {format_short_date(self.order.delivery_date)}."
        )

    def view_order(self) -> None:
        render_order(self.order, self.console)

    def return_product(self) -> None:
        """Return units from a line of the current order."""
        order = self.order
        if order is None:
            self.console.print(f"[yellow]{NO_ORDER}[/yellow]")
            return
        render_order(order, self.console)
        item = order.items[self._pick("Select the item to return", len(order.items)) - 1]
        if order.returnable_quantity(item.product) == 0:
            self.console.print(f"[yellow]All units of {escape(item.product.name)} were already returned.[/yellow]")
            return
        quantity = self._quantity("Quantity to return")
        try:
            order.process_return(item.product, quantity, self.inventory)
        except StorefrontError as e:
            self._error(e)
            return
        self.console.print(
            f"[green]Returned {quantity} x {escape(item.product.name)}. "
            f"Stock is now {self.inventory.stock_of(item.product)}.[/green]"
        )

    def manage_inventory(self) -> None:
        while True:
            choice = self._menu("Inventory Management", INVENTORY_MENU)
            if choice == 1:
                render_stock(self.inventory, self.console)
            elif choice == 2:
                render_returns(self.inventory, self.console)
            else:
                return
