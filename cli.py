# cli.py - interactive terminal client for the storefront fixture API
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk import FIXTURE_PASSWORD, StoreClient

console = Console()
c = StoreClient()

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []
email_cache = {"john.doe@example.com", "jane.smith@example.com"}

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Products Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=18)
    table.add_column("Stock", width=8)

    for p in products:
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            f"${p.get('price', 0):.2f}",
            p.get("category", "N/A"),
            "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]",
        )
    console.print(table)


def show_cart(cart: Dict[str, Any]):
    items = cart.get("items", []) if cart else []
    if not items:
        console.print(Panel("Your cart is empty 🛍️", title="🛒 Shopping Cart", style="blue"))
        return

    by_id = {str(p.get("id")): p for p in product_cache}
    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("Product ID", style="dim", width=12)
    table.add_column("Product", style="bold", width=24)
    table.add_column("Qty", justify="right", width=8)

    for it in items:
        pid = str(it.get("productId"))
        name = by_id.get(pid, {}).get("name", "[red]not in catalog[/red]")
        table.add_row(pid, name, str(it.get("quantity", "-")))

    console.print(Panel(table, title=f"🛒 Shopping Cart - {len(items)} line(s)", border_style="blue"))


def show_user(body: Dict[str, Any]):
    user = body.get("user", body)
    lines = [
        f"[bold]ID:[/bold] {user.get('id')}",
        f"[bold]Email:[/bold] {user.get('email')}",
        f"[bold]Name:[/bold] {user.get('firstName')} {user.get('lastName')}",
    ]
    if "token" in body:
        lines.append(f"[bold]Token:[/bold] [green]{body['token']}[/green]")
    console.print(Panel.fit("\n".join(lines), title="👤 User", border_style="green"))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. Returns the decoded body,
    or None when the call failed (the error is shown as the status).
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    return WordCompleter([str(p.get("id", "")) for p in product_cache], ignore_case=True)


def get_email_completer():
    return WordCompleter(sorted(email_cache), ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    token = f"[green]{c.token}[/green]" if c.token else "[dim]not logged in[/dim]"
    header.add_row(
        "🛍️ Storefront Mock API",
        f"[bold blue]{c.base_url}[/bold blue]  {token}",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    console.print(create_header())
    product_cache = try_api(c.list_products) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "7", "🛒 View cart"),
            ("2", "🔍 Search products", "8", "➕ Add to cart"),
            ("3", "ℹ️ Get product by ID", "9", "✏️ Update cart item"),
            ("4", "🔑 Login", "10", "➖ Remove from cart"),
            ("5", "📝 Register", "11", "🔄 Reset store"),
            ("6", "💓 Health check", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 12)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = Prompt.ask("🏷️ Category filter", default="")
            products = try_api(c.list_products, category or None, success_msg="Products loaded")
            if products is not None:
                show_products(products)

        elif choice == "2":
            term = prompt_with_autocomplete("Enter search term")
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_products(res)

        elif choice == "3":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
            if resp:
                show_products([resp])

        elif choice == "4":
            email = prompt_with_autocomplete("Enter email", completer=get_email_completer())
            password = Prompt.ask("Password", default=FIXTURE_PASSWORD, password=True)
            resp = try_api(c.login, email, password, success_msg=f"Logged in as {email}")
            if resp:
                show_user(resp)

        elif choice == "5":
            email = prompt_with_autocomplete("Enter email")
            first = Prompt.ask("First name")
            last = Prompt.ask("Last name")
            password = Prompt.ask("Password", password=True)
            resp = try_api(c.register, email, first, last, password, success_msg=f"Registered {email}")
            if resp:
                email_cache.add(email)
                show_user(resp)

        elif choice == "6":
            resp = try_api(c.health)
            if resp:
                console.print(show_status(f"{resp.get('status')} at {resp.get('timestamp')}", True))

        elif choice == "7":
            resp = try_api(c.get_cart, success_msg="Cart loaded")
            if resp is not None:
                show_cart(resp)

        elif choice == "8":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            qty = IntPrompt.ask("Enter quantity", default=1)
            product_id = int(pid) if pid.isdigit() else pid
            if try_api(c.add_to_cart, product_id, qty, success_msg=f"Added {qty} of product {pid}"):
                show_cart(try_api(c.get_cart))

        elif choice == "9":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            qty = IntPrompt.ask("New quantity", default=1)
            if try_api(c.update_cart_item, pid, qty, success_msg=f"Product {pid} set to {qty}"):
                show_cart(try_api(c.get_cart))

        elif choice == "10":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            try_api(c.remove_from_cart, pid, success_msg=f"Product {pid} removed from cart")
            show_cart(try_api(c.get_cart))

        elif choice == "11":
            if Confirm.ask("[red]This will restore the seed data and empty all carts. Continue?[/red]"):
                resp = try_api(c.reset, success_msg="Store reset successfully")
                console.print(resp)
                product_cache = []

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
