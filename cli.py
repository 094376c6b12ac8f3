# cli.py
import asyncio
import sys
from datetime import datetime
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from catalog_sdk import AsyncCatalogClient
from clothing_catalog.config import get_settings
from clothing_catalog.filters import filter_products
from clothing_catalog.logging_setup import init_logging
from clothing_catalog.models import Product, DraftFields
from clothing_catalog.notices import NoticeBoard, NoticeKind
from clothing_catalog.session import EditSession, SessionState, SubmitOutcome
from clothing_catalog.store import CatalogStore

console = Console()

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})

FORM_FIELDS = [
    ("code", "Product Code"),
    ("name", "Product Name"),
    ("import_date", "Import Date (DD/MM/YYYY)"),
    ("quantity", "Quantity"),
    ("category_id", "Category"),
]


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: Sequence[Product], store: CatalogStore):
    if not products:
        console.print(Panel("No products found", style="red"))
        return

    table = Table(
        title="👕 Clothing Product Management",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Code", width=10)
    table.add_column("Name", style="bold", width=30)
    table.add_column("Import Date", width=12)
    table.add_column("Qty", justify="right", width=8)
    table.add_column("Category", width=15)

    for p in products:
        table.add_row(
            str(p.id),
            p.code,
            p.name,
            p.import_date,
            str(p.quantity),
            store.category_name(p.category_id),
        )
    console.print(table)


def show_notice(notices: NoticeBoard):
    if not notices.message:
        return
    style = "green" if notices.kind is NoticeKind.SUCCESS else "red"
    console.print(Panel.fit(f"[{style}]{notices.message}[/{style}]", title="Status"))


def show_filters(name_query: str, category_id: str, store: CatalogStore):
    category = store.category_name(category_id) if category_id else "All categories"
    console.print(f"[dim]Search:[/dim] {name_query or '-'}   [dim]Category:[/dim] {category}")


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "👕 Clothing Catalog",
        "[bold blue]Product Management[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
class Prompter:
    def __init__(self):
        self.session = PromptSession(style=custom_style)

    async def ask(self, message: str, completer=None, default: str = "") -> str:
        return await self.session.prompt_async(f"{message} ", completer=completer, default=default)


async def confirm(prompter: Prompter, message: str, default: bool = True) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    yes_no = WordCompleter(["y", "n", "yes", "no"], ignore_case=True)
    while True:
        answer = (await prompter.ask(f"{message} {hint}", completer=yes_no)).strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        console.print("[red]Please answer y or n.[/red]")


def category_completer(store: CatalogStore):
    return WordCompleter([str(c.id) for c in store.current_categories()], ignore_case=True)


def product_completer(store: CatalogStore):
    return WordCompleter([str(p.id) for p in store.current_products() if p.id is not None])


def show_categories(store: CatalogStore):
    categories = store.current_categories()
    if not categories:
        console.print("[italic yellow]No categories available[/italic yellow]")
        return
    console.print("  ".join(f"[cyan]{c.id}[/cyan]={c.name}" for c in categories))


async def edit_form(prompter: Prompter, session: EditSession, store: CatalogStore):
    """Fill the open draft field by field, then Save or Cancel."""
    while session.state in (SessionState.OPEN_NEW, SessionState.OPEN_EXISTING):
        title = "Add Product" if session.state is SessionState.OPEN_NEW else f"Edit Product {session.draft.id}"
        console.print(Panel.fit(title, border_style="blue"))

        current: DraftFields = session.draft.fields
        changes = {}
        for field, label in FORM_FIELDS:
            completer = None
            if field == "category_id":
                show_categories(store)
                completer = category_completer(store)
            value = await prompter.ask(label, completer=completer, default=str(getattr(current, field)))
            changes[field] = value.strip()
        session.update(**changes)

        if not await confirm(prompter, "Save?"):
            session.cancel()
            console.print("[yellow]Edit cancelled[/yellow]")
            return

        with console.status("Saving..."):
            outcome = await session.submit()
        show_notice(session.notices)
        if outcome is SubmitOutcome.SAVED:
            return
        if not await confirm(prompter, "Correct and try again?"):
            session.cancel()
            return


# ---------------------------
# Main menu
# ---------------------------
async def menu():
    settings = get_settings()
    init_logging(settings.log_level)

    console.clear()
    console.print(create_header())

    notices = NoticeBoard(clear_delay=settings.message_clear_delay)
    prompter = Prompter()
    name_query = ""
    category_id = ""

    async with AsyncCatalogClient(base_url=settings.base_url, timeout=settings.timeout) as client:
        store = CatalogStore(client)
        session = EditSession(store, client, notices)
        with console.status("Loading catalog..."):
            await store.load()

        while True:
            show_notice(notices)
            show_filters(name_query, category_id, store)
            show_products(filter_products(store.current_products(), name_query, category_id), store)

            menu_table = Table.grid(padding=(0, 2))
            menu_table.add_column("Key", style="bold cyan", width=4)
            menu_table.add_column("Option", width=30)
            menu_table.add_column("Key", style="bold cyan", width=4)
            menu_table.add_column("Option", width=30)
            options = [
                ("1", "🔍 Search by name", "4", "✏️ Edit product"),
                ("2", "🏷️ Filter by category", "5", "🔄 Refresh"),
                ("3", "➕ Add product", "q", "👋 Quit"),
            ]
            for row in options:
                menu_table.add_row(*row)
            console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

            choice = (await prompter.ask(
                "\nChoose an option",
                completer=WordCompleter(["1", "2", "3", "4", "5", "q", "quit", "exit"])
            )).strip()

            if choice == "1":
                name_query = (await prompter.ask("Search by name...", default=name_query)).strip()

            elif choice == "2":
                show_categories(store)
                category_id = (await prompter.ask(
                    "Category id (empty for all)", completer=category_completer(store), default=category_id
                )).strip()

            elif choice == "3":
                session.open_new()
                await edit_form(prompter, session, store)

            elif choice == "4":
                pid = (await prompter.ask("Product ID", completer=product_completer(store))).strip()
                product: Optional[Product] = store.find_product(pid)
                if product is None:
                    console.print(f"[red]No product with id {pid}[/red]")
                else:
                    session.open_existing(product)
                    await edit_form(prompter, session, store)

            elif choice == "5":
                with console.status("Refreshing..."):
                    await store.load()

            elif choice.lower() in ("q", "quit", "exit"):
                if await confirm(prompter, "Are you sure you want to quit?", default=False):
                    console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                    return

            console.print()
            console.rule(style="dim")


if __name__ == "__main__":
    try:
        asyncio.run(menu())
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
