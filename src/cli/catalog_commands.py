"""Catalog and notification helper commands."""

import typer
from rich.table import Table

from src.shopease.core.services.notification_service import (
    build_whatsapp_link,
    share_message,
)
from src.shopease.core.storage import SAMPLE_PRODUCTS
from src.shopease.runtime.context import get_config

from .utils import console


def show_catalog() -> None:
    """📦 Show the sample catalog every fresh store starts with."""
    table = Table(title="Sample catalog")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Price", justify="right", style="green")

    for product_id, product in enumerate(SAMPLE_PRODUCTS, start=1):
        table.add_row(str(product_id), product.name, f"${product.price}")

    console.print(table)


def whatsapp_link(
    message: str = typer.Argument(..., help="Message to prefill"),
    to: str | None = typer.Option(
        None, "--to", help="Destination number (defaults to the store number)"
    ),
    open_link: bool = typer.Option(
        False, "--open", help="Open the link in a browser instead of printing it"
    ),
) -> None:
    """💬 Build a WhatsApp deep link for a message."""
    notifications = get_config().notifications
    destination = to or notifications.store_whatsapp_number

    if not open_link:
        console.print(build_whatsapp_link(message, destination), soft_wrap=True)
        return

    if not share_message(message, destination, simulate=notifications.simulate):
        console.print("[red]Could not open the WhatsApp link[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Opened WhatsApp chat with {destination}[/green]")
