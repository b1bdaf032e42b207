"""Main CLI application module."""

import typer

from .catalog_commands import show_catalog, whatsapp_link
from .server_commands import serve

# Create the main CLI application
app = typer.Typer(
    help="🛒 ShopEase CLI - run the storefront API and inspect its data",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="serve")(serve)
app.command(name="catalog")(show_catalog)
app.command(name="whatsapp-link")(whatsapp_link)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
