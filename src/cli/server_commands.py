"""Commands for running the API server."""

import os

import typer
import uvicorn
from rich.panel import Panel

from src.shopease.runtime.context import get_config

from .utils import console, get_project_root


def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Uvicorn log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the ShopEase API.

    The store lives in process memory: every restart begins again from the
    sample catalog with no orders.
    """
    app_config = get_config().app
    host = host or app_config.host
    port = port or app_config.port

    console.print(
        Panel.fit(
            "[bold green]Starting ShopEase API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    os.chdir(get_project_root())
    uvicorn.run(
        "src.shopease.api.http.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["src"] if reload else None,
        log_level=log_level,
    )
