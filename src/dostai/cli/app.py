"""Main CLI application using Typer."""
import asyncio

import typer
import uvicorn
from rich.console import Console

from .providers import apply_overrides, get_settings, require_provider

# Create Typer app
app = typer.Typer(
    name="dostai",
    help="Dost AI: a chat relay for Gemini and a terminal client for it",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def serve(
    host: str | None = typer.Option(
        None,
        "--host",
        help="Interface to listen on (default: HOST or 0.0.0.0)"
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        "-p",
        help="Port to listen on (default: PORT or 5000)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, error, or critical"
    ),
):
    """Run the relay service (POST /generate)."""
    from ..relay import configure_logging, create_app

    settings = apply_overrides(
        get_settings(console),
        console,
        host=host,
        port=port,
        log_level=log_level.lower() if log_level else None,
    )

    provider = require_provider(settings, console)
    configure_logging(settings.log_level)

    console.print(f"[bold cyan]Dost AI relay[/bold cyan] [dim]{settings.model} on {settings.host}:{settings.port}[/dim]")
    uvicorn.run(
        create_app(settings, provider),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        log_config=None,
    )


@app.command()
def chat():
    """Launch the terminal chat client."""
    async def _chat():
        from ..client import RelayClient
        from ..ui import run_chat_tui

        async with RelayClient() as relay:
            await run_chat_tui(relay)

    asyncio.run(_chat())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
