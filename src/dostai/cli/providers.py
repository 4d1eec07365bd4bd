"""Factory functions for CLI.

Centralizes creation of settings and the provider from environment variables.
Hides configuration details from command implementations.
"""

from typing import Any

from rich.console import Console

from ..llm import TextGenerator, create_text_generator
from ..relay.config import ConfigError, RelaySettings

# Default console for output
_console = Console()


def get_settings(console: Console | None = None) -> RelaySettings:
    """Load relay settings from the environment.

    Raises:
        SystemExit: If a variable holds an invalid value
    """
    import typer

    con = console or _console
    try:
        return RelaySettings.from_env()
    except ConfigError as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def apply_overrides(
    settings: RelaySettings,
    console: Console | None = None,
    **overrides: Any,
) -> RelaySettings:
    """Apply command-line overrides on top of environment settings.

    Options left as None keep the environment value.

    Raises:
        SystemExit: If an override is out of range or unknown
    """
    import typer

    con = console or _console
    try:
        return settings.with_overrides(**overrides)
    except ConfigError as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def require_provider(settings: RelaySettings, console: Console | None = None) -> TextGenerator:
    """Create the Gemini provider, exiting if no API key is configured.

    Environment variables:
        GEMINI_API_KEY: Gemini API key (required)
    """
    import typer

    con = console or _console
    if not settings.api_key:
        con.print("[red]Error: GEMINI_API_KEY not set in environment[/red]")
        raise typer.Exit(code=1)

    return create_text_generator("gemini", api_key=settings.api_key, model=settings.model)
