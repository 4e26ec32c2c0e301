"""CLI interface for the AlsoAsked MCP server."""

import asyncio
from typing import Any, Optional

import typer

from .client import AlsoAskedClient
from .config import load_settings
from .exceptions import AlsoAskedError
from .formatter import format_account, format_search_response, render_json
from .utils import mask_api_key
from .validation import validate_search_args

app = typer.Typer(help="Query Google People Also Ask data through the AlsoAsked API")


def _client() -> AlsoAskedClient:
    try:
        return AlsoAskedClient(load_settings().api)
    except AlsoAskedError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def search(
    terms: list[str] = typer.Argument(..., help="One or more search terms"),
    language: str = typer.Option("en", "--language", "-l", help="Language code"),
    region: str = typer.Option("us", "--region", "-r", help="Region code"),
    depth: int = typer.Option(2, "--depth", "-d", min=1, max=3, help="Depth of question hierarchy"),
    fresh: bool = typer.Option(False, "--fresh", help="Fetch fresh results instead of cached data"),
    latitude: Optional[float] = typer.Option(None, "--latitude", help="Latitude for geographic targeting"),
    longitude: Optional[float] = typer.Option(None, "--longitude", help="Longitude for geographic targeting"),
) -> None:
    """Search People Also Ask questions for one or more terms."""
    args: dict[str, Any] = {"terms": terms, "language": language, "region": region, "depth": depth, "fresh": fresh}
    if latitude is not None:
        args["latitude"] = latitude
    if longitude is not None:
        args["longitude"] = longitude

    try:
        request = validate_search_args(args)
        client = _client()
        response = asyncio.run(client.search(request))
    except AlsoAskedError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(render_json(format_search_response(response)))


@app.command()
def account() -> None:
    """Show account credits and plan."""
    client = _client()
    try:
        info = asyncio.run(client.get_account())
    except AlsoAskedError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(render_json(format_account(info)))


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = load_settings()
    typer.echo(f"API Key: {mask_api_key(settings.api.get_api_key())}")
    typer.echo(f"Base URL: {settings.api.base_url}")
    typer.echo(f"Timeout: {settings.api.timeout}s")
    typer.echo(f"Transport: {settings.server.transport}")
    typer.echo(f"Logging Level: {settings.server.logging_level}")


@app.command()
def serve() -> None:
    """Run the MCP server on the configured transport."""
    from .server import main

    main()


if __name__ == "__main__":
    app()
