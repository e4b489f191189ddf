"""Thin CLI wrapper for nopasswords.

This module provides the command-line interface using Typer.
All business logic is delegated to core modules.
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import httpx
import typer
from rich.console import Console

from nopasswords import __version__
from nopasswords.config import get_settings, print_settings_json
from nopasswords.types import DownloadVariant, Encryption

app = typer.Typer(
    name="nopasswords",
    help="WiFi QR Code Generator - generate, inspect and download WiFi QR codes",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"nopasswords version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """WiFi QR Code Generator - generate, inspect and download WiFi QR codes."""
    logging.basicConfig(level=get_settings().log_level)


@app.command()
def config(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show effective configuration."""
    settings = get_settings()
    if json_output:
        typer.echo(print_settings_json(settings))
    else:
        console.print("[bold]Effective Configuration:[/bold]")
        console.print()
        console.print("[bold]Storage:[/bold]")
        console.print(f"  Database URL:        {settings.db_url}")
        console.print()
        console.print("[bold]Services:[/bold]")
        console.print(f"  Generate URL:        {settings.generate_url}")
        analytics_display = settings.analytics_url or "(log only)"
        console.print(f"  Analytics URL:       {analytics_display}")
        console.print()
        console.print("[bold]Site:[/bold]")
        console.print(f"  Site URL:            {settings.site_url}")
        console.print(f"  Fallback image:      {settings.fallback_image_url}")
        console.print(f"  Twitter creator:     {settings.twitter_creator}")
        console.print(f"  Log level:           {settings.log_level}")
        console.print()
        console.print("[bold]Timeouts (seconds):[/bold]")
        console.print(f"  Request timeout:     {settings.request_timeout}")
        console.print(f"  Download timeout:    {settings.download_timeout}")


@app.command()
def suggestions() -> None:
    """List the example prompts offered by the form."""
    from nopasswords.generation.form import SUGGESTIONS

    for suggestion in SUGGESTIONS:
        console.print(f"  {suggestion}")


@app.command()
def generate(
    ssid: Annotated[str, typer.Option("--ssid", "-s", help="WiFi network name")],
    password: Annotated[
        str, typer.Option("--password", "-p", help="WiFi password")
    ],
    prompt: Annotated[
        str, typer.Option("--prompt", help="What the QR code should look like")
    ],
    encryption: Annotated[
        Encryption,
        typer.Option("--encryption", "-e", help="WiFi encryption type"),
    ] = Encryption.WPA,
) -> None:
    """Generate a QR code through the configured generation endpoint."""
    from functools import partial

    from nopasswords.analytics import get_analytics
    from nopasswords.generation.client import request_generation
    from nopasswords.generation.form import GenerationForm
    from nopasswords.types import GeneratedResult

    settings = get_settings()
    destinations: list[str] = []

    with httpx.Client() as client:
        form = GenerationForm(
            partial(
                request_generation,
                client,
                settings.generate_url,
                timeout=settings.request_timeout,
            ),
            get_analytics(client, settings.analytics_url),
            destinations.append,
        )
        ok = form.submit(
            {
                "wifi_name": ssid,
                "wifi_password": password,
                "prompt": prompt,
                "encryption": encryption.value,
            }
        )

    if form.field_errors:
        for field, message in form.field_errors.items():
            console.print(f"[red]{field}: {message}[/red]")
        raise typer.Exit(code=2)
    if not ok:
        console.print(f"[red]{form.error}[/red]")
        raise typer.Exit(code=1)

    url = f"{settings.site_url.rstrip('/')}{destinations[-1]}"
    console.print(f"[green]Generated QR code:[/green] {url}")
    if isinstance(form.result, GeneratedResult):
        console.print(f"  Image:    {form.result.image_url}")
        console.print(f"  Took:     {form.result.display_time}s")


results_app = typer.Typer(help="Inspect and download stored results")
app.add_typer(results_app, name="results")


@results_app.command("show")
def results_show(
    result_id: Annotated[str, typer.Argument(help="Result ID to show")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show a stored result and the page metadata it renders with."""
    from nopasswords.db import create_all_tables, get_engine, get_session_factory
    from nopasswords.results.service import (
        ResultNotFoundError,
        build_metadata,
        load_result,
        record_to_result,
    )
    from nopasswords.types import GeneratedResult

    settings = get_settings()
    engine = get_engine(settings.db_url)
    create_all_tables(engine)
    factory = get_session_factory(engine)

    with factory() as session:
        try:
            record = load_result(session, result_id)
        except ResultNotFoundError:
            console.print(f"[red]Result not found: {result_id}[/red]")
            raise typer.Exit(code=1) from None

    metadata = build_metadata(record, settings)
    result = record_to_result(result_id, record)

    if json_output:
        output = {
            "id": result_id,
            "record": record.model_dump(by_alias=True, exclude_none=True),
            "metadata": metadata.model_dump(),
            "displayable": isinstance(result, GeneratedResult),
        }
        typer.echo(json.dumps(output, indent=2))
        return

    console.print(f"[bold]{metadata.title}[/bold]")
    console.print(f"  Description: {metadata.description}")
    console.print(f"  Preview:     {metadata.image}")
    if isinstance(result, GeneratedResult):
        console.print(f"  Image:       {result.image_url}")
        console.print(f"  Download:    {result.download_url or '(none)'}")
        console.print(f"  Took:        {result.display_time}s")
    else:
        console.print("[yellow]  Generation has not finished yet[/yellow]")


@results_app.command("download")
def results_download(
    result_id: Annotated[str, typer.Argument(help="Result ID to download")],
    with_password: Annotated[
        bool,
        typer.Option(
            "--with-password/--without-password",
            help="Download the password-bearing image",
        ),
    ] = True,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: wifiQrCode.*)"),
    ] = None,
) -> None:
    """Download one of the generated images of a stored result."""
    from nopasswords.db import create_all_tables, get_engine, get_session_factory
    from nopasswords.results.download import (
        DownloadError,
        download_qr_code,
        image_url_for,
    )
    from nopasswords.results.service import (
        ResultNotFoundError,
        load_result,
        record_to_result,
    )
    from nopasswords.types import GeneratedResult

    settings = get_settings()
    engine = get_engine(settings.db_url)
    create_all_tables(engine)
    factory = get_session_factory(engine)

    with factory() as session:
        try:
            record = load_result(session, result_id)
        except ResultNotFoundError:
            console.print(f"[red]Result not found: {result_id}[/red]")
            raise typer.Exit(code=1) from None

    variant = DownloadVariant.PASSWORD if with_password else DownloadVariant.DISPLAY
    result = record_to_result(result_id, record)
    url = None
    if isinstance(result, GeneratedResult):
        url = image_url_for(result, variant)
    if url is None:
        console.print(f"[red]No {variant.value} image for result: {result_id}[/red]")
        raise typer.Exit(code=1)

    try:
        with httpx.Client() as client:
            image = download_qr_code(client, url, timeout=settings.download_timeout)
    except DownloadError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from None

    dest = output or Path(image.filename)
    dest.write_bytes(image.content)
    console.print(f"[green]Saved {dest} ({len(image.content)} bytes)[/green]")


if __name__ == "__main__":
    app()
