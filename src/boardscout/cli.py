"""Command-line interface for BoardScout."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.table import Table

from boardscout import __version__
from boardscout.config.config import Config, load_config
from boardscout.errors import BoardScoutError
from boardscout.extractor import BoardIdExtractor, ExtractionOutcome, HtmlPage
from boardscout.observability.logging import configure_logging
from boardscout.service import canonicalize_url, find_board_id, validate_board_url

console = Console()
logger = structlog.get_logger(__name__)


def _render(outcome: ExtractionOutcome) -> None:
    if outcome.success:
        board = outcome.board
        table = Table(title=board.name, show_header=False)
        table.add_row("Board ID", f"[bold green]{board.id}[/bold green]")
        table.add_row("Method", outcome.method)
        table.add_row("URL", board.url)
        if board.thumbnail:
            table.add_row("Thumbnail", board.thumbnail)
        console.print(table)
    else:
        console.print(f"[red]{outcome.reason}[/red]")
        if outcome.metadata.title:
            console.print(f"Page title: {outcome.metadata.title}")


async def _extract_live(url: str, config: Config) -> dict:
    from playwright.async_api import async_playwright

    from boardscout.live import EXTRACT_ACTION, handle_message

    extractor = BoardIdExtractor(config.extraction)
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        try:
            page = await browser.new_page(user_agent=config.transport.user_agent)
            await page.goto(url, wait_until="domcontentloaded", timeout=config.transport.timeout * 1000)
            return await handle_message({"action": EXTRACT_ACTION}, page, extractor)
        finally:
            await browser.close()


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "-c", "config_path", type=click.Path(exists=True, path_type=Path), help="Configuration file path"
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides the config file)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]) -> None:
    """BoardScout - find the numeric ID of a Pinterest board."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except Exception as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    if log_level:
        config.monitoring.log_level = log_level.upper()
    configure_logging(config.monitoring)
    ctx.obj["config"] = config


@cli.command()
@click.argument("url")
@click.option(
    "--html-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Extract from a saved page instead of fetching it",
)
@click.option("--live", is_flag=True, help="Render the page in a headless browser and inspect it live")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def extract(ctx: click.Context, url: str, html_file: Optional[Path], live: bool, as_json: bool) -> None:
    """Find the board ID for URL."""
    config: Config = ctx.obj["config"]

    try:
        if live:
            message = asyncio.run(_extract_live(validate_board_url(url, config.extraction), config))
            click.echo(json.dumps(message, ensure_ascii=False))
            sys.exit(0 if message["success"] else 1)
        if html_file is not None:
            clean_url = canonicalize_url(validate_board_url(url, config.extraction))
            page = HtmlPage(url=clean_url, html=html_file.read_text(encoding="utf-8", errors="replace"))
            outcome = BoardIdExtractor(config.extraction).extract(page)
        else:
            outcome = asyncio.run(find_board_id(url, config=config))
    except BoardScoutError as e:
        if as_json:
            click.echo(json.dumps({"success": False, "error": str(e)}))
        else:
            console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(outcome.to_message(), ensure_ascii=False))
    else:
        _render(outcome)
    sys.exit(0 if outcome.success else 1)


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int]) -> None:
    """Serve the JSON API."""
    import uvicorn

    from boardscout.web.main import create_app

    config: Config = ctx.obj["config"]
    uvicorn.run(
        create_app(config),
        host=host or config.web.host,
        port=port or config.web.port,
        log_level=config.monitoring.log_level.lower(),
    )


@cli.command(name="validate-config")
@click.pass_context
def validate_config(ctx: click.Context) -> None:
    """Print the effective configuration."""
    config: Config = ctx.obj["config"]
    console.print_json(config.model_dump_json())
    console.print("[green]Configuration is valid[/green]")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
