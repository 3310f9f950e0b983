"""CLI interface for messagearray using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from messagearray import __description__, __version__
from messagearray.config import LogLevel, MessageArrayConfig, load_config
from messagearray.exceptions import ErrorsAbort, MessageArrayError
from messagearray.ids import message_output_id
from messagearray.ingest import xml_file_to_messages
from messagearray.models import Channel, RenderMode
from messagearray.site import CatalogSite
from messagearray.store import MessageStore

app = typer.Typer(
    name="messagearray",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"messagearray version {__version__}")
        raise typer.Exit()


def _setup_logging(level: LogLevel) -> None:
    """Route log records to stderr through rich."""
    logging.basicConfig(
        level=level.to_logging_level(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """messagearray - accumulate errors, warnings and notes; render them as text or HTML."""


def _load_store(document: Path, strip: bool, fail_on_error_add: bool = False) -> MessageStore:
    """Ingest a message document into a fresh store, exiting on failure."""
    if not document.exists():
        console.print(f"[red]Error:[/red] Document not found: {document}")
        raise typer.Exit(1)

    store = MessageStore(fail_on_error_add=fail_on_error_add)
    try:
        xml_file_to_messages(document, store=store, strip=strip)
    except ErrorsAbort as e:
        console.print(f"[red]Aborted:[/red] {len(e.errors)} error(s) reported")
        raise typer.Exit(1)
    except (MessageArrayError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    return store


def _load_config(config: Path | None) -> MessageArrayConfig:
    try:
        return load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def render(
    document: Annotated[
        Path,
        typer.Argument(help="Path to an XML message document")
    ],
    channel: Annotated[
        str,
        typer.Option("--channel", "-c", help="Channel to render: errors, warnings, notes, all (default: all)")
    ] = "all",
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, html (default: text)")
    ] = "text",
    prefix: Annotated[
        Optional[str],
        typer.Option("--prefix", help="Prefix for HTML message ids")
    ] = None,
    show_ids: Annotated[
        bool,
        typer.Option("--show-ids", help="Show message ids in HTML output")
    ] = False,
    no_h2: Annotated[
        bool,
        typer.Option("--no-h2", help="Omit the <h2> heading in HTML output")
    ] = False,
    catalog: Annotated[
        Optional[Path],
        typer.Option("--catalog", help="JSON message catalog used to resolve message ids")
    ] = None,
    lang: Annotated[
        Optional[str],
        typer.Option("--lang", "-l", help="Catalog language (default: from config, else 'en')")
    ] = None,
    strip: Annotated[
        bool,
        typer.Option("--strip", help="Ignore text around the <messages> element")
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Configuration file path (default: search for .messagearray.json)")
    ] = None,
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option("--log-level", help="Logging level (default: from config)")
    ] = None,
) -> None:
    """Render the messages of a document as text or HTML."""
    valid_channels = [c.value for c in Channel] + ["all"]
    if channel not in valid_channels:
        console.print(f"[red]Error:[/red] Invalid channel '{channel}'. Must be one of: {', '.join(valid_channels)}")
        raise typer.Exit(1)

    valid_formats = [m.value for m in RenderMode]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    cfg = _load_config(config)

    _setup_logging(log_level or cfg.logging.level)

    options = cfg.render.to_options()
    if prefix:
        options["prefix"] = prefix
    if show_ids:
        options["show_msg_ids"] = True
    if no_h2:
        options["h2"] = False

    catalog_path = catalog or (Path(cfg.site.catalog) if cfg.site.catalog else None)
    if catalog_path is not None:
        try:
            options["site"] = CatalogSite.from_file(catalog_path, lang or cfg.site.lang)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error:[/red] Failed to load catalog: {e}")
            raise typer.Exit(1)

    store = _load_store(document, strip, cfg.store.fail_on_error_add)
    channels = list(Channel) if channel == "all" else [Channel(channel)]

    try:
        for selected in channels:
            if format == RenderMode.HTML.value:
                store.output_html(selected, **options)
            else:
                store.output_text(selected, **options)
    except (MessageArrayError, KeyError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def check(
    document: Annotated[
        Path,
        typer.Argument(help="Path to an XML message document")
    ],
    strip: Annotated[
        bool,
        typer.Option("--strip", help="Ignore text around the <messages> element")
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Configuration file path (default: search for .messagearray.json)")
    ] = None,
) -> None:
    """Count a document's messages per channel; exit 1 if it holds errors."""
    cfg = _load_config(config)
    store = _load_store(document, strip, cfg.store.fail_on_error_add)

    table = Table(title=f"Messages in {document.name}")
    table.add_column("Channel", style="cyan")
    table.add_column("Count", justify="right")

    for selected in Channel:
        table.add_row(selected.value, str(store.count(selected)))

    console.print(table)

    if store.any_errors():
        console.print(f"[red]FAIL[/red] {store.count(Channel.ERRORS)} error(s) reported")
        raise typer.Exit(1)

    console.print("[green]OK[/green] No errors reported")


@app.command("output-id")
def output_id(
    message_id: Annotated[
        str,
        typer.Argument(help="Message id")
    ],
    param: Annotated[
        Optional[list[str]],
        typer.Option("--param", "-p", help="Message param as key=value (can be used multiple times)")
    ] = None,
) -> None:
    """Print the stable HTML output id for a message id and its params."""
    params: dict[str, str | None] = {}
    for item in param or []:
        key, sep, value = item.partition("=")
        if not key:
            console.print(f"[red]Error:[/red] Invalid param '{item}'. Expected key=value")
            raise typer.Exit(1)
        params[key] = value if sep else None

    print(message_output_id(message_id, params))


if __name__ == "__main__":
    app()
