"""Command line interface for docsetgen."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docsetgen.config import AppConfig
from docsetgen.errors import DocsetError
from docsetgen.index.storage import SearchIndexStore
from docsetgen.pipeline import generate_docset

LOGGER = logging.getLogger(__name__)

console = Console()
app = typer.Typer(help="docsetgen - build an offline docset from the joi API reference")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def generate(
    output: Path = typer.Option(AppConfig().output_dir, "--output", "-o", help="Output directory"),
    version: str = typer.Option(AppConfig().version, help="Reference version to download"),
    namespace: str = typer.Option(AppConfig().namespace, help="Namespace prefixed to symbol names"),
    url: Optional[str] = typer.Option(None, "--url", help="Override the reference Markdown URL"),
    templates: Optional[Path] = typer.Option(
        None, "--templates", help="Directory with header.html and footer.html", exists=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Download the reference, build the search index and write the docset."""
    _setup_logging(verbose)
    config = AppConfig(
        output_dir=output,
        version=version,
        namespace=namespace,
        reference_url=url,
        template_dir=templates,
    )

    console.print(f"Generating [bold]{config.docset_name}[/bold] from {config.reference_url}...")
    try:
        result = generate_docset(config, base_dir=Path.cwd())
    except DocsetError as exc:
        LOGGER.error("Generation failed: %s", exc)
        console.print(f"[red]Generation failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Type")
    table.add_column("Entries", justify="right")
    for entry_type, count in sorted(result.stats.by_type.items()):
        table.add_row(entry_type, str(count))
    console.print(table)
    console.print(
        f"Indexed: {result.stats.inserted}, duplicates ignored: {result.stats.ignored}"
    )
    console.print(f"Entries in index: {result.entries}")
    console.print(f"Document: {result.document_path}")
    console.print(f"Index: {result.index_path}")


@app.command()
def search(
    query: str = typer.Argument(..., help="Part of a symbol name"),
    output: Path = typer.Option(AppConfig().output_dir, "--output", "-o", help="Output directory"),
    limit: int = typer.Option(20, help="Number of entries to display"),
) -> None:
    """Look up entries in a generated search index."""
    config = AppConfig(output_dir=output)
    index_path = config.index_path(Path.cwd())

    if not index_path.exists():
        raise typer.BadParameter(f"Index not found: {index_path}")

    store = SearchIndexStore(index_path)
    try:
        records = store.search(query, limit=limit)
    finally:
        store.close()

    if not records:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Path")
    for record in records:
        table.add_row(escape(record.name), record.type, record.path)
    console.print(table)
