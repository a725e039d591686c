"""CLI for docsort: sort / toc commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from docsort.config_loader import load_options
from docsort.core.config import AppSettings
from docsort.core.logging_config import setup_logging
from docsort.core.startup_checks import validate_settings
from docsort.diagnostics import CollectingReporter, ConsoleReporter, FanOutReporter
from docsort.exceptions import DocSortError
from docsort.models import Comment, SortOptions
from docsort.notes import RenderedMarkdown
from docsort.ordering import create_walker, sort_docs

app = typer.Typer(name="docsort", help="Order documentation comments against a table of contents")
err_console = Console(stderr=True)


def _build_settings(verbose: bool) -> AppSettings:
    settings = AppSettings()
    if verbose:
        settings.observability.log_level = "DEBUG"
    setup_logging(settings.observability)
    try:
        validate_settings(settings)
    except ValueError as exc:
        err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc
    return settings


def _load_comments(comments_path: Path) -> list[Comment]:
    """Load comments from a JSON array file."""
    raw = json.loads(comments_path.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        try:
            return [Comment.model_validate(item) for item in raw]
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid comment in {comments_path}: {exc}") from exc
    raise typer.BadParameter(f"Expected JSON array in {comments_path}")


def _load_options(config: Optional[Path], sort_order: Optional[str], settings: AppSettings) -> SortOptions:
    default_order = sort_order or settings.ordering.sort_order
    try:
        if config is None:
            return SortOptions(sort_order=default_order)
        options = load_options(config, default_sort_order=default_order)
    except DocSortError as exc:
        err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc
    if sort_order:
        options.sort_order = sort_order
    return options


def _description_to_json(description: Any) -> Any:
    if isinstance(description, RenderedMarkdown):
        return description.html
    return description


def entry_to_dict(entry: Comment) -> dict[str, Any]:
    """Serialize a sorted entry for JSON output (notes lose their children)."""
    data = entry.model_dump(
        mode="json",
        by_alias=True,
        exclude_none=True,
        exclude={"description", "children"},
    )
    if entry.description is not None:
        data["description"] = _description_to_json(entry.description)
    return data


def _path_label(segments: list) -> str:
    return " / ".join(s.name for s in segments)


@app.command()
def sort(
    comments_file: Path = typer.Argument(..., help="JSON file with an array of comments"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="documentation.yml with toc / sortOrder"),
    sort_order: Optional[str] = typer.Option(None, "--sort-order", help="'alpha' or 'source'"),
    output: Optional[Path] = typer.Option(None, help="Output path for sorted JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Sort comments and write them as JSON."""
    settings = _build_settings(verbose)
    options = _load_options(config, sort_order, settings)
    comments = _load_comments(comments_file)

    collector = CollectingReporter()
    reporter = FanOutReporter([ConsoleReporter(err_console), collector])
    try:
        ordered = sort_docs(
            comments,
            options,
            reporter=reporter,
            walker=create_walker(settings, reporter),
        )
    except DocSortError as exc:
        err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc

    text = json.dumps([entry_to_dict(e) for e in ordered], indent=2, default=str)
    if output:
        output.write_text(text, encoding="utf-8")
        err_console.print(f"[green]Sorted output saved to {output}[/green]")
    else:
        typer.echo(text)

    err_console.print(f"Sorted {len(ordered)} entries ({len(collector)} warnings)")


@app.command()
def toc(
    config: Path = typer.Argument(..., help="documentation.yml with a toc"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Show the order index and path assigned to every TOC entry."""
    settings = _build_settings(verbose)
    options = _load_options(config, None, settings)
    if not options.toc:
        err_console.print("[yellow]No table of contents configured[/yellow]")
        raise typer.Exit(code=0)

    reporter = ConsoleReporter(err_console)
    index = create_walker(settings, reporter).walk(options.toc)
    notes = {note.name: note for note in index.notes}

    table = Table(title="Table of Contents")
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Kind")
    table.add_column("Path")

    for name, position in sorted(index.order.items(), key=lambda item: item[1]):
        if name in notes:
            kind, segments = "note", notes[name].path
        else:
            kind, segments = "reference", index.paths.get(name, [])
        table.add_row(str(position), name, kind, _path_label(segments))

    Console().print(table)


if __name__ == "__main__":
    app()
