"""Console entrypoint for grid tools (gc-grid)."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gc_common.api import GCError, configure_logging

app = typer.Typer(help="Inspect and display grids with row actions.", no_args_is_help=True)
console = Console()


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(debug=debug)


def _load(path: Path):
    from gc_gui.models import GridDocument

    try:
        return GridDocument.load(path)
    except GCError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc


@app.command("actions")
def show_actions(
    path: Path = typer.Argument(..., help="YAML grid document."),
    row: Optional[int] = typer.Option(None, "--row", "-r", help="Only this row."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """Print the resolved actions of every row."""
    from gc_gui.app import ServiceContainer, create_column
    from gc_gui.presenters import actions_payload, build_actions_table

    document = _load(path)
    column, _rows = create_column(ServiceContainer(), document)
    if row is not None and column.get_action(row) is None:
        console.print(f"[red]Row {row} does not exist.[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(actions_payload(column, row), indent=2, default=str))
    else:
        console.print(build_actions_table(column, row))


@app.command("show")
def show_grid(
    path: Path = typer.Argument(..., help="YAML grid document."),
    open_links: bool = typer.Option(
        False, "--open-links", help="Open action links with the desktop handler."
    ),
) -> None:
    """Open a window showing the grid."""
    document = _load(path)

    # Import Qt widgets after logging is configured
    from PySide6.QtWidgets import QApplication

    from gc_gui.app import create_app

    qt_app = QApplication.instance() or QApplication(sys.argv)
    qt_app.setApplicationName("Grid Columns")

    window = create_app(document, open_links=open_links)
    window.show()
    raise typer.Exit(qt_app.exec())


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
