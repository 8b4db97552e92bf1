from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from wkt_parser.cli.utils import count_geometries, load_wkt
from wkt_parser.core.context import Dimension
from wkt_parser.core.exceptions import WKTError

console = Console()


def stats_command(
    text: str = typer.Argument(..., help="WKT text, or '-' to read stdin"),
    dimension: Optional[Dimension] = typer.Option(
        None,
        "--dimension",
        "-d",
        case_sensitive=False,
        help="Ordinates per coordinate (defaults to the configured value)",
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on tokens after the geometry"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show parse timing",
    ),
):
    """
    Show geometry and coordinate counts for WKT text.
    """
    try:
        document = load_wkt(text, dimension=dimension, strict=strict, verbose=verbose)
    except WKTError as exc:
        console.print(f"[red]error:[/red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title="WKT Statistics")
    table.add_column("Geometry", style="bold")
    table.add_column("Count", justify="right")

    for keyword, count in sorted(count_geometries(document).items()):
        table.add_row(keyword, str(count))
    table.add_row("Coordinates", str(sum(1 for _ in document.iter_coords())))

    console.print(table)
