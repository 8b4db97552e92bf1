from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from wkt_parser.cli.utils import load_wkt, render_tree, write_json
from wkt_parser.core.context import Dimension
from wkt_parser.core.exceptions import WKTError

console = Console()


def parse_command(
    text: str = typer.Argument(..., help="WKT text, or '-' to read stdin"),
    dimension: Optional[Dimension] = typer.Option(
        None,
        "--dimension",
        "-d",
        case_sensitive=False,
        help="Ordinates per coordinate (defaults to the configured value)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on tokens after the geometry",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the parsed document as JSON",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Indent JSON output",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show parse timing",
    ),
):
    """
    Parse WKT text and print the geometry tree.
    """
    try:
        document = load_wkt(text, dimension=dimension, strict=strict, verbose=verbose)
    except WKTError as exc:
        console.print(f"[red]error:[/red] {exc}")
        raise typer.Exit(code=1)

    if as_json:
        write_json(document, pretty=pretty)
    else:
        console.print(render_tree(document))
