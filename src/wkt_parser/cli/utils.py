from __future__ import annotations

import json
import sys
import time
from collections import Counter
from dataclasses import fields, is_dataclass
from typing import Any, Dict, Optional

from rich.console import Console
from rich.tree import Tree

from wkt_parser.core.context import Dimension
from wkt_parser.geometry import BaseGeometry, Coordinate, Document
from wkt_parser.logging import log_debug
from wkt_parser.parser_core import WKTParser

console = Console()


def read_text(text: str) -> str:
    """Return the WKT argument, reading stdin when it is ``-``."""
    if text == "-":
        return sys.stdin.read()
    return text


def load_wkt(
    text: str,
    *,
    dimension: Optional[Dimension] = None,
    strict: bool = False,
    verbose: bool = False,
) -> Document:
    """
    Parse WKT for the CLI commands.

    ``strict`` rejects trailing tokens; otherwise the configured default
    applies.
    """
    t0 = time.perf_counter()

    document = WKTParser().parse(
        read_text(text),
        dimension=dimension,
        allow_trailing=False if strict else None,
    )

    elapsed = time.perf_counter() - t0
    log_debug(f"Parsed {len(document)} item(s) in {elapsed * 1000:.2f}ms")
    if verbose:
        console.log(f"Parsed WKT in {elapsed * 1000:.2f}ms")

    return document


def format_coord(coord: Coordinate) -> str:
    ordinates = [coord.x, coord.y, coord.z, coord.m]
    return " ".join(f"{o:g}" for o in ordinates if o is not None)


def _add_branch(tree: Tree, geometry: Any) -> None:
    if isinstance(geometry, Coordinate):
        tree.add(format_coord(geometry))
        return

    if geometry.geometry_type == "POINT":
        tree.add(f"[bold]POINT[/bold] ({format_coord(geometry.coord)})")
        return

    branch = tree.add(f"[bold]{geometry.geometry_type}[/bold] [dim]({len(geometry)})[/dim]")
    for element in geometry:
        _add_branch(branch, element)


def render_tree(document: Document) -> Tree:
    """Build a rich Tree showing every geometry and coordinate."""
    tree = Tree(f"Document [dim]({len(document)} item(s))[/dim]")
    for item in document:
        _add_branch(tree, item)
    return tree


def to_data(value: Any) -> Any:
    """Convert parsed values to plain JSON-ready data, tagging geometries."""
    if isinstance(value, BaseGeometry):
        data: Dict[str, Any] = {"type": value.geometry_type}
        for f in fields(value):
            data[f.name] = to_data(getattr(value, f.name))
        return data
    if is_dataclass(value):
        return {f.name: to_data(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, tuple):
        return [to_data(v) for v in value]
    return value


def write_json(document: Document, *, pretty: bool) -> None:
    data = to_data(document)
    if pretty:
        payload = json.dumps(data, indent=2)
    else:
        payload = json.dumps(data, separators=(",", ":"))
    print(payload)


def count_geometries(document: Document) -> Counter:
    """Count geometries by keyword, including those nested in collections."""
    counts: Counter = Counter()

    def walk(geometry: Any) -> None:
        counts[geometry.geometry_type] += 1
        if geometry.geometry_type == "GEOMETRYCOLLECTION":
            for item in geometry:
                walk(item)

    for item in document:
        walk(item)
    return counts
