from __future__ import annotations

import typer

from wkt_parser.cli.commands.parse import parse_command
from wkt_parser.cli.commands.stats import stats_command

app = typer.Typer(
    name="wkt",
    help="WKT geometry parser and inspector",
    add_completion=False,
)

app.command("parse")(parse_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
