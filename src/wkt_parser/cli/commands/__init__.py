"""
CLI command implementations for wkt_parser.
"""

from wkt_parser.cli.commands.parse import parse_command
from wkt_parser.cli.commands.stats import stats_command

__all__ = [
    "parse_command",
    "stats_command",
]
