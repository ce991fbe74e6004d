"""
CLI command modules for famtree.

Each command module defines a single Typer-compatible command function.
"""

from famtree.cli.commands.export import export_command
from famtree.cli.commands.search import search_command
from famtree.cli.commands.show import show_command
from famtree.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "search_command",
    "show_command",
    "stats_command",
]
