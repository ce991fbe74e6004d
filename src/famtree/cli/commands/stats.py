from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from famtree.cli.utils import load_tree
from famtree.registry.assemble import roots

console = Console()


def stats_command(
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Record document URL or path (defaults to config source.location)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log build progress to stderr",
    ),
):
    """
    Show summary statistics for a record document.
    """
    tree = load_tree(source, verbose=verbose)
    stats = tree.stats
    root = tree.root

    table = Table(title="Family Tree Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Records", str(stats.get("records", 0)))
    table.add_row("Skipped records", str(stats.get("skipped_records", 0)))
    table.add_row("Persons", str(len(tree)))
    table.add_row("Parentless persons", str(len(roots(tree))))
    table.add_row("Unresolved parent ids", str(stats.get("unresolved_parents", 0)))
    table.add_row("Parents found by name", str(stats.get("fixed_by_hint", 0)))
    table.add_row("Root", root.name if root else "-")
    table.add_row("Descendants of root", str(tree.descendant_count(root)) if root else "0")

    console.print(table)
