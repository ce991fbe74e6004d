from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from famtree.cli.utils import load_tree
from famtree.config import get_config
from famtree.search import SPOUSE, highlight, search
from famtree.view.formatting import life_span

console = Console()

MARK = "[bold yellow]{}[/bold yellow]"


def search_command(
    query: str = typer.Argument(..., help="Name or spouse name fragment"),
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Record document URL or path (defaults to config source.location)",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Maximum number of results (defaults to config search.limit)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log build progress to stderr",
    ),
):
    """
    Search persons by name or by spouse name.
    """
    cfg = get_config()
    tree = load_tree(source, verbose=verbose)

    matches = search(
        tree,
        query,
        limit=limit if limit is not None else int(cfg.search["limit"]),
        min_length=int(cfg.search["min_length"]),
    )
    if not matches:
        console.print("No matches found")
        return

    table = Table(title=f"Search: {escape(query)}")
    table.add_column("Id", style="dim")
    table.add_column("Name")
    table.add_column("Dates")

    for match in matches:
        if match.reason == SPOUSE:
            name = (
                f"{escape(match.person.name)} "
                f"[dim](spouse: {highlight(escape(match.matched_spouse or ''), query, MARK)})[/dim]"
            )
        else:
            name = highlight(escape(match.person.name), query, MARK)
        table.add_row(escape(match.person.id), name, life_span(match.person))

    console.print(table)
