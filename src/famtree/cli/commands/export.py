from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from famtree.cli.utils import load_tree
from famtree.exporter import export_tree_json, serialize_tree_to_json_string

console = Console(stderr=True)


def export_command(
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Record document URL or path (defaults to config source.location)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log build progress to stderr",
    ),
):
    """
    Export the assembled family tree to JSON (stdout by default).
    """
    tree = load_tree(source, verbose=verbose)
    indent = 2 if pretty else None

    if out:
        export_tree_json(tree, out, indent=indent)
        if verbose:
            console.log(f"Export written to {out}")
    else:
        print(serialize_tree_to_json_string(tree, indent=indent))
