from __future__ import annotations

import logging
import time
from typing import Optional

import typer
from rich.console import Console

from famtree.config import get_config
from famtree.core.exceptions import FamTreeError
from famtree.core.pipeline import build_tree_from_source
from famtree.logging import set_console_level
from famtree.registry.entities import FamilyTree

err_console = Console(stderr=True)


def resolve_source(source: Optional[str]) -> str:
    return source or str(get_config().source["location"])


def load_tree(source: Optional[str], *, verbose: bool = False) -> FamilyTree:
    """
    Build the tree for a CLI command.

    Construction failures are reported once and end the command with exit
    code 1.
    """
    if verbose:
        set_console_level(logging.INFO)

    location = resolve_source(source)
    t0 = time.perf_counter()

    try:
        tree = build_tree_from_source(location)
    except FamTreeError as exc:
        err_console.print(f"[bold red]Error loading family tree:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if verbose:
        err_console.log(f"Loaded {len(tree)} persons in {time.perf_counter() - t0:.2f}s")

    return tree
