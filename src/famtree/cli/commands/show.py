from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from famtree.cli.utils import load_tree
from famtree.navigation import InMemoryHistory, NavigationState, Navigator
from famtree.view.formatting import PersonCard, person_card

console = Console()


def _card_label(card: PersonCard, *, focus: bool = False) -> str:
    name = f"[bold cyan]{escape(card.name)}[/bold cyan]" if focus else escape(card.name)
    parts = [name]
    if card.life_span:
        parts.append(f"[dim]{escape(card.life_span)}[/dim]")
    if card.descendant_label:
        parts.append(f"[green]{card.descendant_label}[/green]")
    return " ".join(parts)


def show_command(
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Record document URL or path (defaults to config source.location)",
    ),
    path: Optional[str] = typer.Option(
        None,
        "--path",
        "-p",
        help='Breadcrumb to restore, e.g. "Peter > Anna"',
    ),
    person: Optional[str] = typer.Option(
        None,
        "--person",
        help="Focus the person with this id",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log build progress to stderr",
    ),
):
    """
    Show the breadcrumb, the focused person and their children.
    """
    tree = load_tree(source, verbose=verbose)
    if tree.root is None:
        console.print("[yellow]No persons found in the record document.[/yellow]")
        return

    navigator = Navigator(tree, history=InMemoryHistory())
    if path:
        navigator.restore(NavigationState.from_breadcrumb(path))
    if person:
        navigator.navigate_to(person)

    frame = navigator.frame()
    console.print(f"[bold]Path:[/bold] {escape(navigator.state().to_breadcrumb())}")

    chain = list(frame.ancestors) + [frame.focus]
    last = len(chain) - 1
    display = branch = Tree(_card_label(person_card(tree, chain[0]), focus=last == 0))
    for depth, member in enumerate(chain[1:], start=1):
        branch = branch.add(_card_label(person_card(tree, member), focus=depth == last))

    focus_card = person_card(tree, frame.focus)
    for line in focus_card.marriages + focus_card.other_events:
        branch.add(f"[magenta]{escape(line)}[/magenta]")
    for child in frame.children:
        branch.add(_card_label(person_card(tree, child)))

    console.print(display)

    query = navigator.state().to_query()
    if query:
        console.print(f"[dim]?{escape(query)}[/dim]")
