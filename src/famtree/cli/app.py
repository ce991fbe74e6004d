from __future__ import annotations

import typer

from famtree.cli.commands.export import export_command
from famtree.cli.commands.search import search_command
from famtree.cli.commands.show import show_command
from famtree.cli.commands.stats import stats_command

app = typer.Typer(
    name="famtree",
    help="Family tree builder, navigator and search",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("show")(show_command)
app.command("search")(search_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
