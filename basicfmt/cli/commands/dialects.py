# basicfmt/cli/commands/dialects.py
# List built-in keyword dialects w/ their indentation & comment rules

from __future__ import annotations

from rich.table import Table

from ...basic_io.console import console
from ...core.dialects import DIALECTS
from ..app import app


def _words(values: tuple[str, ...]) -> str:
    return " ".join(w.upper() for w in values) or "[dim]-[/]"


# * Print a table of dialects
@app.command(help="List built-in BASIC dialects & their keyword sets")
def dialects() -> None:
    table = Table(title="BASIC dialects", show_lines=True)
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Indent after (EOL)")
    table.add_column("Indent after (BOL)")
    table.add_column("Outdent (BOL)")
    table.add_column("Comments")

    for name in sorted(DIALECTS):
        d = DIALECTS[name]
        table.add_row(
            name,
            d.description,
            _words(d.increase_eol),
            _words(d.increase_bol),
            _words(d.decrease_bol),
            _words(d.comment_leads),
        )

    console.print(table)
