# basicfmt/ui/reporting.py
# Result reporting utilities for consistent CLI output formatting

from __future__ import annotations

from pathlib import Path

from ..basic_io.console import console


def _print_success_line(label: str, path: str | Path | None = None) -> None:
    # Print styled success line: checkmark + label [+ arrow + path].
    if path is not None:
        console.print("[green]✓[/]", f"[bold green]{label}[/]", "[dim]→[/]", f"{path}")
    else:
        console.print("[green]✓[/]", f"[bold green]{label}[/]")


# * Report results consistently across commands to the console
def report_result(result_type: str, **details) -> None:
    if result_type == "format":
        if details["changed"]:
            _print_success_line(
                f"Formatted ({details['count']} lines changed)", details["path"]
            )
        else:
            _print_success_line("Already formatted", details["path"])
    elif result_type == "check":
        if details["changed"]:
            console.print(
                f"[yellow]![/] [bold yellow]Would reformat[/] "
                f"({details['count']} lines) [dim]→[/] {details['path']}"
            )
        else:
            _print_success_line("Already formatted", details["path"])
    elif result_type == "renumber":
        _print_success_line(
            f"Renumbered {details['lines']} lines, "
            f"rewrote {details['references']} references",
            details["path"],
        )
    elif result_type == "config":
        _print_success_line(f"Set {details['key']}", details["value"])
    else:
        raise ValueError(f"Unknown result type: {result_type}")
