# basicfmt/cli/commands/format.py
# Format command: re-indent a BASIC source file & clean up trailing whitespace

from __future__ import annotations

from pathlib import Path
from typing import Optional
import typer

from ...basic_io import read_source
from ...config.settings import get_settings
from ...ui.reporting import report_result
from ...core.commands import format_buffer
from ..app import app
from ..decorators import handle_basicfmt_error, run_with_watch
from ..helpers import build_options, emit_result, resolve_region
from ..params import (
    SourceArg,
    OutputOpt,
    LinesOpt,
    DialectOpt,
    IndentOpt,
    ColsOpt,
    DiffOpt,
)


# * Re-indent every line (or a span) of a BASIC file
@app.command(help="Re-indent a BASIC source file & strip trailing whitespace")
@handle_basicfmt_error
def format(
    ctx: typer.Context,
    path: Path = SourceArg(),
    lines: Optional[str] = LinesOpt(),
    check: bool = typer.Option(
        False, "--check", help="Exit 1 if the file would change; write nothing"
    ),
    diff: bool = DiffOpt(),
    output: Optional[Path] = OutputOpt(),
    dialect: Optional[str] = DialectOpt(),
    indent: Optional[int] = IndentOpt(),
    cols: Optional[int] = ColsOpt(),
    watch: bool = typer.Option(
        False, "--watch", "-w", help="Re-run whenever the source file changes"
    ),
) -> None:
    settings = get_settings(ctx)
    options = build_options(settings, dialect=dialect, indent=indent, cols=cols)

    if watch and check:
        raise typer.BadParameter("--watch cannot be combined with --check")

    def _run() -> bool:
        buffer = read_source(path)
        original = list(buffer.lines)
        region = resolve_region(lines, buffer)
        count = format_buffer(buffer, options, region)

        if check:
            changed = buffer.lines != original
            report_result("check", changed=changed, count=count, path=path)
            return changed

        changed = emit_result(buffer, original, path, output, diff)
        if not diff:
            report_result("format", changed=changed, count=count, path=output or path)
        return changed

    if watch:
        run_with_watch([path], _run, debounce=settings.watch_debounce)
        return

    changed = _run()
    if check and changed:
        raise typer.Exit(1)
