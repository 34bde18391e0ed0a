# basicfmt/cli/commands/renumber.py
# Renumber command: assign fresh line numbers & rewrite every jump reference

from __future__ import annotations

from pathlib import Path
from typing import Optional
import typer

from ...basic_io import read_source
from ...config.settings import get_settings
from ...ui.reporting import report_result
from ...core.commands import renumber_buffer
from ..app import app
from ..decorators import handle_basicfmt_error
from ..helpers import build_options, emit_result, resolve_region
from ..params import (
    SourceArg,
    OutputOpt,
    LinesOpt,
    DialectOpt,
    ColsOpt,
    DiffOpt,
)


# * Renumber a BASIC file (or a span of it) keeping GOTO/GOSUB/etc. targets in sync
@app.command(help="Renumber lines & rewrite GOTO/GOSUB/THEN/... references")
@handle_basicfmt_error
def renumber(
    ctx: typer.Context,
    path: Path = SourceArg(),
    start: Optional[int] = typer.Option(
        None,
        "--start",
        "-s",
        help="First new line number; defaults to the first number in the span",
    ),
    increment: Optional[int] = typer.Option(
        None, "--increment", "-i", help="Step between numbers; defaults to config"
    ),
    lines: Optional[str] = LinesOpt(),
    skip_unnumbered: bool = typer.Option(
        False, "--skip-unnumbered", help="Leave unnumbered lines unnumbered"
    ),
    diff: bool = DiffOpt(),
    output: Optional[Path] = OutputOpt(),
    dialect: Optional[str] = DialectOpt(),
    cols: Optional[int] = ColsOpt(),
) -> None:
    settings = get_settings(ctx)
    options = build_options(
        settings,
        dialect=dialect,
        cols=cols,
        include_unnumbered=False if skip_unnumbered else None,
    )

    buffer = read_source(path)
    original = list(buffer.lines)
    region = resolve_region(lines, buffer)
    summary = renumber_buffer(buffer, options, start, increment, region)

    emit_result(buffer, original, path, output, diff)
    if not diff:
        report_result(
            "renumber",
            lines=summary.lines_renumbered,
            references=summary.references_rewritten,
            path=output or path,
        )
