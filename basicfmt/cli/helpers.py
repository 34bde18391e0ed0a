# basicfmt/cli/helpers.py
# Shared CLI helpers for option resolution, line spans & result output

from __future__ import annotations

from pathlib import Path

import typer

from ..basic_io import write_source
from ..basic_io.console import console
from ..config.settings import BasicfmtSettings
from ..core.buffer import Buffer, Region
from ..core.edit_helpers import diff_lines
from ..core.options import EngineOptions
from ..core.types import Lines
from .params import parse_line_span

# ---------------------------------------------------------------------------
# SETTINGS ACCESS PATTERN
# ---------------------------------------------------------------------------
#   settings = get_settings(ctx)
#   options = build_options(settings, dialect=..., indent=..., cols=...)
#
# Explicit CLI flags win; anything omitted falls back to the stored settings.
# ---------------------------------------------------------------------------


# * Build engine options from settings + CLI overrides
def build_options(
    settings: BasicfmtSettings,
    dialect: str | None = None,
    indent: int | None = None,
    cols: int | None = None,
    include_unnumbered: bool | None = None,
) -> EngineOptions:
    return settings.to_options(
        dialect=dialect,
        indent_offset=indent,
        line_number_cols=cols,
        renumber_include_unnumbered=include_unnumbered,
    )


# * Turn a --lines value into a Region over buffer; None means the whole buffer
def resolve_region(span: str | None, buffer: Buffer) -> Region | None:
    parsed = parse_line_span(span)
    if parsed is None:
        return None
    first, last = parsed
    if first >= len(buffer):
        raise typer.BadParameter(
            f"Line span starts at {first + 1} but file has {len(buffer)} lines"
        )
    return Region.from_lines(first, min(last, len(buffer) - 1))


# * Print diff or write the result; returns True when the text changed
def emit_result(
    buffer: Buffer,
    original: Lines,
    source: Path,
    output: Path | None,
    show_diff: bool,
) -> bool:
    changed = buffer.lines != original
    if show_diff:
        text = diff_lines(
            original, buffer.lines, fromfile=str(source), tofile=str(output or source)
        )
        if text:
            # diff text may contain brackets; print it verbatim
            console.print(
                text, markup=False, highlight=False, soft_wrap=True, end=""
            )
        return changed

    # rewriting an unchanged file would re-trigger --watch
    if output is not None or changed:
        write_source(buffer, output or source)
    return changed
