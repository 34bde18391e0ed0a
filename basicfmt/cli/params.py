# basicfmt/cli/params.py
# CLI argument definitions & normalization helpers

from __future__ import annotations

import re
from typing import Any

import typer

from ..core.dialects import DIALECTS

_LINE_SPAN_RE = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)\s*)?$")


# * Parse a 1-based inclusive "A-B" (or "A") physical line span into 0-based (first, last)
def parse_line_span(value: str | None) -> tuple[int, int] | None:
    if value is None:
        return None
    m = _LINE_SPAN_RE.match(value)
    if m is None:
        raise typer.BadParameter("Line span must look like 'A-B' or 'A' (1-based)")
    first = int(m.group(1))
    last = int(m.group(2)) if m.group(2) is not None else first
    if first < 1 or last < first:
        raise typer.BadParameter(
            f"Invalid line span '{value}': need 1 <= start <= end"
        )
    return first - 1, last - 1


def _normalize_dialect(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().lower()
    if v not in DIALECTS:
        valid = "|".join(sorted(DIALECTS))
        raise typer.BadParameter(f"Invalid dialect. Choose: {valid}")
    return v


def SourceArg() -> Any:
    return typer.Argument(
        ...,
        help="Path to BASIC source file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    )


def OutputOpt() -> Any:
    return typer.Option(
        None,
        "--output",
        "-o",
        help="Write result here instead of rewriting the source file",
        dir_okay=False,
        resolve_path=True,
    )


def LinesOpt() -> Any:
    return typer.Option(
        None,
        "--lines",
        "-l",
        help="Physical line span to process, 1-based inclusive (e.g. 20-45)",
    )


def DialectOpt() -> Any:
    return typer.Option(
        None,
        "--dialect",
        "-d",
        callback=_normalize_dialect,
        help="Keyword dialect: " + "|".join(sorted(DIALECTS)) + "; defaults to config",
    )


def IndentOpt() -> Any:
    return typer.Option(
        None,
        "--indent",
        min=0,
        help="Indent unit in columns; defaults to config",
    )


def ColsOpt() -> Any:
    return typer.Option(
        None,
        "--cols",
        min=0,
        help="Line-number column width (0 = no alignment); defaults to config",
    )


def DiffOpt() -> Any:
    return typer.Option(
        False,
        "--diff",
        help="Print a unified diff instead of writing",
    )


def ConfigKeyArg() -> Any:
    return typer.Argument(
        help="Configuration setting name",
    )


def ConfigValueArg() -> Any:
    return typer.Argument(
        help="New value to assign to the setting (JSON-coerced)",
    )
