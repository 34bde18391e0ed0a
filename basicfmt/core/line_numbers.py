# basicfmt/core/line_numbers.py
# Line-number prefix codec: detect, strip, parse & render numbers under a column-alignment policy

from __future__ import annotations

import re

from .types import LineNumber

_NUMBER_RE = re.compile(r"^([ \t]*)(\d+)([ \t]*)")
_LEADING_WS_RE = re.compile(r"^[ \t]*")


# * True if the first non-whitespace character is a digit
def has_line_number(text: str) -> bool:
    return _NUMBER_RE.match(text) is not None


# * Parse the line-number prefix, or None for unnumbered lines
def parse_line_number(text: str) -> LineNumber | None:
    m = _NUMBER_RE.match(text)
    if m is None:
        return None
    return LineNumber(value=int(m.group(2)), digits=m.group(2))


# * Remove the number prefix; remainder starts at first non-space char.
# * Unnumbered lines come back unchanged.
def strip_line_number(text: str) -> tuple[str, LineNumber | None]:
    m = _NUMBER_RE.match(text)
    if m is None:
        return text, None
    return text[m.end() :], LineNumber(value=int(m.group(2)), digits=m.group(2))


# * Offset where the code body starts (after indentation & any number prefix)
def code_body_start(text: str) -> int:
    m = _NUMBER_RE.match(text)
    if m is not None:
        return m.end()
    return _LEADING_WS_RE.match(text).end()  # type: ignore[union-attr]


# * Column of the first character after the digit run (None if unnumbered)
def number_end(text: str) -> int | None:
    m = _NUMBER_RE.match(text)
    return m.end(2) if m is not None else None


# * Total prefix width for a number: never narrower than digits + separating space
def prefix_width(number: int | str, cols: int) -> int:
    return max(cols, len(str(number)) + 1)


# * Render a number prefix; cols == 0 gives bare digits, otherwise right-aligned + one space
def format_line_number(number: int | str, cols: int) -> str:
    digits = str(number)
    if cols == 0:
        return digits
    width = prefix_width(digits, cols)
    return f"{digits:>{width - 1}} "


# prefix placed before the indentation of a line
def _prefix(number: int | str | None, cols: int) -> str:
    if number is None:
        # unnumbered lines pad to the number column so bodies line up
        return " " * cols
    if cols == 0:
        return f"{number} "
    return format_line_number(number, cols)


# * Build a full line from its parts
def render_line(body: str, number: int | str | None, indent: int, cols: int) -> str:
    return _prefix(number, cols) + " " * max(0, indent) + body


# * Indent of the code body relative to the prefix render_line would produce
def current_indent(text: str, cols: int) -> int:
    m = _NUMBER_RE.match(text)
    if m is None:
        leading = _LEADING_WS_RE.match(text).end()  # type: ignore[union-attr]
        return max(0, leading - cols)
    # every rendered prefix ends w/ exactly one space after the digits
    return max(0, len(m.group(3)) - 1)
