# basicfmt/core/classifier.py
# Line classification (blank/label/comment/code) & code-line lookups used by every other component

from __future__ import annotations

import re

from .constants import LineKind
from .dialects import DialectConfig
from .line_numbers import code_body_start, parse_line_number
from .syntax import scan_line
from .types import Lines, SourceLine

_LABEL_RE = re.compile(r"^[ \t]*([A-Za-z_][A-Za-z0-9_.]*):")


# * True if the line starts w/ "identifier:" & the identifier is not a statement keyword
def is_label(text: str, dialect: DialectConfig) -> bool:
    m = _LABEL_RE.match(text)
    if m is None:
        return False
    return m.group(1).lower() not in dialect.statement_keywords


# * Classify one physical line
def classify(text: str, dialect: DialectConfig) -> LineKind:
    if not text.strip():
        return LineKind.BLANK
    if is_label(text, dialect):
        return LineKind.LABEL
    syntax = scan_line(text, dialect)
    if syntax.comment_start is not None and syntax.comment_start == code_body_start(text):
        return LineKind.COMMENT
    return LineKind.CODE


# * Build a SourceLine view for lines[index]
def read_line(lines: Lines, index: int, dialect: DialectConfig) -> SourceLine:
    text = lines[index]
    return SourceLine(
        index=index,
        text=text,
        kind=classify(text, dialect),
        number=parse_line_number(text),
        body_start=code_body_start(text),
    )


# * Index of the nearest preceding code line (skips blank, comment & label lines)
def previous_code_line(lines: Lines, index: int, dialect: DialectConfig) -> int | None:
    for i in range(index - 1, -1, -1):
        if classify(lines[i], dialect) is LineKind.CODE:
            return i
    return None


# * Index of the next non-blank line after index
def next_nonblank_line(lines: Lines, index: int) -> int | None:
    for i in range(index + 1, len(lines)):
        if lines[i].strip():
            return i
    return None
