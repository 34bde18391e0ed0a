# basicfmt/core/syntax.py
# Per-line string & comment detection; stands in for editor syntax styling so keyword
# searches never fire inside string literals or comments

from __future__ import annotations

import re
from dataclasses import dataclass

from .dialects import DialectConfig

# optional indentation + line number + separating whitespace
_PREFIX_RE = re.compile(r"[ \t]*\d*[ \t]*")


# * Lexical layout of one physical line
@dataclass(frozen=True)
class LineSyntax:
    text: str
    # same length as text; string & comment characters replaced by spaces
    masked: str
    comment_start: int | None
    # (start, end) of each string literal; end is past the closing quote,
    # or len(text) + 1 when the string is unterminated
    string_spans: tuple[tuple[int, int], ...]

    def in_comment(self, column: int) -> bool:
        return self.comment_start is not None and column > self.comment_start

    def in_string(self, column: int) -> bool:
        return any(start < column < end for start, end in self.string_spans)

    def in_comment_or_string(self, column: int) -> bool:
        return self.in_comment(column) or self.in_string(column)

    # * Comment lead as written at comment_start ("'" or "REM"), if any
    def comment_lead(self, dialect: DialectConfig) -> str | None:
        if self.comment_start is None:
            return None
        return _lead_at(self.text, self.comment_start, dialect, at_statement_start=True)


# match a comment lead at position i; REM only counts at the start of a statement
def _lead_at(
    text: str, i: int, dialect: DialectConfig, at_statement_start: bool
) -> str | None:
    ch = text[i]
    if ch in dialect.comment_chars:
        return ch
    if not at_statement_start:
        return None
    for word in dialect.comment_words:
        end = i + len(word)
        if text[i:end].lower() != word:
            continue
        if dialect.require_separator and end < len(text):
            nxt = text[end]
            if nxt.isalnum() or nxt in "_$":
                continue
        return text[i:end]
    return None


# * Scan a line once & return its string/comment layout
def scan_line(text: str, dialect: DialectConfig) -> LineSyntax:
    masked = list(text)
    spans: list[tuple[int, int]] = []
    comment_start: int | None = None
    n = len(text)
    i = _PREFIX_RE.match(text).end()  # type: ignore[union-attr]
    statement_start = True

    while i < n:
        ch = text[i]
        if ch == '"':
            close = text.find('"', i + 1)
            end = n if close < 0 else close + 1
            spans.append((i, end if close >= 0 else n + 1))
            masked[i:end] = " " * (end - i)
            i = end
            statement_start = False
            continue
        if _lead_at(text, i, dialect, statement_start) is not None:
            comment_start = i
            masked[i:] = " " * (n - i)
            break
        if ch == dialect.separator:
            statement_start = True
        elif not ch.isspace():
            statement_start = False
        i += 1

    return LineSyntax(
        text=text,
        masked="".join(masked),
        comment_start=comment_start,
        string_spans=tuple(spans),
    )
