# basicfmt/core/buffer.py
# Mutable in-memory text buffer addressed by 0-based (line, column) cursors & regions

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .types import Lines

# only LF / CRLF end a line; form feeds & other control chars may sit inside string literals
_LINE_BREAK_RE = re.compile(r"\r?\n")


# * Point in the buffer
@dataclass(frozen=True)
class Cursor:
    line: int
    column: int = 0


# * Span between two cursors (end exclusive)
@dataclass(frozen=True)
class Region:
    start: Cursor
    end: Cursor

    # * Physical line indices covered; an end at column 0 of a later line excludes that line
    def line_range(self, line_count: int) -> range:
        first = max(0, self.start.line)
        if self.end.column == 0 and self.end.line > self.start.line:
            last = self.end.line
        else:
            last = self.end.line + 1
        return range(first, min(last, line_count))

    @classmethod
    def from_lines(cls, first: int, last: int) -> "Region":
        # inclusive line indices
        return cls(Cursor(first, 0), Cursor(last + 1, 0))


# * Lines of one source file plus the newline conventions needed to write it back
@dataclass
class Buffer:
    lines: Lines = field(default_factory=list)
    newline: str = "\n"
    trailing_newline: bool = True

    @classmethod
    def from_text(cls, text: str) -> "Buffer":
        newline = "\r\n" if "\r\n" in text else "\n"
        trailing = text.endswith("\n")
        lines = _LINE_BREAK_RE.split(text)
        if lines[-1] == "":
            lines.pop()
        return cls(lines=lines, newline=newline, trailing_newline=trailing)

    def to_text(self) -> str:
        text = self.newline.join(self.lines)
        if self.lines and self.trailing_newline:
            text += self.newline
        return text

    def whole(self) -> Region:
        return Region(Cursor(0, 0), Cursor(len(self.lines), 0))

    def __len__(self) -> int:
        return len(self.lines)
