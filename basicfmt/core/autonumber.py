# basicfmt/core/autonumber.py
# Line-number allocation for freshly inserted lines, incl. midpoint allocation between neighbors

from __future__ import annotations

from .classifier import next_nonblank_line
from .line_numbers import parse_line_number
from .types import Lines


# * Number for a line inserted after `current`, given the next existing number (if any).
# * When no integer midpoint remains, current + 1 is returned even if it collides.
def next_line_number(current: int, following: int | None, step: int) -> int:
    candidate = current + step
    if following is not None and candidate >= following:
        candidate = current + (following - current) // 2
        if candidate <= current:
            candidate = current + 1
    return candidate


# * Number for a new line inserted after lines[index], or None when auto-numbering
# * is off or the line carries no number
def number_for_new_line(lines: Lines, index: int, step: int | None) -> int | None:
    if step is None:
        return None
    number = parse_line_number(lines[index])
    if number is None:
        return None
    following_index = next_nonblank_line(lines, index)
    following = None
    if following_index is not None:
        parsed = parse_line_number(lines[following_index])
        following = parsed.value if parsed is not None else None
    return next_line_number(number.value, following, step)
