# basicfmt/core/edit_helpers.py
# Shared text-edit helpers for the renumber engine & buffer commands

from __future__ import annotations

import difflib

from .types import Lines

# (column, length, replacement) applied to one line
Replacement = tuple[int, int, str]


# =============================================================================
# Span replacement
# =============================================================================


# * Apply replacements to one line in descending column order so earlier
# * offsets stay valid while later ones are rewritten
def apply_replacements(text: str, replacements: list[Replacement]) -> str:
    for column, length, new in sorted(replacements, key=lambda r: r[0], reverse=True):
        text = text[:column] + new + text[column + length :]
    return text


# =============================================================================
# Whitespace cleanup
# =============================================================================


# * Delete blank lines at the end of the buffer; returns count removed
def delete_trailing_blank_lines(lines: Lines) -> int:
    removed = 0
    while lines and not lines[-1].strip():
        lines.pop()
        removed += 1
    return removed


# =============================================================================
# Diff rendering
# =============================================================================


# * Unified diff of two line lists w/ 1-based physical line labels
def diff_lines(old: Lines, new: Lines, fromfile: str = "old", tofile: str = "new") -> str:
    return "".join(
        difflib.unified_diff(
            [f"{line}\n" for line in old],
            [f"{line}\n" for line in new],
            fromfile=fromfile,
            tofile=tofile,
        )
    )
