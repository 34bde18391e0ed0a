# basicfmt/core/renumber.py
# Renumbering engine: assign new numbers to a line range & rewrite every indexed reference
#
# Two phases: the jump index is built over the untouched lines, then rewrites are applied
# per line in descending column order, so no recorded offset is ever measured against a
# half-updated buffer.

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from .classifier import read_line
from .constants import LineKind
from .edit_helpers import Replacement, apply_replacements
from .indent import calculate_indent
from .jumps import JumpIndex, build_index
from .line_numbers import render_line, strip_line_number
from .options import EngineOptions
from .types import Lines
from .verbose import vlog_renumber


# * One renumber request, consumed once
@dataclass(frozen=True)
class RenumberPlan:
    start: int
    increment: int
    range_start: int = 0
    # exclusive; None = end of buffer
    range_end: int | None = None
    include_unnumbered: bool = True


# * Counts reported after a run (the old->new mapping itself is never materialized)
@dataclass(frozen=True)
class RenumberSummary:
    lines_renumbered: int = 0
    references_rewritten: int = 0


# * Renumber lines in the plan's range & rewrite references to them from anywhere in the buffer
def renumber(
    lines: Lines,
    plan: RenumberPlan,
    options: EngineOptions,
    index: JumpIndex | None = None,
) -> RenumberSummary:
    dialect = options.dialect
    if index is None:
        index = build_index(lines, dialect)

    end = len(lines) if plan.range_end is None else min(plan.range_end, len(lines))
    rewrites: dict[int, list[Replacement]] = defaultdict(list)
    assignments: list[tuple[int, int]] = []
    new_number = plan.start

    for i in range(max(0, plan.range_start), end):
        line = read_line(lines, i, dialect)
        if line.kind in (LineKind.BLANK, LineKind.LABEL):
            continue
        number = line.number
        if number is None and not plan.include_unnumbered:
            continue
        # unnumbered lines cannot be jump targets, so only numbered lines consume references
        if number is not None:
            for ref in index.pop(number.value):
                rewrites[ref.line].append((ref.column, ref.length, str(new_number)))
        assignments.append((i, new_number))
        new_number += plan.increment

    for line_index, replacements in rewrites.items():
        lines[line_index] = apply_replacements(lines[line_index], replacements)

    cols = options.line_number_cols
    for i, assigned in assignments:
        body, _ = strip_line_number(lines[i])
        lines[i] = render_line(
            body.lstrip(), assigned, calculate_indent(lines, i, options), cols
        )

    summary = RenumberSummary(
        lines_renumbered=len(assignments),
        references_rewritten=sum(len(r) for r in rewrites.values()),
    )
    vlog_renumber(
        plan.start, plan.increment, summary.lines_renumbered, summary.references_rewritten
    )
    return summary
