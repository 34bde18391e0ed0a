# basicfmt/core/jumps.py
# Whole-buffer jump-reference index: target line number -> every numeric literal that names it

from __future__ import annotations

import re
from collections import defaultdict

from .constants import ArgGrammar
from .dialects import DialectConfig, KeywordRule
from .line_numbers import code_body_start
from .syntax import scan_line
from .types import JumpReference, Lines
from .verbose import vlog_index

_NUMBER_RE = re.compile(r"[ \t]*(\d+)\b")
_LIST_SEP_RE = re.compile(r"[ \t]*[,-]")
_DASH_RE = re.compile(r"[ \t]*-")


# * Mapping from target number to references, in forward-scan discovery order
class JumpIndex:
    def __init__(self) -> None:
        self._refs: dict[int, list[JumpReference]] = defaultdict(list)

    def add(self, ref: JumpReference) -> None:
        self._refs[ref.target].append(ref)

    # * Remove & return the references to target; consumed references must not be reused
    def pop(self, target: int) -> list[JumpReference]:
        return self._refs.pop(target, [])

    def targets(self) -> list[int]:
        return sorted(self._refs)

    def __len__(self) -> int:
        return sum(len(refs) for refs in self._refs.values())


# numbers joined by ',' or '-'; stops at the first separator not followed by a number
def _parse_number_list(code: str, pos: int) -> list[tuple[int, str]]:
    found: list[tuple[int, str]] = []
    m = _NUMBER_RE.match(code, pos)
    while m is not None:
        found.append((m.start(1), m.group(1)))
        sep = _LIST_SEP_RE.match(code, m.end())
        if sep is None:
            break
        m = _NUMBER_RE.match(code, sep.end())
    return found


def _parse_single_number(code: str, pos: int) -> list[tuple[int, str]]:
    m = _NUMBER_RE.match(code, pos)
    return [(m.start(1), m.group(1))] if m is not None else []


# 'a', 'a-', '-b' or 'a-b'; both ends optional
def _parse_range(code: str, pos: int) -> list[tuple[int, str]]:
    found: list[tuple[int, str]] = []
    first = _NUMBER_RE.match(code, pos)
    if first is not None:
        found.append((first.start(1), first.group(1)))
        pos = first.end()
    dash = _DASH_RE.match(code, pos)
    if dash is not None:
        second = _NUMBER_RE.match(code, dash.end())
        if second is not None:
            found.append((second.start(1), second.group(1)))
    return found


_GRAMMARS = {
    ArgGrammar.NUMBER_LIST: _parse_number_list,
    ArgGrammar.SINGLE_NUMBER: _parse_single_number,
    ArgGrammar.RANGE: _parse_range,
}


# * Find every jump reference on one line, ordered by column
def scan_references(
    text: str, line_index: int, rules: tuple[KeywordRule, ...], dialect: DialectConfig
) -> list[JumpReference]:
    code = scan_line(text, dialect).masked
    body_start = code_body_start(text)
    refs: list[JumpReference] = []
    for rule in rules:
        parse = _GRAMMARS[rule.grammar]
        for keyword in rule.pattern.finditer(code, body_start):
            for column, digits in parse(code, keyword.end()):
                refs.append(
                    JumpReference(
                        line=line_index,
                        column=column,
                        length=len(digits),
                        target=int(digits),
                        family=rule.family,
                    )
                )
    refs.sort(key=lambda r: r.column)
    return refs


# * Scan the whole buffer once & index every jump reference by target
def build_index(lines: Lines, dialect: DialectConfig) -> JumpIndex:
    index = JumpIndex()
    for i, text in enumerate(lines):
        for ref in scan_references(text, i, dialect.jump_rules, dialect):
            index.add(ref)
    vlog_index(len(lines), len(index.targets()), len(index))
    return index
