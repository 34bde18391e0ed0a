# basicfmt/core/indent.py
# Indentation inference from keyword heuristics & the previous code line's indent
#
# ! Deliberately a single-line lookback, not a block-nesting stack: dialect keyword
# ! sets are tuned against this heuristic

from __future__ import annotations

from .classifier import is_label, previous_code_line
from .dialects import DialectConfig, keyword_pattern
from .line_numbers import code_body_start, current_indent, render_line, strip_line_number
from .options import EngineOptions
from .syntax import scan_line
from .types import Lines


# * True if the first token of code starts w/ one of the keywords
def starts_with_keyword(code: str, words: tuple[str, ...]) -> bool:
    stripped = code.lstrip()
    m = keyword_pattern(words).match(stripped)
    return m is not None


# * True if the last token of code is one of the keywords
def ends_with_keyword(code: str, words: tuple[str, ...]) -> bool:
    stripped = code.rstrip()
    return any(
        m.end() == len(stripped) for m in keyword_pattern(words).finditer(stripped)
    )


# masked code body of a line (strings & comments blanked, number prefix removed)
def _masked_body(text: str, dialect: DialectConfig) -> str:
    return scan_line(text, dialect).masked[code_body_start(text) :]


# * True if a statement after a separator starts w/ a block-closing keyword
def closes_after_separator(code: str, dialect: DialectConfig) -> bool:
    segments = code.split(dialect.separator)
    return any(
        starts_with_keyword(segment, dialect.decrease_bol) for segment in segments[1:]
    )


# * Compute the indent column (relative to the code body) for lines[index]
def calculate_indent(lines: Lines, index: int, options: EngineOptions) -> int:
    dialect = options.dialect
    text = lines[index]
    if is_label(text, dialect):
        return 0

    increase = False
    decrease = starts_with_keyword(_masked_body(text, dialect), dialect.decrease_bol)
    previous_indent = 0

    prev = previous_code_line(lines, index, dialect)
    if prev is not None:
        prev_text = lines[prev]
        prev_code = _masked_body(prev_text, dialect)
        previous_indent = current_indent(prev_text, options.line_number_cols)
        increase = ends_with_keyword(
            prev_code, dialect.increase_eol
        ) or starts_with_keyword(prev_code, dialect.increase_bol)
        if closes_after_separator(prev_code, dialect):
            decrease = True

    offset = options.indent_offset
    indent = previous_indent + (offset if increase else 0) - (offset if decrease else 0)
    return max(0, indent)


# * Render lines[index] at the given indent (labels always flush left)
def reindent_text(text: str, indent: int, options: EngineOptions) -> str:
    if not text.strip():
        return text
    if is_label(text, options.dialect):
        return text.lstrip()
    body, number = strip_line_number(text)
    if number is None:
        body = body.lstrip()
        return render_line(body, None, indent, options.line_number_cols)
    return render_line(body, number.digits, indent, options.line_number_cols)


# * True if the line already matches its computed indentation (trailing whitespace ignored)
def is_correctly_indented(lines: Lines, index: int, options: EngineOptions) -> bool:
    text = lines[index]
    expected = reindent_text(text, calculate_indent(lines, index, options), options)
    return expected.rstrip() == text.rstrip()


# * Re-indent lines[index] in place & return the new text
def indent_line(lines: Lines, index: int, options: EngineOptions) -> str:
    text = reindent_text(lines[index], calculate_indent(lines, index, options), options)
    lines[index] = text
    return text
