# basicfmt/core/__init__.py
# Engine exports: classification, line-number codec, indentation, jump index, renumbering & commands

from .buffer import Buffer, Cursor, Region
from .classifier import classify, is_label, previous_code_line, read_line
from .commands import (
    electric_colon,
    format_buffer,
    indent_current_line,
    insert_line_break,
    renumber_buffer,
)
from .constants import ArgGrammar, JumpFamily, LineKind
from .dialects import DIALECTS, DialectConfig, KeywordRule, get_dialect
from .indent import calculate_indent, indent_line, is_correctly_indented
from .jumps import JumpIndex, build_index
from .line_numbers import (
    format_line_number,
    has_line_number,
    parse_line_number,
    strip_line_number,
)
from .autonumber import next_line_number
from .options import EngineOptions
from .renumber import RenumberPlan, RenumberSummary, renumber
from .types import JumpReference, LineNumber, SourceLine

__all__ = [
    "Buffer",
    "Cursor",
    "Region",
    "classify",
    "is_label",
    "previous_code_line",
    "read_line",
    "electric_colon",
    "format_buffer",
    "indent_current_line",
    "insert_line_break",
    "renumber_buffer",
    "ArgGrammar",
    "JumpFamily",
    "LineKind",
    "DIALECTS",
    "DialectConfig",
    "KeywordRule",
    "get_dialect",
    "calculate_indent",
    "indent_line",
    "is_correctly_indented",
    "JumpIndex",
    "build_index",
    "format_line_number",
    "has_line_number",
    "parse_line_number",
    "strip_line_number",
    "next_line_number",
    "EngineOptions",
    "RenumberPlan",
    "RenumberSummary",
    "renumber",
    "JumpReference",
    "LineNumber",
    "SourceLine",
]
