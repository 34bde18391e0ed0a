# basicfmt/core/options.py
# Immutable engine options consumed by every core operation (built from user settings)

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    DEFAULT_INDENT_OFFSET,
    DEFAULT_LINE_NUMBER_COLS,
    DEFAULT_RENUMBER_INCREMENT,
)
from .dialects import DialectConfig, GENERIC


# * Engine knobs + the dialect they apply to
@dataclass(frozen=True)
class EngineOptions:
    dialect: DialectConfig = field(default=GENERIC)
    indent_offset: int = DEFAULT_INDENT_OFFSET
    # 0 = no alignment; otherwise total prefix width incl. separating space
    line_number_cols: int = DEFAULT_LINE_NUMBER_COLS
    delete_trailing_whitespace: bool = True
    delete_trailing_blank_lines: bool = True
    # None = auto-numbering off
    auto_number_increment: int | None = None
    renumber_increment: int = DEFAULT_RENUMBER_INCREMENT
    renumber_include_unnumbered: bool = True
