# basicfmt/core/dialects.py
# Immutable per-dialect keyword configuration & the registry of supported dialects

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Pattern

from .constants import ArgGrammar, JumpFamily, STATEMENT_SEPARATOR, DEFAULT_DIALECT
from .exceptions import DialectNotFoundError


# * Compile a case-insensitive, word-bounded alternation of keywords
@lru_cache(maxsize=None)
def keyword_pattern(words: tuple[str, ...]) -> Pattern[str]:
    if not words:
        # empty keyword set never matches
        return re.compile(r"(?!)")
    # longest first so "elseif" wins over "else"
    ordered = sorted(words, key=len, reverse=True)
    alternation = "|".join(re.escape(w) for w in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


# * Compile a jump keyword alternation; digits may follow directly ("GOTO100") &
# * a space inside a keyword matches any run of blanks ("GO TO", "GOTO")
@lru_cache(maxsize=None)
def jump_keyword_pattern(words: tuple[str, ...]) -> Pattern[str]:
    ordered = sorted(words, key=len, reverse=True)
    alternation = "|".join(
        r"[ \t]*".join(re.escape(part) for part in w.split()) for w in ordered
    )
    return re.compile(rf"\b(?:{alternation})(?![A-Za-z_$])", re.IGNORECASE)


# * Jump keyword table entry: family tag + argument grammar + keyword matcher
@dataclass(frozen=True)
class KeywordRule:
    family: JumpFamily
    grammar: ArgGrammar
    pattern: Pattern[str]

    @classmethod
    def for_words(
        cls, family: JumpFamily, grammar: ArgGrammar, *words: str
    ) -> "KeywordRule":
        return cls(family, grammar, jump_keyword_pattern(tuple(words)))


DEFAULT_JUMP_RULES: tuple[KeywordRule, ...] = (
    KeywordRule.for_words(
        JumpFamily.GOTO_LIKE,
        ArgGrammar.NUMBER_LIST,
        "edit",
        "else",
        "gosub",
        "goto",
        "restore",
        "resume",
        "return",
        "run",
        "then",
    ),
    KeywordRule(
        JumpFamily.ERL_COMPARE,
        ArgGrammar.SINGLE_NUMBER,
        re.compile(r"\berl[ \t]*(?:<>|<=|>=|=|<|>)", re.IGNORECASE),
    ),
    KeywordRule.for_words(
        JumpFamily.DELETE_LIST_RANGE, ArgGrammar.RANGE, "delete", "list", "llist"
    ),
    KeywordRule.for_words(JumpFamily.RENUM, ArgGrammar.SINGLE_NUMBER, "renum"),
)

# Sinclair keywords are single tokens listed as "GO TO" / "GO SUB"; no ON..GOTO, ERL or RENUM
ZX_JUMP_RULES: tuple[KeywordRule, ...] = (
    KeywordRule.for_words(
        JumpFamily.GOTO_LIKE, ArgGrammar.SINGLE_NUMBER, "go sub", "go to", "restore", "run"
    ),
    KeywordRule.for_words(
        JumpFamily.DELETE_LIST_RANGE, ArgGrammar.SINGLE_NUMBER, "list", "llist"
    ),
)

# statements that can never be a label name (keeps "PRINT: CLS" classified as code)
COMMON_STATEMENT_KEYWORDS: tuple[str, ...] = (
    "beep", "call", "chain", "clear", "close", "cls", "common", "cont", "data",
    "def", "delete", "dim", "do", "else", "end", "endif", "erase", "error",
    "field", "for", "get", "gosub", "goto", "if", "input", "kill", "let",
    "line", "list", "llist", "load", "locate", "loop", "lprint", "new", "next",
    "on", "open", "option", "out", "poke", "print", "put", "randomize", "read",
    "rem", "renum", "restore", "resume", "return", "run", "save", "screen",
    "stop", "swap", "system", "then", "wend", "while", "width", "write",
)


# * Keyword sets & lexical conventions for one BASIC dialect (never mutated)
@dataclass(frozen=True)
class DialectConfig:
    name: str
    description: str
    # keyword at end of previous code line opens a block
    increase_eol: tuple[str, ...]
    # keyword at start of previous code line opens a block
    increase_bol: tuple[str, ...]
    # keyword at start of a statement closes a block
    decrease_bol: tuple[str, ...]
    comment_leads: tuple[str, ...] = ("'", "rem")
    statement_keywords: tuple[str, ...] = COMMON_STATEMENT_KEYWORDS
    separator: str = STATEMENT_SEPARATOR
    # when False, "REMARK" opens a comment too (token-oriented dialects)
    require_separator: bool = True
    jump_rules: tuple[KeywordRule, ...] = DEFAULT_JUMP_RULES

    @property
    def comment_chars(self) -> tuple[str, ...]:
        return tuple(lead for lead in self.comment_leads if not lead.isalpha())

    @property
    def comment_words(self) -> tuple[str, ...]:
        return tuple(lead for lead in self.comment_leads if lead.isalpha())

    # * Copy w/ a different separator requirement for REM detection
    def with_require_separator(self, value: bool) -> "DialectConfig":
        return replace(self, require_separator=value)


GENERIC = DialectConfig(
    name="generic",
    description="Structured Microsoft-style BASIC (GW-BASIC w/ block statements)",
    increase_eol=("else", "then"),
    increase_bol=("do", "for", "function", "repeat", "sub", "while"),
    decrease_bol=("else", "elseif", "end", "endif", "loop", "next", "until", "wend"),
)

QB45 = DialectConfig(
    name="qb45",
    description="QuickBASIC 4.5 w/ SELECT CASE, TYPE & procedure blocks",
    increase_eol=("else", "then"),
    increase_bol=(
        "case", "do", "for", "function", "select", "sub", "type", "while",
    ),
    decrease_bol=("case", "else", "elseif", "end", "loop", "next", "wend"),
)

TRS80 = DialectConfig(
    name="trs80",
    description="TRS-80 Level II BASIC",
    increase_eol=("else", "then"),
    increase_bol=("for",),
    decrease_bol=("else", "next"),
)

ZX81 = DialectConfig(
    name="zx81",
    description="Sinclair ZX81 / Spectrum BASIC (REM-only comments, keyword tokens)",
    increase_eol=(),
    increase_bol=("for",),
    decrease_bol=("next",),
    comment_leads=("rem",),
    require_separator=False,
    jump_rules=ZX_JUMP_RULES,
)

DIALECTS: dict[str, DialectConfig] = {
    d.name: d for d in (GENERIC, QB45, TRS80, ZX81)
}


# * Look up a registered dialect by name (case-insensitive)
def get_dialect(name: str | None = None) -> DialectConfig:
    key = (name or DEFAULT_DIALECT).strip().lower()
    try:
        return DIALECTS[key]
    except KeyError:
        valid = ", ".join(sorted(DIALECTS))
        raise DialectNotFoundError(
            f"Unknown dialect '{name}'. Valid dialects: {valid}", dialect=str(name)
        ) from None
