# basicfmt/core/constants.py
# Enums & defaults for line classification, jump keyword families & argument grammars

from enum import Enum


# * Default engine settings
DEFAULT_INDENT_OFFSET = 4
DEFAULT_LINE_NUMBER_COLS = 0
DEFAULT_RENUMBER_INCREMENT = 10
DEFAULT_DIALECT = "generic"

# statement separator shared by all supported dialects
STATEMENT_SEPARATOR = ":"


# * Classification of one physical line
class LineKind(Enum):
    BLANK = "blank"
    LABEL = "label"
    COMMENT = "comment"
    CODE = "code"


# * Keyword family that produced a jump reference
class JumpFamily(Enum):
    GOTO_LIKE = "goto_like"
    ERL_COMPARE = "erl_compare"
    DELETE_LIST_RANGE = "delete_list_range"
    RENUM = "renum"


# * Shape of the numeric arguments following a jump keyword
class ArgGrammar(Enum):
    # one number
    SINGLE_NUMBER = "single_number"
    # numbers joined by ',' or '-' (ON X GOTO 10,20,30)
    NUMBER_LIST = "number_list"
    # optional 'a', 'a-', '-b' or 'a-b'
    RANGE = "range"
