# basicfmt/core/types.py
# Core value types shared by the classifier, codec, indent calculator & jump index

from __future__ import annotations

from dataclasses import dataclass

from .constants import LineKind, JumpFamily

# Physical lines of a buffer, 0-indexed, w/out line terminators
Lines = list[str]


# * Line-number prefix as it appeared in the text
@dataclass(frozen=True)
class LineNumber:
    value: int
    # digit text as written (keeps leading zeros)
    digits: str

    @property
    def width(self) -> int:
        return len(self.digits)


# * View of one physical line, rebuilt on every access
@dataclass(frozen=True)
class SourceLine:
    index: int
    text: str
    kind: LineKind
    number: LineNumber | None
    body_start: int

    @property
    def body(self) -> str:
        return self.text[self.body_start :]


# * Location of a numeric literal that names a target line
@dataclass(frozen=True)
class JumpReference:
    line: int
    column: int
    length: int
    target: int
    family: JumpFamily

    @property
    def end(self) -> int:
        return self.column + self.length
