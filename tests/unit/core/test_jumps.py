# tests/unit/core/test_jumps.py
# Unit tests for jump-reference scanning & the whole-buffer index

import pytest

from basicfmt.core.constants import JumpFamily
from basicfmt.core.dialects import GENERIC, ZX81
from basicfmt.core.jumps import JumpIndex, build_index, scan_references
from basicfmt.core.types import JumpReference


def _targets(text: str) -> list[int]:
    return [r.target for r in scan_references(text, 0, GENERIC.jump_rules, GENERIC)]


class TestScanReferences:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("10 GOTO 100", [100]),
            ("10 GOSUB 2000", [2000]),
            ("10 IF A THEN 50 ELSE 60", [50, 60]),
            ("10 ON X GOTO 100, 200,300", [100, 200, 300]),
            ("10 ON X GOSUB 100-200", [100, 200]),
            ("10 RESTORE 500", [500]),
            ("10 RESUME 40", [40]),
            ("10 RUN 30", [30]),
            ("10 RETURN 70", [70]),
            ("10 EDIT 80", [80]),
            ("10 RENUM 1000", [1000]),
            ("10 IF ERL = 100 THEN RESUME 200", [100, 200]),
            ("10 IF ERL<>30 THEN END", [30]),
            ("LIST 100-200", [100, 200]),
            ("LLIST 100-", [100]),
            ("DELETE -50", [50]),
            ("10 goto 20", [20]),
        ],
    )
    # * Verify each keyword family finds its arguments
    def test_families(self, text, expected):
        assert _targets(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            '10 PRINT "GOTO 10"',
            "10 REM GOTO 10",
            "10 PRINT X ' GOSUB 20",
            "10 RETURN",
            "10 GOTO X",
            "10 PRINT 20",
        ],
    )
    # * Verify no references outside code or without numeric arguments
    def test_no_references(self, text):
        assert _targets(text) == []

    # * Verify the line's own number is never indexed
    def test_own_number_not_indexed(self):
        assert _targets("100 GOTO 100") == [100]

    # * Verify reference positions & family tags
    def test_reference_location(self):
        refs = scan_references("10 GOSUB 30: LIST 5-9", 4, GENERIC.jump_rules, GENERIC)
        assert refs[0] == JumpReference(
            line=4, column=9, length=2, target=30, family=JumpFamily.GOTO_LIKE
        )
        assert [r.family for r in refs[1:]] == [JumpFamily.DELETE_LIST_RANGE] * 2
        assert [r.column for r in refs] == sorted(r.column for r in refs)

    # * Verify ON ERROR GOTO 0 is an ordinary reference to 0
    def test_on_error_goto_zero(self):
        assert _targets("10 ON ERROR GOTO 0") == [0]


    # * Verify keywords written without a space before the number
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("10 GOTO100", [100]),
            ("10 GOSUB1000", [1000]),
            ("10 IF A THEN100", [100]),
            ("10 ON X GOTO100,200", [100, 200]),
        ],
    )
    def test_crunched_keywords(self, text, expected):
        assert _targets(text) == expected

    # * Verify a keyword glued to a name is still not a keyword
    def test_keyword_prefix_of_name(self):
        assert _targets("10 RUNS = 5: GOTOX = 3") == []

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("10 GO TO 30", [30]),
            ("10 GO SUB 200", [200]),
            ("10 GOTO 40", [40]),
            ("10 IF A=1 THEN GO TO 90", [90]),
            ("10 RESTORE 300", [300]),
            ("10 RUN 5", [5]),
            ("10 LIST 100", [100]),
            ('10 PRINT "GO TO 10"', []),
            ("10 REM GO SUB 20", []),
        ],
    )
    # * Verify Sinclair two-word jump keywords
    def test_zx81_keywords(self, text, expected):
        refs = scan_references(text, 0, ZX81.jump_rules, ZX81)
        assert [r.target for r in refs] == expected


class TestJumpIndex:

    def test_build_index_groups_by_target(self, sample_program):
        index = build_index(sample_program, GENERIC)
        assert index.targets() == [100, 200]
        assert len(index) == 2
        assert [r.line for r in index.pop(100)] == [3]
        assert index.targets() == [200]

    # * Verify popped references are gone for good
    def test_pop_consumes(self):
        index = build_index(["10 GOTO 30", "20 GOSUB 30", "30 END"], GENERIC)
        popped = index.pop(30)
        assert [r.line for r in popped] == [0, 1]
        assert index.pop(30) == []
        assert len(index) == 0

    def test_add(self):
        index = JumpIndex()
        ref = JumpReference(0, 8, 2, 30, JumpFamily.GOTO_LIKE)
        index.add(ref)
        assert index.targets() == [30]
        assert index.pop(30) == [ref]
