# tests/unit/core/test_indent.py
# Unit tests for keyword-driven indentation

from basicfmt.core.dialects import GENERIC, QB45, ZX81
from basicfmt.core.indent import (
    calculate_indent,
    closes_after_separator,
    ends_with_keyword,
    indent_line,
    is_correctly_indented,
    reindent_text,
    starts_with_keyword,
)
from basicfmt.core.options import EngineOptions


class TestKeywordMatching:

    def test_starts_with_keyword_is_word_bounded(self):
        assert starts_with_keyword("  NEXT I", ("next",)) is True
        assert starts_with_keyword("NEXTVAL = 1", ("next",)) is False

    def test_ends_with_keyword(self):
        assert ends_with_keyword("IF A THEN  ", ("then",)) is True
        assert ends_with_keyword("IF A THEN PRINT", ("then",)) is False

    def test_empty_keyword_set_never_matches(self):
        assert starts_with_keyword("FOR I", ()) is False
        assert ends_with_keyword("THEN", ()) is False

    def test_closes_after_separator(self):
        assert closes_after_separator("PRINT I: NEXT I", GENERIC) is True
        assert closes_after_separator("NEXT I", GENERIC) is False


class TestCalculateIndent:

    # * Verify FOR opens a block & NEXT closes it
    def test_for_next(self, options):
        lines = ["10 FOR I = 1 TO 3", "20 PRINT I", "30 NEXT I"]
        indent_line(lines, 1, options)
        assert lines[1] == "20     PRINT I"
        assert calculate_indent(lines, 2, options) == 0

    # * Verify THEN at end of line opens a block
    def test_then_at_eol(self, options):
        lines = ["10 IF X THEN", "20 PRINT X"]
        assert calculate_indent(lines, 1, options) == 4

    # * Verify single-line IF does not indent the next line
    def test_single_line_if(self, options):
        lines = ["10 IF X THEN PRINT X", "20 PRINT Y"]
        assert calculate_indent(lines, 1, options) == 0

    # * Verify a closing statement after a separator outdents the next line
    def test_close_after_separator(self, options):
        lines = ["10 FOR I = 1 TO 3", "20     PRINT I: NEXT I", "30 PRINT"]
        assert calculate_indent(lines, 2, options) == 0

    # * Verify indent never goes negative
    def test_never_negative(self, options):
        assert calculate_indent(["10 NEXT I"], 0, options) == 0

    # * Verify labels always sit at column 0
    def test_label_is_flush_left(self, options):
        lines = ["10 FOR I = 1 TO 3", "    inner:"]
        assert calculate_indent(lines, 1, options) == 0
        assert reindent_text(lines[1], 4, options) == "inner:"

    # * Verify keywords inside strings & comments are ignored
    def test_keywords_in_strings_ignored(self, options):
        lines = ['10 PRINT "FOR"', "20 PRINT"]
        assert calculate_indent(lines, 1, options) == 0
        lines = ["10 PRINT ' THEN", "20 PRINT"]
        assert calculate_indent(lines, 1, options) == 0

    # * Verify comment lines are skipped when looking back
    def test_comment_lines_skipped(self, options):
        lines = ["10 FOR I = 1 TO 3", "20 REM body", "30 PRINT I"]
        assert calculate_indent(lines, 2, options) == 4

    # * Verify the indent unit comes from options
    def test_custom_indent_offset(self):
        options = EngineOptions(indent_offset=2)
        lines = ["10 WHILE X", "20 X = X - 1"]
        assert calculate_indent(lines, 1, options) == 2

    # * Verify QB45 SELECT CASE blocks
    def test_qb45_select_case(self, qb_options):
        lines = ["SELECT CASE X", "CASE 1", "PRINT 1", "END SELECT"]
        for i in range(len(lines)):
            indent_line(lines, i, qb_options)
        assert lines == ["SELECT CASE X", "CASE 1", "    PRINT 1", "END SELECT"]

    # * Verify ZX81 never indents after THEN
    def test_zx81_no_then_block(self):
        options = EngineOptions(dialect=ZX81)
        lines = ["10 IF X THEN", "20 PRINT X"]
        assert calculate_indent(lines, 1, options) == 0


class TestReindent:

    def test_blank_unchanged(self, options):
        assert reindent_text("   ", 4, options) == "   "

    def test_unnumbered_uses_indent(self, options):
        assert reindent_text("  PRINT", 4, options) == "    PRINT"

    def test_number_digits_kept(self, options):
        assert reindent_text("010 PRINT", 4, options) == "010     PRINT"

    def test_aligned_numbers(self):
        options = EngineOptions(line_number_cols=5)
        assert reindent_text("10 PRINT", 0, options) == "  10 PRINT"
        assert reindent_text("PRINT", 0, options) == "     PRINT"

    # * Verify trailing whitespace does not count as misindentation
    def test_is_correctly_indented_ignores_trailing_space(self, options):
        lines = ["10 PRINT   "]
        assert is_correctly_indented(lines, 0, options) is True

    # * Verify indenting twice is a no-op
    def test_idempotent(self, options):
        lines = ["10 FOR I = 1 TO 3", "20 PRINT I", "30 NEXT I"]
        for i in range(len(lines)):
            indent_line(lines, i, options)
        snapshot = list(lines)
        for i in range(len(lines)):
            indent_line(lines, i, options)
        assert lines == snapshot
        assert all(is_correctly_indented(lines, i, options) for i in range(len(lines)))
