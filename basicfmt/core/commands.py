# basicfmt/core/commands.py
# Buffer-level commands: format, indent current line, line break w/ auto-numbering,
# renumber & electric colon

from __future__ import annotations

from .autonumber import number_for_new_line
from .buffer import Buffer, Cursor, Region
from .edit_helpers import delete_trailing_blank_lines
from .exceptions import InvalidArgumentError
from .indent import calculate_indent, indent_line, is_correctly_indented, reindent_text
from .line_numbers import code_body_start, number_end, parse_line_number, render_line
from .options import EngineOptions
from .renumber import RenumberPlan, RenumberSummary, renumber
from .syntax import scan_line
from .verbose import vlog_format


# * Re-indent every line in region (whole buffer when None) & clean up whitespace;
# * returns the number of lines changed or removed
def format_buffer(
    buffer: Buffer, options: EngineOptions, region: Region | None = None
) -> int:
    lines = buffer.lines
    line_range = (region or buffer.whole()).line_range(len(lines))
    changed = 0

    for i in line_range:
        before = lines[i]
        if options.delete_trailing_whitespace:
            lines[i] = lines[i].rstrip()
        if lines[i].strip() and not is_correctly_indented(lines, i, options):
            indent_line(lines, i, options)
            if options.delete_trailing_whitespace:
                lines[i] = lines[i].rstrip()
        if lines[i] != before:
            changed += 1

    removed = 0
    if region is None and options.delete_trailing_blank_lines:
        removed = delete_trailing_blank_lines(lines)

    vlog_format(len(line_range), changed, removed)
    return changed + removed


# * Indent the cursor line, keeping the cursor's offset from the code body
def indent_current_line(buffer: Buffer, cursor: Cursor, options: EngineOptions) -> Cursor:
    lines = buffer.lines
    row = cursor.line
    text = lines[row]

    if not text.strip():
        indent = calculate_indent(lines, row, options)
        lines[row] = render_line("", None, indent, options.line_number_cols)
        return Cursor(row, len(lines[row]))

    offset = cursor.column - code_body_start(text)
    indent_line(lines, row, options)
    return Cursor(row, code_body_start(lines[row]) + max(0, offset))


# comment lead to carry onto the new line when the break happens inside a comment
def _active_comment_lead(text: str, column: int, options: EngineOptions) -> str | None:
    syntax = scan_line(text, options.dialect)
    if not syntax.in_comment(column):
        return None
    return syntax.comment_lead(options.dialect)


# * Split the line at the cursor, re-indent both halves & auto-number the new line
def insert_line_break(buffer: Buffer, cursor: Cursor, options: EngineOptions) -> Cursor:
    lines = buffer.lines
    row = cursor.line
    text = lines[row]
    col = min(cursor.column, len(text))
    step = options.auto_number_increment

    # cursor before or inside the number: open a line above, original line untouched
    digits_end = number_end(text)
    if step is not None and digits_end is not None and col < digits_end:
        lines.insert(row, "")
        return Cursor(row + 1, cursor.column)

    new_number = number_for_new_line(lines, row, step)
    lead = _active_comment_lead(text, col, options)
    head, tail = text[:col], text[col:]

    lines[row] = head.rstrip()
    if lines[row].strip():
        lines[row] = indent_line(lines, row, options).rstrip()

    content = tail.lstrip()
    body = content
    if lead is not None:
        syntax = scan_line(body, options.dialect)
        if syntax.comment_start != 0:
            body = f"{lead} {body}" if body else lead

    lines.insert(row + 1, body)
    indent = calculate_indent(lines, row + 1, options)
    if new_number is None:
        if body:
            new_line = reindent_text(body, indent, options)
        else:
            new_line = render_line("", None, indent, options.line_number_cols)
    else:
        new_line = render_line(body, new_number, indent, options.line_number_cols)
    lines[row + 1] = new_line
    return Cursor(row + 1, len(new_line) - len(content))


# * Insert the statement separator & re-indent unless inside a comment or string
def electric_colon(buffer: Buffer, cursor: Cursor, options: EngineOptions) -> Cursor:
    lines = buffer.lines
    row = cursor.line
    text = lines[row]
    col = min(cursor.column, len(text))
    separator = options.dialect.separator

    inside = scan_line(text, options.dialect).in_comment_or_string(col)
    lines[row] = text[:col] + separator + text[col:]
    after = Cursor(row, col + len(separator))
    if inside:
        return after
    return indent_current_line(buffer, after, options)


# * Renumber lines in region (whole buffer when None); rejects caller misuse up front
def renumber_buffer(
    buffer: Buffer,
    options: EngineOptions,
    start: int | None = None,
    increment: int | None = None,
    region: Region | None = None,
) -> RenumberSummary:
    if increment is None:
        increment = options.renumber_increment
    if increment <= 0:
        raise InvalidArgumentError(
            f"Renumber increment must be a positive integer, got {increment}",
            argument="increment",
            value=increment,
        )

    line_range = (region or buffer.whole()).line_range(len(buffer.lines))
    if start is None:
        start = _first_number(buffer, line_range)
        if start is None:
            start = options.renumber_increment
    if start < 0:
        raise InvalidArgumentError(
            f"Renumber start must be non-negative, got {start}",
            argument="start",
            value=start,
        )

    plan = RenumberPlan(
        start=start,
        increment=increment,
        range_start=line_range.start,
        range_end=line_range.stop,
        include_unnumbered=options.renumber_include_unnumbered,
    )
    return renumber(buffer.lines, plan, options)


# first existing line number inside the range
def _first_number(buffer: Buffer, line_range: range) -> int | None:
    for i in line_range:
        number = parse_line_number(buffer.lines[i])
        if number is not None:
            return number.value
    return None
