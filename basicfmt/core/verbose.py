# basicfmt/core/verbose.py
# Verbose logging helpers - one structured entry per engine step (index scan, renumber pass, format pass, file I/O, watch trigger)

from __future__ import annotations

from pathlib import Path

from .output import LogCategory, get_engine_log, reset_engine_log, set_engine_log


# * Start a logging session for one CLI run; no sink is registered when neither output is wanted
def init_verbose(echo: bool = False, log_file: Path | None = None) -> None:
    if not echo and log_file is None:
        reset_engine_log()
        return

    from ..cli.session_log import SessionLog

    set_engine_log(SessionLog(echo=echo, log_file=log_file))


# * Log a finished jump index scan
def vlog_index(line_count: int, target_count: int, reference_count: int) -> None:
    get_engine_log().log(
        LogCategory.INDEX,
        f"Indexed {reference_count} jump references",
        f"Lines: {line_count:,}, Targets: {target_count}",
    )


# * Log a finished renumber pass
def vlog_renumber(
    start: int, increment: int, lines_renumbered: int, references_rewritten: int
) -> None:
    get_engine_log().log(
        LogCategory.RENUMBER,
        f"Renumbered {lines_renumbered} lines",
        f"Start: {start}, Increment: {increment}, References rewritten: {references_rewritten}",
    )


# * Log a finished format pass
def vlog_format(lines_scanned: int, lines_changed: int, trailing_removed: int = 0) -> None:
    detail = f"Scanned: {lines_scanned:,}, Changed: {lines_changed}"
    if trailing_removed:
        detail += f", Trailing blank lines removed: {trailing_removed}"
    get_engine_log().log(LogCategory.FORMAT, "Formatted buffer", detail)


def vlog_file_read(path: Path, size: int) -> None:
    get_engine_log().log(LogCategory.FILE, f"Read {path}", f"Size: {size:,} chars")


def vlog_file_write(path: Path, size: int) -> None:
    get_engine_log().log(LogCategory.FILE, f"Wrote {path}", f"Size: {size:,} chars")


# * Log a debounced change that re-runs the watched command
def vlog_watch(path: Path) -> None:
    get_engine_log().log(LogCategory.WATCH, f"Change detected in {path.name}", str(path))


# * Close the session's log file & drop back to the null sink
def cleanup_verbose() -> None:
    get_engine_log().end_session()
    reset_engine_log()
