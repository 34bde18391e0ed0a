# tests/unit/cli/test_session_log.py
# Unit tests for the CLI engine log sink (console echo & log file)

import pytest

from basicfmt.basic_io.console import configure_console, reset_console
from basicfmt.cli.session_log import SessionLog
from basicfmt.core.exceptions import FileWriteError
from basicfmt.core.output import EngineLog, LogCategory


@pytest.fixture
def recording():
    console = configure_console(record=True, width=120)
    yield console
    reset_console()


class TestConsoleEcho:

    def test_implements_protocol(self):
        assert isinstance(SessionLog(), EngineLog)

    # * Verify entries reach the console only when echo is on
    def test_echo_gated(self, recording):
        SessionLog(echo=False).log(LogCategory.INDEX, "hidden")
        SessionLog(echo=True).log(LogCategory.INDEX, "shown", detail="line one\nline two")
        text = recording.export_text()
        assert "hidden" not in text
        assert "[INDEX] shown" in text
        assert "line two" in text

    # * Verify bracketed text in messages is printed literally
    def test_markup_escaped(self, recording):
        SessionLog(echo=True).log(LogCategory.FILE, "Read [red]prog.bas")
        assert "Read [red]prog.bas" in recording.export_text()


class TestLogFile:

    # * Verify the log file receives plain-text entries framed by session markers
    def test_log_file(self, tmp_path):
        log_path = tmp_path / "logs" / "run.log"
        session = SessionLog(log_file=log_path)
        session.log(LogCategory.RENUMBER, "Renumbered 3 lines", detail="Start: 10")
        session.end_session()

        content = log_path.read_text(encoding="utf-8")
        assert "Session Started" in content
        assert "[RENUMBER] Renumbered 3 lines" in content
        assert "  Start: 10" in content
        assert "Session Ended" in content

    # * Verify ending twice is harmless & nothing is written after the end
    def test_end_session_idempotent(self, tmp_path):
        log_path = tmp_path / "run.log"
        session = SessionLog(log_file=log_path)
        session.end_session()
        session.end_session()
        session.log(LogCategory.FORMAT, "late entry")
        content = log_path.read_text(encoding="utf-8")
        assert content.count("Session Ended") == 1
        assert "late entry" not in content

    # * Verify an unusable log path is reported as a file error
    def test_unwritable_log_file(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(FileWriteError) as exc_info:
            SessionLog(log_file=blocker / "run.log")
        assert exc_info.value.path == blocker / "run.log"
