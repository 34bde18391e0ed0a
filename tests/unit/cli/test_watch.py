# tests/unit/cli/test_watch.py
# Unit tests for the watch module (file watching & automatic re-run)

from __future__ import annotations

import time
from pathlib import Path
from unittest.mock import MagicMock, patch

from basicfmt.cli.watch import DebouncedHandler, WatchRunner, run_reporting_errors
from basicfmt.core.exceptions import FileReadError


def _event(path: Path, is_directory: bool = False) -> MagicMock:
    event = MagicMock()
    event.is_directory = is_directory
    event.src_path = str(path)
    return event


# Tests for DebouncedHandler class.
class TestDebouncedHandler:

    # * Verify filters unwatched paths
    def test_filters_unwatched_paths(self, tmp_path: Path):
        watched_file = tmp_path / "watched.bas"
        unwatched_file = tmp_path / "unwatched.bas"
        watched_file.touch()
        unwatched_file.touch()

        callback = MagicMock()
        handler = DebouncedHandler({watched_file}, callback, delay=0.1)
        handler.on_modified(_event(unwatched_file))

        time.sleep(0.2)
        callback.assert_not_called()

    # * Verify ignores directory events
    def test_ignores_directory_events(self, tmp_path: Path):
        watched_file = tmp_path / "watched.bas"
        watched_file.touch()

        callback = MagicMock()
        handler = DebouncedHandler({watched_file}, callback, delay=0.1)
        handler.on_modified(_event(tmp_path, is_directory=True))

        time.sleep(0.2)
        callback.assert_not_called()

    # * Verify rapid events collapse into one run
    def test_debounces_rapid_changes(self, tmp_path: Path):
        watched_file = tmp_path / "watched.bas"
        watched_file.touch()

        callback = MagicMock()
        handler = DebouncedHandler({watched_file}, callback, delay=0.1)
        for _ in range(3):
            handler.on_modified(_event(watched_file))

        time.sleep(0.4)
        callback.assert_called_once()
        assert callback.call_args.args[0] == watched_file.resolve()

    # * Verify a save via temp file + rename counts as a change to the source
    def test_rename_onto_source(self, tmp_path: Path):
        watched_file = tmp_path / "watched.bas"
        watched_file.touch()

        callback = MagicMock()
        handler = DebouncedHandler({watched_file}, callback, delay=0.1)
        event = _event(tmp_path / "watched.bas~")
        event.dest_path = str(watched_file)
        handler.on_moved(event)

        time.sleep(0.4)
        callback.assert_called_once_with(watched_file.resolve())


class TestRunReportingErrors:

    # * Verify basicfmt errors are reported instead of ending the watch
    def test_reports_basicfmt_errors(self):
        callback = MagicMock(side_effect=FileReadError("gone", "prog.bas"))
        with patch("basicfmt.cli.watch.console") as console:
            run_reporting_errors(callback)
        printed = console.print.call_args.args[0]
        assert "gone" in printed


class TestWatchRunner:

    # * Verify missing paths are dropped
    def test_filters_missing_paths(self, tmp_path: Path):
        existing = tmp_path / "prog.bas"
        existing.touch()
        runner = WatchRunner([existing, tmp_path / "missing.bas"], MagicMock())
        assert runner.sources == [existing]

    # * Verify nothing runs when there is nothing to watch
    def test_no_paths(self, tmp_path: Path):
        run_command = MagicMock()
        with patch("basicfmt.cli.watch.console"):
            WatchRunner([tmp_path / "missing.bas"], run_command).start()
        run_command.assert_not_called()

    # * Verify the command runs once before watching & the observer is stopped
    def test_runs_once_then_watches(self, tmp_path: Path):
        source = tmp_path / "prog.bas"
        source.touch()
        run_command = MagicMock()

        with patch("basicfmt.cli.watch.Observer") as observer_cls, patch(
            "basicfmt.cli.watch.console"
        ):
            observer = observer_cls.return_value
            observer.is_alive.return_value = False
            WatchRunner([source], run_command, debounce=0.1).start()

        run_command.assert_called_once()
        observer.schedule.assert_called_once()
        observer.start.assert_called_once()
        observer.stop.assert_called()

    # * Verify a detected change logs, re-runs the command & keeps watching
    def test_rerun_on_change(self, tmp_path: Path):
        source = tmp_path / "prog.bas"
        source.touch()
        run_command = MagicMock()
        runner = WatchRunner([source], run_command)

        with patch("basicfmt.cli.watch.console") as console, patch(
            "basicfmt.cli.watch.vlog_watch"
        ) as vlog_watch:
            runner._rerun(source)

        vlog_watch.assert_called_once_with(source)
        run_command.assert_called_once()
        printed = " ".join(str(c.args[0]) for c in console.print.call_args_list)
        assert "prog.bas saved, formatting again" in printed
