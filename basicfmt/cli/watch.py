# basicfmt/cli/watch.py
# Re-format a BASIC source file whenever it is saved (format --watch)

from __future__ import annotations

import os
import signal
from pathlib import Path
from threading import Timer
from typing import Callable, Iterable

from rich.markup import escape
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..basic_io.console import console
from ..core.exceptions import BasicfmtError
from ..core.verbose import vlog_watch
from .decorators import describe_error


# * Collapses a burst of saves to one on_change(path) call, delay seconds after the last event
class DebouncedHandler(FileSystemEventHandler):
    def __init__(
        self, sources: Iterable[Path], on_change: Callable[[Path], None], delay: float
    ):
        self.sources = frozenset(p.resolve() for p in sources)
        self.on_change = on_change
        self.delay = delay
        self._pending: Timer | None = None

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._schedule(event.src_path)

    # editors that save via a temp file + rename show up as moves onto the source
    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._schedule(event.dest_path)

    def _schedule(self, raw_path: str | bytes) -> None:
        changed = Path(os.fsdecode(raw_path)).resolve()
        if changed not in self.sources:
            return
        if self._pending is not None:
            self._pending.cancel()
        self._pending = Timer(self.delay, self.on_change, args=[changed])
        self._pending.daemon = True
        self._pending.start()


# * Run a watched command; basicfmt errors are printed & the watch keeps going
def run_reporting_errors(run: Callable[[], None]) -> None:
    try:
        run()
    except BasicfmtError as e:
        console.print(describe_error(e))


def _stop_on_sigterm(signum, frame) -> None:
    raise KeyboardInterrupt


# * Watch BASIC sources & re-run the command on every (debounced) save
class WatchRunner:
    def __init__(self, sources: list[Path], run: Callable[[], None], debounce: float = 1.0):
        self.sources = [p for p in sources if p.exists()]
        self.run = run
        self.debounce = debounce

    def start(self) -> None:
        if not self.sources:
            console.print("[red]Nothing to watch: none of the source files exist[/]")
            return

        run_reporting_errors(self.run)

        handler = DebouncedHandler(self.sources, self._rerun, self.debounce)
        observer = Observer()
        for folder in sorted({p.resolve().parent for p in self.sources}):
            observer.schedule(handler, str(folder), recursive=False)

        previous_sigterm = signal.signal(signal.SIGTERM, _stop_on_sigterm)
        self._announce()
        observer.start()
        try:
            while observer.is_alive():
                observer.join(timeout=1)
        except KeyboardInterrupt:
            console.print("\n[dim]Stopped watching.[/]")
        finally:
            signal.signal(signal.SIGTERM, previous_sigterm)
            observer.stop()
            observer.join()

    def _rerun(self, changed: Path) -> None:
        vlog_watch(changed)
        console.print(f"\n[dim]{escape(changed.name)} saved, formatting again[/]")
        run_reporting_errors(self.run)
        self._announce()

    def _announce(self) -> None:
        names = ", ".join(escape(p.name) for p in self.sources)
        console.print(f"\n[cyan]Watching {names}[/] [dim](Ctrl+C to stop)[/]")
