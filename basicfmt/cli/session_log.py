# basicfmt/cli/session_log.py
# Engine log sink for one CLI run: Rich console lines under --verbose, plain-text copy under --log-file

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.markup import escape

from ..basic_io.console import console
from ..core.exceptions import FileWriteError
from ..core.output import LogCategory


class SessionLog:
    # Implements core.output.EngineLog; registered by init_verbose()

    def __init__(self, echo: bool = False, log_file: Path | None = None) -> None:
        self.echo = echo
        self._started = time.monotonic()
        self._handle: Optional[TextIO] = None
        if log_file is not None:
            self._open(log_file)

    def log(
        self, category: LogCategory, msg: str, detail: Optional[str] = None
    ) -> None:
        stamp = f"{time.monotonic() - self._started:.2f}s"
        detail_lines = detail.splitlines() if detail else []

        if self.echo:
            console.print(
                f"[dim]\\[{stamp}][/] [bold cyan]\\[{category.value}][/] {escape(msg)}"
            )
            for line in detail_lines:
                console.print(f"  [dim]{escape(line)}[/]")

        self._write(f"[{stamp}] [{category.value}] {msg}", *(f"  {d}" for d in detail_lines))

    def end_session(self) -> None:
        if self._handle is None:
            return
        self._write(f"Session Ended: {datetime.now().isoformat()}")
        self._handle.close()
        self._handle = None

    def _open(self, log_file: Path) -> None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._handle = open(log_file, "a", encoding="utf-8")
        except OSError as e:
            raise FileWriteError(f"Cannot open log file {log_file}: {e}", log_file) from e
        self._write(f"Session Started: {datetime.now().isoformat()}")

    def _write(self, *lines: str) -> None:
        if self._handle is None:
            return
        for line in lines:
            self._handle.write(f"{line}\n")
        self._handle.flush()
