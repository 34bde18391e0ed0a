# basicfmt/core/output.py
# Engine log registry: core modules report indexing, renumbering, formatting & file I/O through
# whichever sink the CLI registered, so nothing under core/ imports the CLI
# * The Rich/log-file sink lives in basicfmt/cli/session_log.py (SessionLog)

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, runtime_checkable


# * Subsystem tag written in front of every entry
class LogCategory(str, Enum):
    INDEX = "INDEX"
    RENUMBER = "RENUMBER"
    FORMAT = "FORMAT"
    FILE = "FILE"
    WATCH = "WATCH"


# * What the engine needs from a log sink
@runtime_checkable
class EngineLog(Protocol):
    def log(
        self, category: LogCategory, msg: str, detail: Optional[str] = None
    ) -> None: ...

    def end_session(self) -> None: ...


# * Sink used when nobody asked for a log (library use, plain CLI runs)
class NullEngineLog:
    def log(
        self, category: LogCategory, msg: str, detail: Optional[str] = None
    ) -> None:
        pass

    def end_session(self) -> None:
        pass


_engine_log: EngineLog = NullEngineLog()


def set_engine_log(sink: EngineLog) -> None:
    global _engine_log
    _engine_log = sink


def get_engine_log() -> EngineLog:
    return _engine_log


# * Back to the null sink (end of a CLI session, test isolation)
def reset_engine_log() -> None:
    global _engine_log
    _engine_log = NullEngineLog()
