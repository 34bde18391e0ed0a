# basicfmt/basic_io/console.py
# Shared Rich console. Modules import `console` once at import time; the proxy lets --no-color
# (and tests recording output) swap the Console underneath without re-importing anything.

from __future__ import annotations

from typing import Any

from rich.console import Console


class _ConsoleProxy:
    __slots__ = ("_target",)

    def __init__(self) -> None:
        self._target = Console()

    # every Console attribute resolves against the current target
    def __getattr__(self, name: str) -> Any:
        return getattr(self._target, name)

    def swap(self, target: Console) -> Console:
        self._target = target
        return target


console = _ConsoleProxy()


# * Replace the shared Console w/ one built from Rich Console options; returns the new Console
def configure_console(**options: Any) -> Console:
    return console.swap(Console(**options))


# * Restore a default Console
def reset_console() -> Console:
    return configure_console()
