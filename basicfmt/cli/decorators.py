# basicfmt/cli/decorators.py
# Error-reporting decorator for commands & the --watch wrapper

import functools
from pathlib import Path
from typing import Any, Callable, TypeVar, cast

from ..core.exceptions import (
    BasicfmtError,
    ConfigurationError,
    FileOperationError,
    InvalidArgumentError,
    JSONParsingError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# most specific first; BasicfmtError catches the rest
_ERROR_TITLES: tuple[tuple[type[BasicfmtError], str], ...] = (
    (InvalidArgumentError, "Invalid Argument"),
    (JSONParsingError, "JSON Parsing Error"),
    (ConfigurationError, "Configuration Error"),
    (FileOperationError, "File Error"),
    (BasicfmtError, "Error"),
)


# * Rich-formatted message for any basicfmt error
def describe_error(error: BasicfmtError) -> str:
    title = next(t for cls, t in _ERROR_TITLES if isinstance(error, cls))
    return format_error_message(title, str(error))


# * Print basicfmt errors raised by a command & exit 1 instead of showing a traceback
def handle_basicfmt_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except BasicfmtError as e:
            # ! lazy import keeps the console out of module import order
            from ..basic_io.console import console

            console.print(describe_error(e))
            raise SystemExit(1)

    return cast(F, wrapper)


# * Run once, then again each time one of the source files changes (blocks until Ctrl+C)
def run_with_watch(sources: list[Path], run: Callable[[], None], debounce: float) -> None:
    from .watch import WatchRunner

    WatchRunner(sources, run, debounce).start()
