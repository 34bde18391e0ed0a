# basicfmt/cli/app.py
# Root Typer application: global options, per-run session setup & command registration
#
# ! Command modules are imported at the bottom; they need `app` to exist first.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# BASICFMT_CONFIG may be set from a .env file in the working directory
load_dotenv()

from ..basic_io.console import configure_console, console, reset_console
from ..config.settings import settings_manager
from ..core.verbose import cleanup_verbose, init_verbose
from .decorators import handle_basicfmt_error

app = typer.Typer(
    help="Format, indent & renumber line-numbered BASIC source.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)


@app.callback(invoke_without_command=True)
@handle_basicfmt_error
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print engine log entries (index, renumber, format, files)"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Append engine log entries to this file"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
) -> None:
    # an injected ctx.obj (tests, embedding) wins over the config file
    if ctx.obj is None:
        ctx.obj = settings_manager.load()

    if no_color:
        configure_console(no_color=True)
        ctx.call_on_close(reset_console)

    init_verbose(echo=verbose, log_file=log_file)
    ctx.call_on_close(cleanup_verbose)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


from .commands import config as _config  # noqa: E402,F401
from .commands import dialects as _dialects  # noqa: E402,F401
from .commands import format as _format  # noqa: E402,F401
from .commands import renumber as _renumber  # noqa: E402,F401
