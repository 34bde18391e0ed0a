# basicfmt/cli/commands/config.py
# Settings mgmt subcommands for basicfmt CLI (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any
import typer
from builtins import list as builtin_list

from ...config.settings import settings_manager, BasicfmtSettings
from ...basic_io.console import console
from ...core.exceptions import SettingsValidationError
from ...ui.reporting import report_result
from ..app import app
from ..params import ConfigKeyArg, ConfigValueArg

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(rich_markup_mode="rich", help="Manage basicfmt settings")
app.add_typer(config_app, name="config")


# concise set of known keys for validation
def _known_keys() -> set[str]:
    return {f.name for f in fields(BasicfmtSettings)}


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(
    raw: str,
) -> str | int | float | bool | None | builtin_list[Any] | dict[str, Any]:
    try:
        # parse JSON for numbers/bools/null/arrays/objects
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# * Print current settings & config path
def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print("[bold cyan]Current Configuration[/]")
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    console.print()

    for key, value in data.items():
        console.print(f"  [cyan]{key}[/]: {json.dumps(value)}", highlight=False)

    console.print()
    console.print("[dim]Use [/][cyan]basicfmt config --help[/][dim] to see available commands[/]")


# * default callback: show current settings when no subcommand provided
@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Show all settings
@config_app.command(name="list")
def list_cmd() -> None:
    _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str = ConfigKeyArg()) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    value = settings_manager.get(key)
    # print JSON for consistency (strings quoted)
    console.print(json.dumps(value), highlight=False)


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str = ConfigKeyArg(), value: str = ConfigValueArg()) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    coerced = _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except SettingsValidationError as e:
        raise typer.BadParameter(str(e))
    report_result("config", key=key, value=json.dumps(coerced))


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    console.print("[green]✓[/] [bold green]Reset settings to defaults[/]")


# * Show config file location
@config_app.command()
def path() -> None:
    console.print(str(settings_manager.config_path), highlight=False, soft_wrap=True)
