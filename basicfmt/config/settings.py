# basicfmt/config/settings.py
# Configuration management for the basicfmt CLI: engine defaults & dialect selection w/ JSON persistence

import os
from pathlib import Path
from typing import Dict, Any, Optional, cast
import typer
from dataclasses import dataclass, asdict, fields

from ..basic_io.generics import read_json_safe, write_json_safe
from ..core.constants import (
    DEFAULT_DIALECT,
    DEFAULT_INDENT_OFFSET,
    DEFAULT_LINE_NUMBER_COLS,
    DEFAULT_RENUMBER_INCREMENT,
)
from ..core.dialects import DIALECTS, get_dialect
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..core.options import EngineOptions

# environment variable overriding the config file location (may come from .env)
CONFIG_ENV_VAR = "BASICFMT_CONFIG"


# strict int check (bool is an int subclass)
def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# * Default settings dataclass for basicfmt w/ indentation, numbering & dialect configuration
@dataclass
class BasicfmtSettings:
    # dialect keyword set
    dialect: str = DEFAULT_DIALECT

    # indentation
    indent_offset: int = DEFAULT_INDENT_OFFSET
    line_number_cols: int = DEFAULT_LINE_NUMBER_COLS

    # whitespace cleanup during format
    delete_trailing_whitespace: bool = True
    delete_trailing_blank_lines: bool = True

    # numbering (None disables auto-numbering)
    auto_number_increment: Optional[int] = None
    renumber_increment: int = DEFAULT_RENUMBER_INCREMENT
    renumber_include_unnumbered: bool = True

    # None keeps the dialect's own REM tokenization
    require_separator_for_highlighting: Optional[bool] = None

    # watch mode settings
    watch_debounce: float = 1.0

    def __post_init__(self) -> None:
        # Validate settings values after initialization.
        if self.dialect not in DIALECTS:
            raise ValueError(
                f"dialect must be one of {sorted(DIALECTS)}, got '{self.dialect}'"
            )

        if not _is_int(self.indent_offset) or self.indent_offset < 0:
            raise ValueError(
                f"indent_offset must be a non-negative integer, got {self.indent_offset}"
            )

        if not _is_int(self.line_number_cols) or self.line_number_cols < 0:
            raise ValueError(
                f"line_number_cols must be a non-negative integer, got {self.line_number_cols}"
            )

        if not _is_int(self.renumber_increment) or self.renumber_increment < 1:
            raise ValueError(
                f"renumber_increment must be a positive integer, got {self.renumber_increment}"
            )

        if self.auto_number_increment is not None and (
            not _is_int(self.auto_number_increment) or self.auto_number_increment < 1
        ):
            raise ValueError(
                f"auto_number_increment must be a positive integer or null, "
                f"got {self.auto_number_increment}"
            )

        # strict bool validation (no coercion)
        for name in (
            "delete_trailing_whitespace",
            "delete_trailing_blank_lines",
            "renumber_include_unnumbered",
        ):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}"
                )

        if self.require_separator_for_highlighting is not None and not isinstance(
            self.require_separator_for_highlighting, bool
        ):
            raise ValueError(
                f"require_separator_for_highlighting must be a boolean or null, "
                f"got {type(self.require_separator_for_highlighting).__name__}"
            )

        if (
            not isinstance(self.watch_debounce, (int, float))
            or self.watch_debounce < 0.1
        ):
            raise ValueError(
                f"watch_debounce must be >= 0.1 seconds, got {self.watch_debounce}"
            )

    # * Build immutable engine options; keyword overrides win over stored settings
    def to_options(self, **overrides: Any) -> EngineOptions:
        values = {**asdict(self), **{k: v for k, v in overrides.items() if v is not None}}
        dialect = get_dialect(values["dialect"])
        if values["require_separator_for_highlighting"] is not None:
            dialect = dialect.with_require_separator(
                values["require_separator_for_highlighting"]
            )
        option_names = {f.name for f in fields(EngineOptions)} - {"dialect"}
        return EngineOptions(
            dialect=dialect, **{k: values[k] for k in option_names}
        )


# * Default config location, honoring BASICFMT_CONFIG
def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".basicfmt" / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self._explicit_path = config_path
        self._settings: Optional[BasicfmtSettings] = None

    @property
    def config_path(self) -> Path:
        return self._explicit_path or default_config_path()

    @config_path.setter
    def config_path(self, value: Optional[Path]) -> None:
        self._explicit_path = value

    # load settings from file or return defaults
    def load(self) -> BasicfmtSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = BasicfmtSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = BasicfmtSettings()
        else:
            self._settings = BasicfmtSettings()

        return self._settings

    # save settings to file
    def save(self, settings: BasicfmtSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates the whole settings object
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)

        data = asdict(settings)
        data[key] = value
        try:
            updated = BasicfmtSettings(**data)
        except ValueError as e:
            raise SettingsValidationError(str(e), key, value) from e
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(BasicfmtSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[BasicfmtSettings] = None
) -> BasicfmtSettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx, parent, & root for BasicfmtSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, BasicfmtSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
