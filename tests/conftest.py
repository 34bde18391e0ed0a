# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import pytest
from pathlib import Path

from basicfmt.core.dialects import GENERIC, QB45
from basicfmt.core.options import EngineOptions


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: fake_home)

    # a real BASICFMT_CONFIG in the developer's env must not leak in
    monkeypatch.delenv("BASICFMT_CONFIG", raising=False)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from basicfmt.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = fake_home / ".basicfmt" / "config.json"

    # ! drop any engine log sink left by a previous CLI run
    from basicfmt.core.output import reset_engine_log

    reset_engine_log()

    yield fake_home

    settings_manager._settings = None
    settings_manager.config_path = None
    reset_engine_log()


@pytest.fixture
def options():
    # Default engine options: generic dialect, 4-column indent, no number alignment
    return EngineOptions(dialect=GENERIC)


@pytest.fixture
def qb_options():
    return EngineOptions(dialect=QB45)


@pytest.fixture
def sample_program():
    # Small program exercising loops, branches, subroutines & comments
    return [
        "10 REM counting demo",
        "20 FOR I = 1 TO 3",
        "30 PRINT I",
        "40 IF I = 2 THEN GOSUB 100",
        "50 NEXT I",
        "60 GOTO 200",
        "100 PRINT \"two\"",
        "110 RETURN",
        "200 END",
    ]


@pytest.fixture
def source_file(tmp_path, sample_program):
    # Write sample program to disk for CLI & I/O tests
    path = tmp_path / "demo.bas"
    path.write_text("\n".join(sample_program) + "\n", encoding="utf-8")
    return path
