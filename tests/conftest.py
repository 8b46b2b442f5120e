# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Shared test fixtures for all Plan Auditor tests.
"""

from pathlib import Path

import pytest

PROMPT_ENV_VARS = (
    "PLAN_AUDITOR_SYSTEM_MD",
    "PLAN_AUDITOR_WRITE_SYSTEM_MD",
    "PLAN_AUDITOR_CONFIG_DIR",
    "LOG_LEVEL",
)


@pytest.fixture
def fake_home(tmp_path) -> Path:
    """Home directory under tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path, fake_home):
    """
    Point HOME at a scratch directory, clear prompt signals and run from
    a working directory without a .env file.
    """
    for name in PROMPT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(fake_home))
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def default_system_md(fake_home) -> Path:
    """Conventional system.md location for the fake home."""
    return (fake_home / ".plan_auditor" / "system.md").resolve()
