# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Plan Auditor Configuration — Environment-driven settings.

All configuration is loaded from environment variables (or .env file).
Settings are read per call by the prompt resolver, so a changed
environment is picked up without restarting the process.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

SYSTEM_MD_FILENAME = "system.md"


class PlanAuditorSettings(BaseSettings):
    """Agent-wide configuration loaded from environment."""

    # --- System prompt ---
    PLAN_AUDITOR_SYSTEM_MD: Optional[str] = Field(
        default=None,
        description="Override signal: 0|false disables, 1|true uses the default path, anything else is a path",
    )
    PLAN_AUDITOR_WRITE_SYSTEM_MD: Optional[str] = Field(
        default=None,
        description="Write signal: 0|false disables, 1|true writes to the effective path, anything else is a path",
    )
    PLAN_AUDITOR_CONFIG_DIR: str = Field(
        default="~/.plan_auditor",
        description="Per-user configuration directory holding system.md",
    )

    # --- Platform ---
    LOG_LEVEL: str = Field(default="INFO")
    APP_VERSION: str = Field(default="0.1.0")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @property
    def config_dir(self) -> Path:
        """Absolute config directory, with ``~`` expanded."""
        return Path(self.PLAN_AUDITOR_CONFIG_DIR).expanduser().resolve()

    @property
    def default_system_md_path(self) -> Path:
        """Conventional location of the system prompt file."""
        return self.config_dir / SYSTEM_MD_FILENAME


def get_settings() -> PlanAuditorSettings:
    """Build a fresh settings object from the current environment."""
    return PlanAuditorSettings()
