# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Prompt Loader — System prompt resolution with file override and write-back.

The default system prompt is a packaged template (configs/core_system.md)
rendered with the agent's tool names. Two environment signals change
where the base prompt comes from and whether it is persisted:

  PLAN_AUDITOR_SYSTEM_MD (override):
    - unset / 0 / false  -> use the packaged default (trimmed)
    - 1 / true           -> read <config-dir>/system.md
    - anything else      -> read that path (~ and ~/ are expanded)

  PLAN_AUDITOR_WRITE_SYSTEM_MD (write):
    - unset / 0 / false  -> no write
    - 1 / true           -> write to the effective override path
    - anything else      -> write to that path (~ and ~/ are expanded)

Both signals may point at the same file. Writing back the prompt that
was just read from it is allowed and not checked.

Nothing is cached: the environment and the filesystem are consulted on
every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import Dict, Optional, Tuple

from plan_auditor.agents.tools import get_tool_names
from plan_auditor.core.config import PlanAuditorSettings, get_settings

logger = logging.getLogger("plan_auditor.agents.prompt_loader")

AGENTS_DIR = Path(__file__).parent
CONFIGS_DIR = AGENTS_DIR / "configs"
DEFAULT_PROMPT_TEMPLATE = CONFIGS_DIR / "core_system.md"

MEMORY_SEPARATOR = "\n\n---\n\n"

_DISABLED_VALUES = {"0", "false"}
_DEFAULT_PATH_VALUES = {"1", "true"}


class PromptConfigError(Exception):
    """Raised when the system prompt configuration cannot be honoured."""
    pass


class MissingSystemPromptError(PromptConfigError):
    """Override is enabled but the prompt file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"missing system prompt file '{path}'")


@dataclass(frozen=True)
class SystemPromptConfig:
    """Effective prompt configuration derived from the environment."""

    override_enabled: bool
    override_path: Path
    write_enabled: bool
    write_path: Path


# ── Signal parsing ───────────────────────────────────────────


def resolve_custom_path(raw: str) -> Path:
    """Expand a leading ``~/`` or a bare ``~`` and make the path absolute."""
    if raw.startswith("~/"):
        # Extra slashes after ~/ stay under home.
        path = Path.home() / raw[2:].lstrip("/")
    elif raw == "~":
        path = Path.home()
    else:
        path = Path(raw)
    return path.resolve()


def parse_signal(raw: Optional[str], default_path: Path) -> Tuple[bool, Path]:
    """
    Interpret an override/write signal.

    Returns (enabled, path). When the signal is disabled the path is
    ``default_path`` unchanged so callers can keep sharing it.
    """
    if not raw:
        return False, default_path
    lowered = raw.lower()
    if lowered in _DISABLED_VALUES:
        return False, default_path
    if lowered in _DEFAULT_PATH_VALUES:
        return True, default_path
    return True, resolve_custom_path(raw)


def load_prompt_config(settings: Optional[PlanAuditorSettings] = None) -> SystemPromptConfig:
    """Build the effective configuration from settings (fresh by default)."""
    settings = settings or get_settings()
    default_path = settings.default_system_md_path

    override_enabled, override_path = parse_signal(
        settings.PLAN_AUDITOR_SYSTEM_MD, default_path,
    )
    # A 1/true write signal follows the override path, wherever it points.
    write_enabled, write_path = parse_signal(
        settings.PLAN_AUDITOR_WRITE_SYSTEM_MD, override_path,
    )
    return SystemPromptConfig(
        override_enabled=override_enabled,
        override_path=override_path,
        write_enabled=write_enabled,
        write_path=write_path,
    )


# ── Default prompt ───────────────────────────────────────────


def render_default_system_prompt(tool_names: Optional[Dict[str, str]] = None) -> str:
    """Render the packaged default prompt with tool names substituted."""
    template = Template(DEFAULT_PROMPT_TEMPLATE.read_text(encoding="utf-8"))
    if tool_names is None:
        tool_names = get_tool_names(template.get_identifiers())
    return template.substitute(tool_names).strip()


# ── Resolution ───────────────────────────────────────────────


def load_base_prompt(config: SystemPromptConfig) -> str:
    """Return the prompt text used before memory is appended."""
    if not config.override_enabled:
        logger.debug("Using packaged default system prompt", extra={"prompt_source": "default"})
        return render_default_system_prompt()

    if not config.override_path.exists():
        logger.error(
            "System prompt override enabled but file is missing",
            extra={"prompt_source": "override", "prompt_path": config.override_path},
        )
        raise MissingSystemPromptError(config.override_path)

    logger.info(
        "Loading system prompt override",
        extra={"prompt_source": "override", "prompt_path": config.override_path},
    )
    with config.override_path.open(encoding="utf-8", newline="") as f:
        return f.read()


def write_base_prompt(base_prompt: str, path: Path) -> None:
    """Persist the base prompt, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(base_prompt, encoding="utf-8", newline="")
    logger.info("Wrote system prompt", extra={"prompt_path": path})


def append_user_memory(base_prompt: str, user_memory: Optional[str]) -> str:
    """Append trimmed memory after a separator; blank memory adds nothing."""
    memory = (user_memory or "").strip()
    if not memory:
        return base_prompt
    return f"{base_prompt}{MEMORY_SEPARATOR}{memory}"


def resolve_system_prompt(config: SystemPromptConfig, user_memory: Optional[str] = None) -> str:
    """
    Resolve the final system prompt for an explicit configuration.

    Raises MissingSystemPromptError before any write happens when the
    override file is absent. Filesystem errors propagate unchanged.
    """
    base_prompt = load_base_prompt(config)
    if config.write_enabled:
        write_base_prompt(base_prompt, config.write_path)
    return append_user_memory(base_prompt, user_memory)


def get_core_system_prompt(user_memory: Optional[str] = None) -> str:
    """Resolve the system prompt using the current environment."""
    return resolve_system_prompt(load_prompt_config(), user_memory)
