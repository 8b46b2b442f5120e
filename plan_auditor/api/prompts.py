# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Prompts API — Inspect the prompts the agent would receive.

GET /prompts/system resolves the system prompt exactly as the agent
does, so the override and write-back signals apply here too: a request
can create or overwrite the configured system.md.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from plan_auditor.agents.prompt_loader import (
    MissingSystemPromptError,
    load_prompt_config,
    resolve_system_prompt,
)
from plan_auditor.api.errors import SystemPromptUnavailableError
from plan_auditor.memory.compression import SNAPSHOT_SECTIONS, get_compression_prompt

router = APIRouter(prefix="/prompts", tags=["prompts"])


class SystemPromptResponse(BaseModel):
    prompt: str
    override: bool
    source: str
    written_to: Optional[str] = None


class CompressionPromptResponse(BaseModel):
    prompt: str
    sections: List[str]


@router.get("/system", response_model=SystemPromptResponse)
def get_system_prompt(request: Request, memory: Optional[str] = None):
    """Resolve the system prompt for the current environment."""
    config = load_prompt_config()
    if config.override_enabled:
        request.state.prompt_source = "override"
        request.state.prompt_path = str(config.override_path)
    else:
        request.state.prompt_source = "default"
    if config.write_enabled:
        request.state.prompt_written_to = str(config.write_path)

    try:
        prompt = resolve_system_prompt(config, memory)
    except MissingSystemPromptError as exc:
        raise SystemPromptUnavailableError(
            str(exc.path),
            trace_id=getattr(request.state, "trace_id", None),
        ) from exc

    return SystemPromptResponse(
        prompt=prompt,
        override=config.override_enabled,
        source=str(config.override_path) if config.override_enabled else "default",
        written_to=str(config.write_path) if config.write_enabled else None,
    )


@router.get("/compression", response_model=CompressionPromptResponse)
async def get_compression():
    """Return the fixed history compression prompt."""
    return CompressionPromptResponse(
        prompt=get_compression_prompt(),
        sections=list(SNAPSHOT_SECTIONS),
    )
