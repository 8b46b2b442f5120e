# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Observability API — Health check.
"""

from __future__ import annotations

from fastapi import APIRouter

from plan_auditor.core.config import get_settings

router = APIRouter(tags=["observability"])


@router.get("/health")
async def health_check():
    """Liveness probe with the running version."""
    return {
        "status": "ok",
        "version": get_settings().APP_VERSION,
    }
