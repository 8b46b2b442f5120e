# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Plan Auditor Application Entry Point.

FastAPI app exposing the resolved system prompt and the history
compression prompt for inspection.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from plan_auditor.api.errors import APIError, api_error_handler
from plan_auditor.api.middleware import TraceMiddleware
from plan_auditor.api.observability import router as observability_router
from plan_auditor.api.prompts import router as prompts_router
from plan_auditor.core.config import get_settings
from plan_auditor.core.logging import setup_logging

logger = logging.getLogger("plan_auditor.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    logger.info(
        "[PlanAuditor] Ready, default system prompt path %s",
        settings.default_system_md_path,
    )
    yield
    logger.info("[PlanAuditor] Shutdown complete")


app = FastAPI(
    title="Plan Auditor",
    description="Evaluation plan assessment agent: prompt inspection",
    version=get_settings().APP_VERSION,
    lifespan=lifespan,
)

# ── Middleware ───────────────────────────────────────────────
app.add_middleware(TraceMiddleware)

# ── Error Handlers ──────────────────────────────────────────
app.add_exception_handler(APIError, api_error_handler)

# ── Routes ──────────────────────────────────────────────────
app.include_router(prompts_router, prefix="/api")
app.include_router(observability_router)
