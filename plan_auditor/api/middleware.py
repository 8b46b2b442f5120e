# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
API Middleware — Trace ID propagation and prompt access logging.

Routes that resolve a prompt record what they touched on request.state
(prompt_source, prompt_path, prompt_written_to). The access log line
carries those fields so a request can be traced to the file it read or
wrote.
"""

from __future__ import annotations

import uuid
import time
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("plan_auditor.api")

PROMPT_STATE_KEYS = ("prompt_source", "prompt_path", "prompt_written_to")


def prompt_log_context(request: Request) -> dict:
    """Collect the prompt fields a route left on request.state."""
    context = {"trace_id": getattr(request.state, "trace_id", None)}
    for key in PROMPT_STATE_KEYS:
        value = getattr(request.state, key, None)
        if value is not None:
            context[key] = value
    return context


class TraceMiddleware(BaseHTTPMiddleware):
    """
    Generates or propagates X-Trace-Id header for every request and logs
    the request with its prompt context.
    """

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get("X-Trace-Id", str(uuid.uuid4()))
        request.state.trace_id = trace_id

        start = time.time()
        response: Response = await call_next(request)
        elapsed = (time.time() - start) * 1000

        response.headers["X-Trace-Id"] = trace_id
        logger.info(
            "[api] %s %s → %d (%.0fms)",
            request.method, request.url.path,
            response.status_code, elapsed,
            extra=prompt_log_context(request),
        )
        return response
