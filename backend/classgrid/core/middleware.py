from __future__ import annotations

import logging
import time

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class SnapshotSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects oversized schedule snapshots and stamps request timing."""

    def __init__(self, app, *, max_bytes: int) -> None:
        super().__init__(app)
        self._max_bytes = max(1, max_bytes)

    async def dispatch(self, request: Request, call_next) -> Response:
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > self._max_bytes:
            logger.warning("Rejected %s %s with %s byte body", request.method, request.url.path, declared)
            return JSONResponse(
                status_code=413,
                content={
                    "message": "Schedule snapshot too large",
                    "details": {"max_bytes": self._max_bytes, "received_bytes": int(declared)},
                },
            )

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers.setdefault("X-Process-Time-Ms", f"{elapsed_ms:.1f}")
        logger.debug("%s %s took %.1f ms", request.method, request.url.path, elapsed_ms)
        return response
