"""
Name: HTTP Middleware

Responsibilities:
  - Accept or generate request_id and propagate it (X-Request-Id)
  - Set request context for logging
  - Record request metrics (latency, count)

Collaborators:
  - context.py: ContextVars for request-scoped data
  - crosscutting/metrics.py: Prometheus counters and histograms
  - crosscutting/logger.py: Structured logging

Constraints:
  - Must be the outermost middleware (before CORS)
  - Must clear context after response
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ..context import clear_context, http_method_var, http_path_var, request_id_var
from .logger import logger
from .metrics import record_request_metrics

MAX_REQUEST_ID_LENGTH = 128


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    R: Middleware that establishes request context and records metrics.
    """

    _QUIET_PATHS = {"/healthz", "/metrics"}

    async def dispatch(self, request: Request, call_next) -> Response:
        incoming = (request.headers.get("x-request-id") or "").strip()
        request_id = (
            incoming
            if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH
            else str(uuid.uuid4())
        )

        request_id_var.set(request_id)
        http_method_var.set(request.method)
        http_path_var.set(request.url.path)

        # R: Also store in request.state for error handlers
        request.state.request_id = request_id

        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-Id"] = request_id
            return response
        except Exception as exc:
            logger.exception(
                "request failed",
                extra={
                    "latency_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error": type(exc).__name__,
                },
            )
            raise
        finally:
            latency_seconds = time.perf_counter() - start_time
            record_request_metrics(
                endpoint=request.url.path,
                method=request.method,
                status_code=status_code,
                latency_seconds=latency_seconds,
            )
            if request.url.path not in self._QUIET_PATHS:
                logger.info(
                    "request completed",
                    extra={
                        "status_code": status_code,
                        "latency_ms": round(latency_seconds * 1000, 2),
                    },
                )
            clear_context()
