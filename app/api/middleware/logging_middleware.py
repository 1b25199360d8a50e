"""
Registro de peticiones HTTP.

Una línea por petición:
    [<correlation id>] <method> <status> <path> from <ip> after <seconds>s
"""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger("app.router")

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every routed request and tags the response with a correlation id."""

    # Probes are not logged
    SILENT_PATHS: frozenset[str] = frozenset({"/health", "/favicon.ico"})

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]
        request.state.correlation_id = correlation_id

        if request.url.path in self.SILENT_PATHS:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        started = time.perf_counter()
        path, ip = request.url.path, client_address(request)

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed = time.perf_counter() - started
            logger.error(f"[{correlation_id}] {request.method} 500 {path} from {ip} after {elapsed:.3f}s: {e}")
            raise

        elapsed = time.perf_counter() - started
        logger.log(
            logging.WARNING if response.status_code >= 400 else logging.INFO,
            f"[{correlation_id}] {request.method} {response.status_code} {path} from {ip} after {elapsed:.3f}s",
        )

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers["X-Response-Time-Ms"] = f"{elapsed * 1000:.2f}"
        return response


def client_address(request: Request) -> str:
    """First X-Forwarded-For hop when proxied, else the peer address."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"
