"""
Autenticación de entrada por token estático.

Todo request fuera de PUBLIC_PATHS debe traer API_ACCESS_TOKEN en el header
Authorization, solo o con el esquema Bearer.
"""

import hmac
import logging
from collections.abc import Callable
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

PUBLIC_PATHS: frozenset[str] = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})


def read_authorization(header: str) -> str | None:
    """
    Token carried by an Authorization header value.

    "Bearer abc" and "abc" both yield "abc"; a blank header yields None.
    """
    header = header.strip()
    if not header:
        return None
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return header


class AccessTokenMiddleware(BaseHTTPMiddleware):
    """Rejects requests without the configured access token with 401."""

    def __init__(self, app: ASGIApp, access_token: str) -> None:
        super().__init__(app)
        if not access_token:
            raise ValueError("access_token must not be empty")
        self._expected = access_token.encode()

    def _accepts(self, request: Request) -> bool:
        token = read_authorization(request.headers.get("Authorization", ""))
        return token is not None and hmac.compare_digest(token.encode(), self._expected)

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        if request.url.path in PUBLIC_PATHS or self._accepts(request):
            return await call_next(request)

        logger.warning(f"Rejected unauthenticated request to {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={
                "error": True,
                "code": "UNAUTHORIZED",
                "message": "Unauthorized",
                "status_code": status.HTTP_401_UNAUTHORIZED,
            },
            headers={"WWW-Authenticate": "Bearer"},
        )
