"""
Traducción de errores a respuestas JSON.

Todas las respuestas de error comparten el cuerpo
{"error": true, "code", "message", "status_code"}. Los errores del cliente
CCR se mapean a HTTP solo aquí y agregan "details" (CcrError.to_dict).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException

from app.clients.ccr.exceptions import AuthenticationError, CcrError, DomainError, RemoteCallError

logger = logging.getLogger(__name__)

CCR_ERROR_STATUS: dict[type[CcrError], int] = {
    DomainError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_502_BAD_GATEWAY,
    RemoteCallError: status.HTTP_502_BAD_GATEWAY,
}


def error_response(
    status_code: int,
    message: str,
    code: str = "HTTP_ERROR",
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    content = {"error": True, "code": code, "message": message, "status_code": status_code, **extra}
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def status_for(exc: CcrError) -> int:
    for error_type, status_code in CCR_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_502_BAD_GATEWAY


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """HTTPException (404, 400 de parámetros vacíos, 503) con el cuerpo común."""
    if not isinstance(exc, HTTPException):
        return await unhandled_exception_handler(request, exc)
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def ccr_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """DomainError -> 400; AuthenticationError y RemoteCallError -> 502."""
    if not isinstance(exc, CcrError):
        return await unhandled_exception_handler(request, exc)
    status_code = status_for(exc)

    if isinstance(exc, DomainError):
        logger.info(f"CCR rejected {request.url.path}: [{exc.response_code}] {exc.message}")
    else:
        logger.error(f"CCR failure on {request.method} {request.url.path}: {exc.error_code} {exc.message}")

    body = exc.to_dict()
    return error_response(status_code, body["message"], body["code"], details=body["details"])


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, RequestValidationError):
        return await unhandled_exception_handler(request, exc)
    details = [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning(f"Invalid request to {request.url.path}: {details}")
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", "VALIDATION_ERROR", details=details
    )


async def data_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Registros de CCR que no encajan en los modelos de respuesta."""
    logger.error(f"Malformed CCR data on {request.url.path}: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Data validation error", "DATA_ERROR")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Último recurso: se registra con traceback y se responde sin detalles internos."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(CcrError, ccr_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, data_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
