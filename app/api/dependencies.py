"""
Dependencias FastAPI para inyección.

El cliente CCR se crea una sola vez en el ciclo de vida de la aplicación y
se comparte entre todas las peticiones a través de app.state.
"""

from fastapi import HTTPException, Request, status

from app.clients.ccr import CcrClient


def get_ccr_client(request: Request) -> CcrClient:
    """Return the CCR client started by the application lifespan."""
    client: CcrClient | None = getattr(request.app.state, "ccr_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="CCR client not initialized",
        )
    return client


def require_param(name: str, value: str) -> str:
    """Reject blank path parameters with 400 '<name> is required'."""
    if not value or not value.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{name} is required")
    return value
