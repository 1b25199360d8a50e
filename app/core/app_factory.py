"""
Construcción de la aplicación FastAPI del gateway CCR.

El factory arma la app en pasos separados (middleware, manejadores de
errores, rutas, health) y le asocia el lifespan que inicia el cliente CCR.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.api.middleware import AccessTokenMiddleware, RequestLoggingMiddleware
from app.api.router import api_router
from app.clients.ccr import CcrClient
from app.config.settings import Settings, get_settings
from app.core.lifecycle import LifecycleManager, create_lifespan

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Builds the gateway application from settings.

    A pre-built CcrClient can be injected; otherwise the lifecycle manager
    creates one from the CCR_* settings at startup.
    """

    def __init__(self, settings: Settings | None = None, ccr_client: CcrClient | None = None) -> None:
        self._settings = settings or get_settings()
        self._lifecycle = LifecycleManager(self._settings, ccr_client)

    @property
    def lifecycle(self) -> LifecycleManager:
        return self._lifecycle

    def create_app(self) -> FastAPI:
        """Return a fully configured application."""
        app = FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url="/docs" if self._settings.DEBUG else None,
            redoc_url="/redoc" if self._settings.DEBUG else None,
            lifespan=create_lifespan(self._lifecycle),
        )

        self._add_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        self._add_health_route(app)

        logger.info(f"{self._settings.PROJECT_NAME} {self._settings.VERSION} ready ({self._settings.ENVIRONMENT})")
        return app

    def _add_middleware(self, app: FastAPI) -> None:
        """
        Register middleware; Starlette runs the last one added first.

        Resulting order for a request: CORS (when enabled), request logging,
        access token check, route.
        """
        app.add_middleware(AccessTokenMiddleware, access_token=self._settings.API_ACCESS_TOKEN)
        app.add_middleware(RequestLoggingMiddleware)

        if self._settings.is_development:
            app.add_middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["GET"],
                allow_headers=["*"],
            )

    def _add_health_route(self, app: FastAPI) -> None:
        settings = self._settings

        @app.get("/health", tags=["health"])
        async def health() -> dict[str, str]:
            """Liveness probe; does not call CCR."""
            return {"status": "ok", "environment": settings.ENVIRONMENT}


def create_app(settings: Settings | None = None, ccr_client: CcrClient | None = None) -> FastAPI:
    """
    Create the gateway application.

    Args:
        settings: Settings override (environment by default)
        ccr_client: Client to use instead of building one at startup
    """
    return AppFactory(settings, ccr_client).create_app()
