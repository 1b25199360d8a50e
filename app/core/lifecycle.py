"""
Ciclo de vida de la aplicación (lifespan de FastAPI).

Al arrancar se crea, si no fue inyectado, y se inicia el cliente CCR: carga
del WSDL y primera autenticación. Si algo de eso falla la aplicación no
arranca. Al detenerse se cierra el cliente.
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import FastAPI

from app.clients.ccr import CcrClient, CcrClientFactory
from app.config.settings import Settings

logger = logging.getLogger(__name__)


class LifecycleManager:
    """Owns the CCR client between startup and shutdown."""

    def __init__(self, settings: Settings, ccr_client: CcrClient | None = None) -> None:
        self._settings = settings
        self._ccr_client = ccr_client
        self._started = False

    @property
    def ccr_client(self) -> CcrClient | None:
        return self._ccr_client

    async def startup(self) -> CcrClient:
        """
        Start the CCR client.

        Raises:
            AuthenticationError: If the first authentication fails
            Exception: Whatever the WSDL load raised
        """
        if self._started and self._ccr_client is not None:
            logger.warning("CCR client already started")
            return self._ccr_client

        if self._ccr_client is None:
            self._ccr_client = CcrClientFactory.from_settings(self._settings)
        client = self._ccr_client

        try:
            await client.start()
        except Exception as e:
            logger.critical(f"Startup aborted, CCR client could not start: {e}")
            await client.close()
            raise

        self._started = True
        return client

    async def shutdown(self) -> None:
        if not self._started:
            logger.warning("Shutdown requested before startup completed")
            return

        if self._ccr_client is not None:
            await self._ccr_client.close()
        self._started = False


def create_lifespan(manager: LifecycleManager) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Lifespan that exposes the started client as app.state.ccr_client."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.ccr_client = await manager.startup()
        try:
            yield
        finally:
            await manager.shutdown()
            app.state.ccr_client = None

    return lifespan
