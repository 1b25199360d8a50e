"""
CCR SOAP Client

Async client for the Correos de Costa Rica geographic lookup service.
Each public method shapes the arguments of one operation, delegates to the
dispatcher and maps the validated envelope to domain records.

Operations:
    - ccrCodProvincia - Provinces by code/description
    - ccrCodCanton - Cantons of a province
    - ccrCodDistrito - Districts of a canton
    - ccrCodBarrio - Neighborhoods of a district
    - ccrCodPostal - Postal code of a district
    - ccrGenerarGuia - New waybill (guide) number
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config.settings import Settings, get_settings
from app.models.ccr import CcrCredentials, GeographicItem, Neighborhood

from . import mappers
from .dispatcher import CcrDispatcher
from .operations import CcrOperation
from .token_manager import DEFAULT_TOKEN_WINDOW_SECONDS, CcrTokenManager
from .transport import ZeepCcrTransport

logger = logging.getLogger(__name__)


class CcrClient:
    """
    Public surface of the CCR integration.

    No argument validation happens here; the API layer rejects missing
    values before calling the client.

    Example:
        async with CcrClientFactory.from_settings() as client:
            cantons = await client.get_cantons("1")
    """

    def __init__(self, dispatcher: CcrDispatcher):
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> CcrDispatcher:
        return self._dispatcher

    async def __aenter__(self) -> CcrClient:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.close()

    async def start(self) -> None:
        """Connect the transport and perform the initial authentication."""
        await self._dispatcher.transport.connect()
        await self._dispatcher.token_manager.authenticate()
        logger.info("CCR client started")

    async def close(self) -> None:
        try:
            await self._dispatcher.transport.close()
        finally:
            await self._dispatcher.token_manager.close()
        logger.info("CCR client closed")

    # =========================================================================
    # Geographic lookups
    # =========================================================================

    async def get_provinces(self, code: str, description: str) -> list[GeographicItem]:
        """
        List provinces matching a code and description.

        Args:
            code: Province code
            description: Province description

        Returns:
            Provinces in the order returned by the service
        """
        data = await self._dispatcher.call(
            CcrOperation.PROVINCES,
            {"Codigo": code, "Descripción": description},
        )
        return mappers.map_provinces(data)

    async def get_cantons(self, province_code: str) -> list[GeographicItem]:
        """
        List the cantons of a province.

        Args:
            province_code: Code of the province

        Returns:
            Cantons in the order returned by the service
        """
        data = await self._dispatcher.call(CcrOperation.CANTONS, {"CodProvincia": province_code})
        return mappers.map_cantons(data)

    async def get_districts(self, province_code: str, canton_code: str) -> list[GeographicItem]:
        """List the districts of a canton."""
        data = await self._dispatcher.call(
            CcrOperation.DISTRICTS,
            {"CodProvincia": province_code, "CodCanton": canton_code},
        )
        return mappers.map_districts(data)

    async def get_neighborhoods(
        self, province_code: str, canton_code: str, district_code: str
    ) -> list[Neighborhood]:
        """List the neighborhoods of a district."""
        data = await self._dispatcher.call(
            CcrOperation.NEIGHBORHOODS,
            {"CodProvincia": province_code, "CodCanton": canton_code, "CodDistrito": district_code},
        )
        return mappers.map_neighborhoods(data)

    async def get_postal_code(self, province_code: str, canton_code: str, district_code: str) -> str:
        """Get the postal code of a district."""
        data = await self._dispatcher.call(
            CcrOperation.POSTAL_CODE,
            {"CodProvincia": province_code, "CodCanton": canton_code, "CodDistrito": district_code},
        )
        return mappers.map_postal_code(data)

    # =========================================================================
    # Shipping
    # =========================================================================

    async def generate_guide(self) -> int:
        """Generate a new guide (waybill) number."""
        data = await self._dispatcher.call(CcrOperation.GENERATE_GUIDE, {})
        return mappers.map_guide_number(data)


class CcrClientFactory:
    """Factory for creating CcrClient instances."""

    @staticmethod
    def create(
        credentials: CcrCredentials,
        timeout_seconds: float = 30.0,
        token_window_seconds: float = DEFAULT_TOKEN_WINDOW_SECONDS,
    ) -> CcrClient:
        """
        Wire transport, token manager and dispatcher.

        The token manager pushes every new token into the transport headers.
        """
        transport = ZeepCcrTransport(credentials.soap_url, timeout_seconds=timeout_seconds)
        token_manager = CcrTokenManager(
            credentials,
            httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds)),
            window_seconds=token_window_seconds,
            on_token=transport.set_authorization,
        )
        return CcrClient(CcrDispatcher(token_manager, transport))

    @staticmethod
    def from_settings(settings: Settings | None = None) -> CcrClient:
        """Create a client from environment settings."""
        settings = settings or get_settings()
        return CcrClientFactory.create(
            settings.ccr_credentials,
            timeout_seconds=settings.CCR_REQUEST_TIMEOUT,
            token_window_seconds=settings.CCR_TOKEN_WINDOW_SECONDS,
        )
