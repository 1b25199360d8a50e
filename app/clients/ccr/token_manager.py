"""
Gestión del token de autenticación CCR.

El endpoint de identidad emite tokens que el servidor considera válidos
durante 5 minutos. El cliente los da por vencidos antes (ventana de 4m20s)
para renovarlos de forma proactiva. El vencimiento se detecta al pedir el
token, no con un temporizador.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from enum import Enum

import httpx

from app.core.shared.logger import mask_secret
from app.models.ccr import CcrCredentials, CcrToken

from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_WINDOW_SECONDS = 260  # 4m20s, servidor: 5m


class TokenState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    VALID = "valid"
    EXPIRED = "expired"


class CcrTokenManager:
    """
    Servicio para gestionar el token del servicio CCR.

    Este servicio se encarga de:
    - Obtener tokens del endpoint de identidad
    - Verificar su vigencia contra la ventana configurada
    - Renovarlos cuando vencen (una sola renovación a la vez)
    - Propagar el token nuevo al transporte SOAP

    Un fallo de autenticación no modifica el token anterior.
    """

    def __init__(
        self,
        credentials: CcrCredentials,
        http_client: httpx.AsyncClient,
        window_seconds: float = DEFAULT_TOKEN_WINDOW_SECONDS,
        on_token: Callable[[str], None] | None = None,
        clock: Callable[[], float] = time.time,
    ):
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

        self._credentials = credentials
        self._http_client = http_client
        self._window_seconds = window_seconds
        self._on_token = on_token
        self._clock = clock
        self._token: CcrToken | None = None
        self._refresh: asyncio.Task[str] | None = None

    @property
    def token(self) -> CcrToken | None:
        return self._token

    @property
    def window_seconds(self) -> float:
        return self._window_seconds

    @property
    def state(self) -> TokenState:
        if self._token is None:
            return TokenState.UNAUTHENTICATED
        if self._token.is_valid(self._clock()):
            return TokenState.VALID
        return TokenState.EXPIRED

    def _current_value(self) -> str | None:
        token = self._token
        if token is not None and token.is_valid(self._clock()):
            return token.value
        return None

    async def ensure_valid(self) -> str:
        """
        Return a token that can be used right away.

        Authenticates when there is no token yet or the cached one is past its
        window. Concurrent callers share the refresh already in flight and all
        get its token or its AuthenticationError.

        Raises:
            AuthenticationError: If a needed authentication fails
        """
        value = self._current_value()
        if value is not None:
            return value

        if self._refresh is None:
            self._refresh = asyncio.create_task(self._shared_refresh())
        # cancelling one caller leaves the shared refresh running
        return await asyncio.shield(self._refresh)

    async def _shared_refresh(self) -> str:
        try:
            return await self.authenticate()
        finally:
            self._refresh = None

    async def authenticate(self) -> str:
        """
        Request a new token from the identity endpoint.

        Returns:
            The bearer token

        Raises:
            AuthenticationError: On non-200 status or unreachable endpoint
        """
        logger.debug("Authenticating against CCR token endpoint...")

        payload = {
            "Username": self._credentials.username,
            "Password": self._credentials.password,
            "Sistema": self._credentials.system_id,
        }

        try:
            response = await self._http_client.post(
                self._credentials.token_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(f"CCR token endpoint unreachable: {e}")
            raise AuthenticationError(f"Token endpoint unreachable: {e}") from e

        if response.status_code != 200:
            logger.error(f"Authentication failed with status code: {response.status_code}")
            raise AuthenticationError("Authentication failed", status_code=response.status_code)

        value = response.text.strip()
        if not value:
            logger.error("CCR token endpoint returned an empty token")
            raise AuthenticationError("Token endpoint returned an empty token", status_code=response.status_code)

        self._token = CcrToken(value=value, expires_at=self._clock() + self._window_seconds)
        if self._on_token is not None:
            self._on_token(value)

        logger.debug(f"Authenticated with token: {mask_secret(value)}")
        return value

    async def close(self) -> None:
        await self._http_client.aclose()
