"""
Despacho de llamadas RPC autenticadas al servicio CCR.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .envelope import validate_envelope
from .exceptions import CcrError, RemoteCallError
from .operations import CcrOperation
from .token_manager import CcrTokenManager
from .transport import CcrTransport

logger = logging.getLogger(__name__)


class CcrDispatcher:
    """
    Wraps every remote call with authentication and envelope validation.

    Flow: ensure_valid() -> transport.invoke() -> "<operation>Result" ->
    validate_envelope(). Nothing is retried.
    """

    def __init__(self, token_manager: CcrTokenManager, transport: CcrTransport):
        self.token_manager = token_manager
        self.transport = transport

    async def call(self, operation: CcrOperation, args: Mapping[str, str] | None = None) -> dict[str, Any]:
        """
        Call a CCR operation.

        Args:
            operation: Remote procedure to invoke
            args: String arguments for the operation

        Returns:
            The validated envelope (CodRespuesta, MensajeRespuesta and payload fields)

        Raises:
            AuthenticationError: If a token could not be obtained
            RemoteCallError: If the SOAP invocation failed
            DomainError: If the service answered with a non-success code
        """
        args = dict(args or {})
        await self.token_manager.ensure_valid()

        logger.debug(f"Calling CCR {operation.value} with {sorted(args)}")
        try:
            response = await self.transport.invoke(operation, args)
            data = response[operation.result_key]
        except CcrError:
            raise
        except Exception as e:
            logger.error(f"CCR {operation.value} call failed: {e!r}")
            raise RemoteCallError(operation.value, f"{operation.value} call failed: {e}") from e

        if not isinstance(data, Mapping):
            raise RemoteCallError(operation.value, f"{operation.value} returned an empty result")

        envelope = validate_envelope(data)
        return dict(envelope)
