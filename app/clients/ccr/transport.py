"""
Transporte SOAP para el servicio CCR (zeep sobre httpx).

Las operaciones se enlazan una sola vez al conectar: el despacho posterior
usa el mapa CcrOperation -> operación de zeep, nunca nombres armados en el
momento de la llamada.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol

import httpx
from zeep import AsyncClient
from zeep.helpers import serialize_object
from zeep.transports import AsyncTransport

from .operations import CcrOperation

logger = logging.getLogger(__name__)

OperationInvoker = Callable[..., Awaitable[Any]]


class CcrTransport(Protocol):
    """Contract the client and dispatcher rely on."""

    async def connect(self) -> None: ...

    async def close(self) -> None: ...

    def set_authorization(self, token: str) -> None: ...

    async def invoke(self, operation: CcrOperation, args: Mapping[str, str]) -> Mapping[str, Any]: ...


class ZeepCcrTransport:
    """
    Async SOAP transport backed by zeep.

    Uses one shared httpx.AsyncClient for every operation; the bearer token
    travels as its Authorization header.

    Example:
        transport = ZeepCcrTransport("https://.../ccrws.asmx?wsdl")
        await transport.connect()
        transport.set_authorization(token)
        response = await transport.invoke(CcrOperation.CANTONS, {"CodProvincia": "1"})
    """

    def __init__(
        self,
        wsdl_url: str,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        wsdl_client: httpx.Client | None = None,
    ):
        self.wsdl_url = wsdl_url
        self._http_client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds))
        self._wsdl_client = wsdl_client or httpx.Client(timeout=httpx.Timeout(timeout_seconds))
        self._client: AsyncClient | None = None
        self._operations: dict[CcrOperation, OperationInvoker] = {}

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def operations(self) -> frozenset[CcrOperation]:
        return frozenset(self._operations)

    async def connect(self) -> None:
        """Load the WSDL and bind the supported operations."""
        if self._client is not None:
            return

        transport = AsyncTransport(client=self._http_client, wsdl_client=self._wsdl_client)
        # zeep parses the WSDL synchronously
        client = await asyncio.to_thread(AsyncClient, self.wsdl_url, transport=transport)
        self._operations = self._bind_operations(client)
        self._client = client
        logger.info(f"CCR SOAP client ready: {len(self._operations)} operations bound from {self.wsdl_url}")

    @staticmethod
    def _bind_operations(client: Any) -> dict[CcrOperation, OperationInvoker]:
        operations: dict[CcrOperation, OperationInvoker] = {}
        for operation in CcrOperation:
            try:
                operations[operation] = client.service[operation.value]
            except AttributeError:
                logger.warning(f"Operation {operation.value} not found in WSDL")
        return operations

    def set_authorization(self, token: str) -> None:
        self._http_client.headers["Authorization"] = token

    async def invoke(self, operation: CcrOperation, args: Mapping[str, str]) -> Mapping[str, Any]:
        """
        Invoke a SOAP operation.

        Returns:
            Mapping holding the operation result under "<operation>Result"

        Raises:
            RuntimeError: If the transport is not connected
            LookupError: If the WSDL does not expose the operation
        """
        if self._client is None:
            raise RuntimeError("Transport not connected. Call 'await transport.connect()' first")

        invoker = self._operations.get(operation)
        if invoker is None:
            raise LookupError(f"Operation {operation.value} is not exposed by {self.wsdl_url}")

        raw = await invoker(**args)
        result = serialize_object(raw, dict)
        logger.debug(f"CCR {operation.value} response: {result}")

        if isinstance(result, Mapping) and operation.result_key in result:
            return result
        # zeep unwraps response bodies holding a single element
        return {operation.result_key: result}

    async def close(self) -> None:
        await self._http_client.aclose()
        self._wsdl_client.close()
        self._client = None
        self._operations = {}
