"""
Shared pytest fixtures for all tests.

This module provides the CCR credentials, a controllable clock, a fake SOAP
transport and token managers wired to an in-memory identity endpoint.
"""

import os
from collections.abc import Callable, Mapping
from typing import Any

import httpx
import pytest

from app.clients.ccr import CcrOperation, CcrTokenManager
from app.models.ccr import CcrCredentials
from tests.utils.builders import TOKEN_URL, TOKEN_VALUE

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["TESTING"] = "true"
os.environ.setdefault("CCR_USERNAME", "ccr-user")
os.environ.setdefault("CCR_PASSWORD", "ccr-password")
os.environ.setdefault("CCR_USER_ID", "1001")
os.environ.setdefault("CCR_SERVICE_ID", "73")
os.environ.setdefault("CCR_CLIENT_CODE", "C-500")
os.environ.setdefault("CCR_SOAP_URL", "https://ccr.test/wsdl/ccrws.asmx?wsdl")
os.environ.setdefault("CCR_SYSTEM", "PYMEXPRESS")
os.environ.setdefault("API_ACCESS_TOKEN", "test-access-token")
os.environ.setdefault("LOG_DIR", "")


# ============================================================================
# CCR FIXTURES
# ============================================================================


class FakeClock:
    """Reloj manual: el tiempo solo avanza con advance()."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTransport:
    """
    In-memory CcrTransport.

    Responses are keyed by operation; an exception instance is raised instead
    of returned. Every call is recorded in order.
    """

    def __init__(self, responses: Mapping[CcrOperation, Any] | None = None):
        self.responses: dict[CcrOperation, Any] = dict(responses or {})
        self.invocations: list[tuple[CcrOperation, dict[str, str]]] = []
        self.authorization: str | None = None
        self.connected = False
        self.closed = False

    async def connect(self) -> None:
        self.connected = True

    async def close(self) -> None:
        self.closed = True

    def set_authorization(self, token: str) -> None:
        self.authorization = token

    async def invoke(self, operation: CcrOperation, args: Mapping[str, str]) -> Mapping[str, Any]:
        self.invocations.append((operation, dict(args)))
        response = self.responses[operation]
        if isinstance(response, BaseException):
            raise response
        return response


class TokenEndpoint:
    """Identity endpoint served through httpx.MockTransport."""

    def __init__(self, token: str = TOKEN_VALUE):
        self.token = token
        self.status_code = 200
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.token)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def ccr_credentials() -> CcrCredentials:
    """Credenciales CCR de prueba."""
    return CcrCredentials(
        username="ccr-user",
        password="ccr-password",
        user_id="1001",
        service_id="73",
        client_code="C-500",
        soap_url="https://ccr.test/wsdl/ccrws.asmx?wsdl",
        system_id="PYMEXPRESS",
        token_url=TOKEN_URL,
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_endpoint() -> TokenEndpoint:
    return TokenEndpoint()


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def make_token_manager(
    ccr_credentials: CcrCredentials, token_endpoint: TokenEndpoint, fake_clock: FakeClock
) -> Callable[..., CcrTokenManager]:
    """Factory de CcrTokenManager conectado al endpoint en memoria."""

    def _make(**kwargs: Any) -> CcrTokenManager:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(token_endpoint))
        kwargs.setdefault("clock", fake_clock)
        return CcrTokenManager(ccr_credentials, http_client, **kwargs)

    return _make


@pytest.fixture
def token_manager(make_token_manager, fake_transport: FakeTransport) -> CcrTokenManager:
    """Token manager que propaga cada token nuevo al transporte falso."""
    return make_token_manager(on_token=fake_transport.set_authorization)
