"""
Tests para LifecycleManager.
"""

from unittest.mock import AsyncMock, patch

import pytest

from app.clients.ccr import CcrClient
from app.clients.ccr.exceptions import AuthenticationError
from app.config.settings import Settings
from app.core.lifecycle import LifecycleManager


@pytest.fixture
def mock_ccr_client():
    return AsyncMock(spec=CcrClient)


class TestLifecycleManager:
    @pytest.mark.asyncio
    async def test_startup_starts_injected_client(self, mock_ccr_client):
        manager = LifecycleManager(Settings(), ccr_client=mock_ccr_client)

        client = await manager.startup()

        assert client is mock_ccr_client
        mock_ccr_client.start.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_startup_builds_client_from_settings(self, mock_ccr_client):
        settings = Settings()
        manager = LifecycleManager(settings)

        with patch("app.core.lifecycle.CcrClientFactory.from_settings", return_value=mock_ccr_client) as factory:
            await manager.startup()

        factory.assert_called_once_with(settings)
        assert manager.ccr_client is mock_ccr_client

    @pytest.mark.asyncio
    async def test_startup_is_idempotent(self, mock_ccr_client):
        manager = LifecycleManager(Settings(), ccr_client=mock_ccr_client)

        await manager.startup()
        await manager.startup()

        mock_ccr_client.start.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_startup_closes_client_and_raises(self, mock_ccr_client):
        mock_ccr_client.start.side_effect = AuthenticationError(status_code=401)
        manager = LifecycleManager(Settings(), ccr_client=mock_ccr_client)

        with pytest.raises(AuthenticationError):
            await manager.startup()

        mock_ccr_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_shutdown_closes_client(self, mock_ccr_client):
        manager = LifecycleManager(Settings(), ccr_client=mock_ccr_client)
        await manager.startup()

        await manager.shutdown()

        mock_ccr_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_shutdown_without_startup_is_noop(self, mock_ccr_client):
        manager = LifecycleManager(Settings(), ccr_client=mock_ccr_client)

        await manager.shutdown()

        mock_ccr_client.close.assert_not_awaited()
