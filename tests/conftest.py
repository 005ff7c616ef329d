"""Shared fixtures for the TailGrids MCP tests."""

from types import MappingProxyType

import httpx
import pytest
import pytest_asyncio

from tailgrids_mcp.config import McpConfig
from tailgrids_mcp.provider import TailGridsProvider
from tailgrids_mcp.tools import ToolRegistry
from tests._helpers import docs_transport


@pytest.fixture
def config():
    return McpConfig()


@pytest.fixture
def categories():
    """Small category table used across the tests."""
    return MappingProxyType(
        {
            "Buttons": ("DefaultButton", "OutlineButton"),
            "Modals": ("Modal", "ConfirmModal", "FormModal"),
        }
    )


@pytest_asyncio.fixture
async def http_client():
    async with httpx.AsyncClient(transport=docs_transport()) as client:
        yield client


@pytest.fixture
def provider(config, categories, http_client):
    return TailGridsProvider(config, categories, client=http_client)


@pytest.fixture
def registry(provider, categories):
    return ToolRegistry(provider, categories)
