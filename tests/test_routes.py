"""
Tests for Strava MCP route tools.
"""
import json
import pytest
from unittest.mock import patch
from mcp.server.fastmcp import FastMCP

from strava_mcp import routes
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_routes(mock_client):
    app = FastMCP("Test Strava Routes")
    app = routes.register_tools(app, mock_client)
    return app


@patch("strava_mcp.routes.sdk_routes")
@pytest.mark.asyncio
async def test_get_routes(mock_sdk, app_with_routes, mock_client):
    mock_sdk.get_routes.return_value = [{"id": 7, "name": "Loop"}]

    result = await app_with_routes.call_tool("get_routes", {"athlete_id": 134815})

    assert json.loads(get_tool_result_text(result))[0]["name"] == "Loop"
    mock_sdk.get_routes.assert_called_once_with(mock_client, 134815, page=1, per_page=30)


@patch("strava_mcp.routes.sdk_routes")
@pytest.mark.asyncio
async def test_get_routes_caps_per_page(mock_sdk, app_with_routes, mock_client):
    mock_sdk.get_routes.return_value = []

    await app_with_routes.call_tool("get_routes", {"athlete_id": 134815, "page": 3, "per_page": 999})

    mock_sdk.get_routes.assert_called_once_with(mock_client, 134815, page=3, per_page=200)


@patch("strava_mcp.routes.sdk_routes")
@pytest.mark.asyncio
async def test_get_route(mock_sdk, app_with_routes, mock_client):
    mock_sdk.get_route.return_value = {"id": 7, "distance": 21000.0}

    result = await app_with_routes.call_tool("get_route", {"route_id": 7})

    assert json.loads(get_tool_result_text(result))["distance"] == 21000.0
    mock_sdk.get_route.assert_called_once_with(mock_client, 7)
