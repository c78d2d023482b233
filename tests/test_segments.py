"""
Tests for Strava MCP segment tools.
"""
import json
import pytest
from unittest.mock import patch
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from strava_mcp import segments
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_segments(mock_client):
    app = FastMCP("Test Strava Segments")
    app = segments.register_tools(app, mock_client)
    return app


@patch("strava_mcp.segments.sdk_segments")
@pytest.mark.asyncio
async def test_get_starred_segments(mock_sdk, app_with_segments, mock_client):
    mock_sdk.get_starred_segments.return_value = [{"id": 1, "name": "Hawk Hill"}]

    result = await app_with_segments.call_tool("get_starred_segments", {})

    assert json.loads(get_tool_result_text(result))[0]["name"] == "Hawk Hill"
    mock_sdk.get_starred_segments.assert_called_once_with(mock_client, page=1, per_page=30)


@patch("strava_mcp.segments.sdk_segments")
@pytest.mark.asyncio
async def test_get_segment(mock_sdk, app_with_segments, mock_client):
    mock_sdk.get_segment.return_value = {"id": 229781, "average_grade": 5.7}

    result = await app_with_segments.call_tool("get_segment", {"segment_id": 229781})

    assert json.loads(get_tool_result_text(result))["average_grade"] == 5.7
    mock_sdk.get_segment.assert_called_once_with(mock_client, 229781)


@patch("strava_mcp.segments.sdk_segments")
@pytest.mark.asyncio
async def test_get_segment_leaderboard(mock_sdk, app_with_segments, mock_client):
    mock_sdk.get_segment_leaderboard.return_value = {"entry_count": 2, "entries": []}

    result = await app_with_segments.call_tool(
        "get_segment_leaderboard",
        {"segment_id": 1, "gender": "F", "following": False, "date_range": "this_year"},
    )

    assert json.loads(get_tool_result_text(result))["entry_count"] == 2
    mock_sdk.get_segment_leaderboard.assert_called_once_with(
        mock_client, 1,
        gender="F", age_group=None, weight_class=None, following=False,
        club_id=None, date_range="this_year", page=None, per_page=None,
    )


@patch("strava_mcp.segments.sdk_segments")
@pytest.mark.asyncio
async def test_get_segment_leaderboard_rejects_gender(mock_sdk, app_with_segments):
    with pytest.raises(ToolError) as exc_info:
        await app_with_segments.call_tool(
            "get_segment_leaderboard", {"segment_id": 1, "gender": "X"},
        )

    assert "gender" in str(exc_info.value)
    mock_sdk.get_segment_leaderboard.assert_not_called()


@patch("strava_mcp.segments.sdk_segments")
@pytest.mark.asyncio
async def test_explore_segments(mock_sdk, app_with_segments, mock_client):
    mock_sdk.explore_segments.return_value = {"segments": [{"id": 3}]}

    result = await app_with_segments.call_tool(
        "explore_segments",
        {"bounds": [37.7, -122.5, 37.8, -122.4], "activity_type": "running"},
    )

    assert json.loads(get_tool_result_text(result))["segments"][0]["id"] == 3
    mock_sdk.explore_segments.assert_called_once_with(
        mock_client, [37.7, -122.5, 37.8, -122.4],
        activity_type="running", min_cat=None, max_cat=None,
    )


@pytest.mark.parametrize("arguments,fragment", [
    ({"bounds": [1.0, 2.0, 3.0]}, "exactly 4"),
    ({"bounds": [1.0, 2.0, 3.0, 4.0], "activity_type": "swimming"}, "activity_type"),
])
@patch("strava_mcp.segments.sdk_segments")
@pytest.mark.asyncio
async def test_explore_segments_validation(mock_sdk, app_with_segments, arguments, fragment):
    with pytest.raises(ToolError) as exc_info:
        await app_with_segments.call_tool("explore_segments", arguments)

    assert fragment in str(exc_info.value)
    mock_sdk.explore_segments.assert_not_called()
