"""
Segment tools for Strava MCP server.

Starred segments, segment details, leaderboards and exploration.
"""

from typing import List

from strava_mcp.sdk import segments as sdk_segments
from strava_mcp.sdk.client import StravaClient
from strava_mcp.sdk.types import EXPLORE_ACTIVITY_TYPES, LEADERBOARD_GENDERS
from strava_mcp.utils import cap_per_page, to_json, validate_choice


def register_tools(app, client: StravaClient):
    """Register segment tools with the MCP app."""

    @app.tool()
    async def get_starred_segments(page: int = 1, per_page: int = 30) -> str:
        """
        Get athlete starred segments.

        Args:
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30)
        """
        segments = sdk_segments.get_starred_segments(
            client, page=page, per_page=cap_per_page(per_page),
        )
        return to_json(segments)

    @app.tool()
    async def get_segment(segment_id: int) -> str:
        """
        Get detailed information about a specific segment.

        Args:
            segment_id: Segment ID
        """
        return to_json(sdk_segments.get_segment(client, segment_id))

    @app.tool()
    async def get_segment_leaderboard(
        segment_id: int,
        gender: str = None,
        age_group: str = None,
        weight_class: str = None,
        following: bool = None,
        club_id: int = None,
        date_range: str = None,
        page: int = None,
        per_page: int = None,
    ) -> str:
        """
        Get segment leaderboard with optional filters.

        Args:
            segment_id: Segment ID
            gender: Filter by gender (M or F)
            age_group: Age group (e.g., "25_34")
            weight_class: Weight class (kg)
            following: Filter by athletes you follow
            club_id: Filter by club ID
            date_range: Date range (e.g., "this_year", "this_month")
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30)

        Returns:
            JSON leaderboard
        """
        validate_choice(gender, LEADERBOARD_GENDERS, "gender")

        leaderboard = sdk_segments.get_segment_leaderboard(
            client,
            segment_id,
            gender=gender,
            age_group=age_group,
            weight_class=weight_class,
            following=following,
            club_id=club_id,
            date_range=date_range,
            page=page,
            per_page=cap_per_page(per_page),
        )
        return to_json(leaderboard)

    @app.tool()
    async def explore_segments(
        bounds: List[float],
        activity_type: str = None,
        min_cat: int = None,
        max_cat: int = None,
    ) -> str:
        """
        Explore segments in a geographic area.

        Args:
            bounds: Geographic bounds [sw_lat, sw_lng, ne_lat, ne_lng]
            activity_type: Activity type filter (running or riding)
            min_cat: Minimum climb category
            max_cat: Maximum climb category

        Returns:
            JSON with the matching segments
        """
        if len(bounds) != 4:
            raise ValueError(
                f"bounds must have exactly 4 values [sw_lat, sw_lng, ne_lat, ne_lng], got {len(bounds)}"
            )
        validate_choice(activity_type, EXPLORE_ACTIVITY_TYPES, "activity_type")

        result = sdk_segments.explore_segments(
            client,
            bounds,
            activity_type=activity_type,
            min_cat=min_cat,
            max_cat=max_cat,
        )
        return to_json(result)

    return app
