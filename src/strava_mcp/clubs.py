"""
Club tools for Strava MCP server.
"""

from strava_mcp.sdk import clubs as sdk_clubs
from strava_mcp.sdk.client import StravaClient
from strava_mcp.utils import cap_per_page, to_json


def register_tools(app, client: StravaClient):
    """Register club tools with the MCP app."""

    @app.tool()
    async def get_athlete_clubs(page: int = 1, per_page: int = 30) -> str:
        """
        Get clubs the authenticated athlete belongs to.

        Args:
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30)
        """
        clubs = sdk_clubs.get_athlete_clubs(client, page=page, per_page=cap_per_page(per_page))
        return to_json(clubs)

    @app.tool()
    async def get_club(club_id: int) -> str:
        """
        Get detailed information about a specific club.

        Args:
            club_id: Club ID
        """
        return to_json(sdk_clubs.get_club(client, club_id))

    @app.tool()
    async def get_club_members(club_id: int, page: int = 1, per_page: int = 30) -> str:
        """
        Get members of a club.

        Args:
            club_id: Club ID
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30)
        """
        members = sdk_clubs.get_club_members(
            client, club_id, page=page, per_page=cap_per_page(per_page),
        )
        return to_json(members)

    @app.tool()
    async def get_club_activities(club_id: int, page: int = 1, per_page: int = 30) -> str:
        """
        Get recent activities from club members.

        Args:
            club_id: Club ID
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30)
        """
        activities = sdk_clubs.get_club_activities(
            client, club_id, page=page, per_page=cap_per_page(per_page),
        )
        return to_json(activities)

    return app
