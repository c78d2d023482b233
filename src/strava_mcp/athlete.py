"""
Athlete tools for Strava MCP server.

Profile, stats and training zones of the authenticated athlete.
"""

from strava_mcp.sdk import athlete as sdk_athlete
from strava_mcp.sdk.client import StravaClient
from strava_mcp.utils import to_json


def register_tools(app, client: StravaClient):
    """Register athlete tools with the MCP app."""

    @app.tool()
    async def get_athlete() -> str:
        """
        Get the authenticated athlete profile.

        Returns:
            JSON with name, location, weight, FTP, bikes and shoes
        """
        return to_json(sdk_athlete.get_athlete(client))

    @app.tool()
    async def get_athlete_stats(athlete_id: int) -> str:
        """
        Get athlete statistics (totals and recent activities).

        Args:
            athlete_id: Athlete ID (must be the authenticated athlete, see get_athlete)

        Returns:
            JSON with recent, year-to-date and all-time totals per sport
        """
        return to_json(sdk_athlete.get_athlete_stats(client, athlete_id))

    @app.tool()
    async def get_athlete_zones() -> str:
        """
        Get athlete zones (heart rate and power zones).
        """
        return to_json(sdk_athlete.get_athlete_zones(client))

    return app
