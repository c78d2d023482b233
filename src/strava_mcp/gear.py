"""
Gear tools for Strava MCP server.
"""

from strava_mcp.sdk import gear as sdk_gear
from strava_mcp.sdk.client import StravaClient
from strava_mcp.utils import to_json


def register_tools(app, client: StravaClient):
    """Register gear tools with the MCP app."""

    @app.tool()
    async def get_gear(gear_id: str) -> str:
        """
        Get detailed information about a specific piece of gear (bike, shoes, etc.).

        Args:
            gear_id: Gear ID (e.g. "b12345" for a bike, "g12345" for shoes)
        """
        return to_json(sdk_gear.get_gear(client, gear_id))

    return app
