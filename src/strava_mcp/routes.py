"""
Route tools for Strava MCP server.
"""

from strava_mcp.sdk import routes as sdk_routes
from strava_mcp.sdk.client import StravaClient
from strava_mcp.utils import cap_per_page, to_json


def register_tools(app, client: StravaClient):
    """Register route tools with the MCP app."""

    @app.tool()
    async def get_routes(athlete_id: int, page: int = 1, per_page: int = 30) -> str:
        """
        Get athlete routes.

        Args:
            athlete_id: Athlete ID
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30)
        """
        routes = sdk_routes.get_routes(
            client, athlete_id, page=page, per_page=cap_per_page(per_page),
        )
        return to_json(routes)

    @app.tool()
    async def get_route(route_id: int) -> str:
        """
        Get detailed information about a specific route.

        Args:
            route_id: Route ID
        """
        return to_json(sdk_routes.get_route(client, route_id))

    return app
