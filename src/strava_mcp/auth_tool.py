"""
Authorization tools for Strava MCP server.

Lets a server started without tokens complete the OAuth flow in-band,
and reports the current token status.
"""

import json
import logging
import time

from strava_mcp.authorization import exchange_code
from strava_mcp.sdk.client import StravaClient
from strava_mcp.sdk.types import DEFAULT_SCOPE

logger = logging.getLogger(__name__)


def register_tools(app, client: StravaClient):
    """Register authorization tools with the MCP app."""
    store = client.token_store

    @app.tool()
    async def get_auth_status() -> str:
        """
        Report whether Strava tokens are installed and when they expire.

        Returns:
            JSON with authenticated flag and expiry details
        """
        credential = store.credential
        if credential is None:
            return json.dumps({
                "authenticated": False,
                "note": "Call get_authorization_url, approve access, then exchange_authorization_code.",
            }, indent=2)

        return json.dumps({
            "authenticated": True,
            "expires_at": credential.expires_at,
            "expires_in_seconds": max(0, credential.expires_at - int(time.time())),
        }, indent=2)

    @app.tool()
    async def get_authorization_url(
        redirect_uri: str = "http://localhost",
        scope: str = DEFAULT_SCOPE,
    ) -> str:
        """
        Build the Strava consent URL to open in a browser.

        After approving, the browser is redirected to redirect_uri with a
        code= parameter; pass it to exchange_authorization_code.

        Args:
            redirect_uri: Redirect target registered for the Strava app (default: http://localhost)
            scope: Comma-separated permissions (default: read,activity:read_all,activity:write,profile:read_all)

        Returns:
            JSON with the authorization URL
        """
        url = store.build_authorization_url(redirect_uri, scope, approval_prompt="auto")
        return json.dumps({"authorization_url": url, "scope": scope}, indent=2)

    @app.tool()
    async def exchange_authorization_code(code: str) -> dict:
        """
        Exchange a Strava authorization code for access tokens.

        Args:
            code: The code= value from the redirect URL (or the whole URL)

        Returns:
            Exchange result with token expiry or error details
        """
        result = exchange_code(store, code)
        if not result.success:
            logger.error(f"Authorization code exchange failed: {result.error}")
        return result.to_dict()

    @app.tool()
    async def get_available_features() -> str:
        """
        Get list of available Strava tools.

        Returns:
            JSON with available feature categories
        """
        features = {
            "platform": "Strava",
            "auth": [
                "get_auth_status - Token status and expiry",
                "get_authorization_url - Consent URL for the OAuth flow",
                "exchange_authorization_code - Install tokens from an authorization code",
                "get_available_features - This feature list",
            ],
            "athlete": [
                "get_athlete - Authenticated athlete profile",
                "get_athlete_stats - Recent, year-to-date and all-time totals",
                "get_athlete_zones - Heart rate and power zones",
            ],
            "activities": [
                "get_activities - List activities with time filters",
                "get_activity - Detailed activity",
                "create_activity - Create a manual activity",
                "update_activity - Edit an activity",
                "delete_activity - Delete an activity",
                "get_activity_streams - GPS, heart rate, power and other streams",
                "get_activity_comments - Activity comments",
                "get_activity_kudos - Activity kudos",
            ],
            "routes": [
                "get_routes - Athlete routes",
                "get_route - Route details",
            ],
            "segments": [
                "get_starred_segments - Starred segments",
                "get_segment - Segment details",
                "get_segment_leaderboard - Leaderboard with filters",
                "explore_segments - Popular segments in a bounding box",
            ],
            "clubs": [
                "get_athlete_clubs - Clubs of the athlete",
                "get_club - Club details",
                "get_club_members - Club members",
                "get_club_activities - Recent club activities",
            ],
            "gear": [
                "get_gear - Bike or shoe details",
            ],
            "notes": [
                "Write tools need the activity:write scope",
                "Tokens refresh automatically 5 minutes before expiry",
                "If a refresh is rejected, run strava-mcp-setup again",
            ],
        }
        return json.dumps(features, indent=2)

    return app
