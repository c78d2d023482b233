"""
Strava athlete SDK functions.
"""

from typing import Any, Dict

from strava_mcp.sdk.client import StravaClient


def get_athlete(client: StravaClient) -> Dict[str, Any]:
    """
    Get the authenticated athlete.

    GET /athlete
    """
    return client.make_request("GET", "/athlete")


def get_athlete_stats(client: StravaClient, athlete_id: int) -> Dict[str, Any]:
    """
    Get totals and recent activity stats for an athlete.

    GET /athletes/{id}/stats

    Only works for the authenticated athlete's own id.
    """
    return client.make_request("GET", f"/athletes/{athlete_id}/stats")


def get_athlete_zones(client: StravaClient) -> Dict[str, Any]:
    """
    Get heart rate and power zones.

    GET /athlete/zones
    """
    return client.make_request("GET", "/athlete/zones")
