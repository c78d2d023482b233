"""
Strava routes SDK functions.
"""

from typing import Any, Dict, List

from strava_mcp.sdk.client import StravaClient


def get_routes(
    client: StravaClient,
    athlete_id: int,
    page: int = 1,
    per_page: int = 30,
) -> List[Dict[str, Any]]:
    """
    List an athlete's routes.

    GET /athletes/{id}/routes
    """
    return client.make_request(
        "GET",
        f"/athletes/{athlete_id}/routes",
        params={"page": str(page), "per_page": str(per_page)},
    )


def get_route(client: StravaClient, route_id: int) -> Dict[str, Any]:
    """
    GET /routes/{id}
    """
    return client.make_request("GET", f"/routes/{route_id}")
