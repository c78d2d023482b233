"""
Strava gear SDK functions.
"""

from typing import Any, Dict

from strava_mcp.sdk.client import StravaClient


def get_gear(client: StravaClient, gear_id: str) -> Dict[str, Any]:
    """
    Get a bike or pair of shoes.

    GET /gear/{id}

    Gear ids are strings such as "b12345" (bike) or "g12345" (shoes).
    """
    return client.make_request("GET", f"/gear/{gear_id}")
