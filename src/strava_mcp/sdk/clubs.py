"""
Strava clubs SDK functions.
"""

from typing import Any, Dict, List

from strava_mcp.sdk.client import StravaClient


def _paging(page: int, per_page: int) -> Dict[str, str]:
    return {"page": str(page), "per_page": str(per_page)}


def get_athlete_clubs(
    client: StravaClient,
    page: int = 1,
    per_page: int = 30,
) -> List[Dict[str, Any]]:
    """
    Clubs the authenticated athlete belongs to.

    GET /athlete/clubs
    """
    return client.make_request("GET", "/athlete/clubs", params=_paging(page, per_page))


def get_club(client: StravaClient, club_id: int) -> Dict[str, Any]:
    """
    GET /clubs/{id}
    """
    return client.make_request("GET", f"/clubs/{club_id}")


def get_club_members(
    client: StravaClient,
    club_id: int,
    page: int = 1,
    per_page: int = 30,
) -> List[Dict[str, Any]]:
    """
    GET /clubs/{id}/members
    """
    return client.make_request("GET", f"/clubs/{club_id}/members", params=_paging(page, per_page))


def get_club_activities(
    client: StravaClient,
    club_id: int,
    page: int = 1,
    per_page: int = 30,
) -> List[Dict[str, Any]]:
    """
    Recent activities by club members.

    GET /clubs/{id}/activities
    """
    return client.make_request("GET", f"/clubs/{club_id}/activities", params=_paging(page, per_page))
