"""
Strava segments SDK functions.
"""

from typing import Any, Dict, List, Optional, Sequence

from strava_mcp.sdk.client import StravaClient


def get_starred_segments(
    client: StravaClient,
    page: int = 1,
    per_page: int = 30,
) -> List[Dict[str, Any]]:
    """
    GET /segments/starred
    """
    return client.make_request(
        "GET",
        "/segments/starred",
        params={"page": str(page), "per_page": str(per_page)},
    )


def get_segment(client: StravaClient, segment_id: int) -> Dict[str, Any]:
    """
    GET /segments/{id}
    """
    return client.make_request("GET", f"/segments/{segment_id}")


def get_segment_leaderboard(
    client: StravaClient,
    segment_id: int,
    gender: Optional[str] = None,
    age_group: Optional[str] = None,
    weight_class: Optional[str] = None,
    following: Optional[bool] = None,
    club_id: Optional[int] = None,
    date_range: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Get a segment leaderboard.

    GET /segments/{id}/leaderboard

    Only filters that are set are sent. ``following`` is sent even when False.
    """
    params = {}
    if gender:
        params["gender"] = gender
    if age_group:
        params["age_group"] = age_group
    if weight_class:
        params["weight_class"] = weight_class
    if following is not None:
        params["following"] = client.bool_param(following)
    if club_id:
        params["club_id"] = str(club_id)
    if date_range:
        params["date_range"] = date_range
    if page:
        params["page"] = str(page)
    if per_page:
        params["per_page"] = str(per_page)

    return client.make_request(
        "GET",
        f"/segments/{segment_id}/leaderboard",
        params=params or None,
    )


def explore_segments(
    client: StravaClient,
    bounds: Sequence[float],
    activity_type: Optional[str] = None,
    min_cat: Optional[int] = None,
    max_cat: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Explore popular segments in a bounding box.

    GET /segments/explore

    Args:
        bounds: [sw_lat, sw_lng, ne_lat, ne_lng]
        activity_type: "running" or "riding"
        min_cat: Minimum climb category
        max_cat: Maximum climb category

    Returns:
        {segments: [...]}
    """
    params = {"bounds": ",".join(str(b) for b in bounds)}
    if activity_type:
        params["activity_type"] = activity_type
    if min_cat is not None:
        params["min_cat"] = str(min_cat)
    if max_cat is not None:
        params["max_cat"] = str(max_cat)

    return client.make_request("GET", "/segments/explore", params=params)
