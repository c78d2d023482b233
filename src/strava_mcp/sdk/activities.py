"""
Strava activities SDK functions.
"""

from typing import Any, Dict, List, Optional, Sequence

from strava_mcp.sdk.client import StravaClient
from strava_mcp.sdk.types import DEFAULT_STREAM_KEYS


def get_activities(
    client: StravaClient,
    before: Optional[int] = None,
    after: Optional[int] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List the authenticated athlete's activities.

    GET /athlete/activities

    Args:
        before: Unix timestamp, only activities before this time
        after: Unix timestamp, only activities after this time
        page: Page number
        per_page: Items per page

    Returns:
        List of summary activities
    """
    params = {}
    if before:
        params["before"] = str(before)
    if after:
        params["after"] = str(after)
    if page:
        params["page"] = str(page)
    if per_page:
        params["per_page"] = str(per_page)

    return client.make_request("GET", "/athlete/activities", params=params or None)


def get_activity(
    client: StravaClient,
    activity_id: int,
    include_all_efforts: bool = False,
) -> Dict[str, Any]:
    """
    Get a detailed activity.

    GET /activities/{id}
    """
    return client.make_request(
        "GET",
        f"/activities/{activity_id}",
        params={"include_all_efforts": client.bool_param(include_all_efforts)},
    )


def create_activity(client: StravaClient, params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a manual activity.

    POST /activities

    Args:
        params: name, sport_type, start_date_local, elapsed_time and optional
            type, description, distance, trainer, commute
    """
    return client.make_request("POST", "/activities", json_data=params)


def update_activity(
    client: StravaClient,
    activity_id: int,
    params: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Update an activity.

    PUT /activities/{id}
    """
    return client.make_request("PUT", f"/activities/{activity_id}", json_data=params)


def delete_activity(client: StravaClient, activity_id: int) -> None:
    """
    Delete an activity.

    DELETE /activities/{id}
    """
    client.make_request("DELETE", f"/activities/{activity_id}")


def get_activity_streams(
    client: StravaClient,
    activity_id: int,
    keys: Sequence[str] = DEFAULT_STREAM_KEYS,
    key_by_type: bool = True,
) -> Any:
    """
    Get activity streams (GPS, heart rate, power, ...).

    GET /activities/{id}/streams

    Returns:
        A dict keyed by stream type when key_by_type, else a list of streams
    """
    return client.make_request(
        "GET",
        f"/activities/{activity_id}/streams",
        params={
            "keys": ",".join(keys),
            "key_by_type": client.bool_param(key_by_type),
        },
    )


def get_activity_comments(
    client: StravaClient,
    activity_id: int,
    page: int = 1,
    per_page: int = 30,
) -> List[Dict[str, Any]]:
    """
    GET /activities/{id}/comments
    """
    return client.make_request(
        "GET",
        f"/activities/{activity_id}/comments",
        params={"page": str(page), "per_page": str(per_page)},
    )


def get_activity_kudos(
    client: StravaClient,
    activity_id: int,
    page: int = 1,
    per_page: int = 30,
) -> List[Dict[str, Any]]:
    """
    GET /activities/{id}/kudos
    """
    return client.make_request(
        "GET",
        f"/activities/{activity_id}/kudos",
        params={"page": str(page), "per_page": str(per_page)},
    )
