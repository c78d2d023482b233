"""
Activity tools for Strava MCP server.

List, read, create, update and delete activities, plus streams,
comments and kudos.
"""

from typing import List

from strava_mcp.sdk import activities as sdk_activities
from strava_mcp.sdk.client import StravaClient
from strava_mcp.sdk.types import ACTIVITY_TYPES, DEFAULT_STREAM_KEYS
from strava_mcp.utils import cap_per_page, drop_nones, to_json, validate_choice


def register_tools(app, client: StravaClient):
    """Register activity tools with the MCP app."""

    @app.tool()
    async def get_activities(
        before: int = None,
        after: int = None,
        page: int = None,
        per_page: int = None,
    ) -> str:
        """
        Get logged-in athlete activities with optional filters.

        Args:
            before: Unix timestamp to retrieve activities before
            after: Unix timestamp to retrieve activities after
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30, max: 200)

        Returns:
            JSON list of activity summaries
        """
        data = sdk_activities.get_activities(
            client,
            before=before,
            after=after,
            page=page,
            per_page=cap_per_page(per_page),
        )
        return to_json(data)

    @app.tool()
    async def get_activity(activity_id: int, include_all_efforts: bool = False) -> str:
        """
        Get detailed information about a specific activity by ID.

        Args:
            activity_id: Activity ID
            include_all_efforts: Include all segment efforts (default: false)

        Returns:
            JSON with the detailed activity
        """
        return to_json(sdk_activities.get_activity(client, activity_id, include_all_efforts))

    @app.tool()
    async def create_activity(
        name: str,
        sport_type: str,
        start_date_local: str,
        elapsed_time: int,
        type: str = None,
        description: str = None,
        distance: float = None,
        trainer: bool = None,
        commute: bool = None,
    ) -> str:
        """
        Create a new manual activity.

        Args:
            name: Activity name
            sport_type: Sport type (e.g., Run, Ride, Swim)
            start_date_local: ISO 8601 formatted date time
            elapsed_time: Activity elapsed time in seconds
            type: Activity type (legacy, same values as sport_type)
            description: Activity description
            distance: Activity distance in meters
            trainer: Whether activity was on a trainer
            commute: Whether activity was a commute

        Returns:
            Confirmation with the created activity JSON
        """
        validate_choice(sport_type, ACTIVITY_TYPES, "sport_type")
        validate_choice(type, ACTIVITY_TYPES, "type")

        params = drop_nones({
            "name": name,
            "sport_type": sport_type,
            "start_date_local": start_date_local,
            "elapsed_time": elapsed_time,
            "type": type,
            "description": description,
            "distance": distance,
            "trainer": trainer,
            "commute": commute,
        })
        activity = sdk_activities.create_activity(client, params)
        return f"Activity created successfully:\n{to_json(activity)}"

    @app.tool()
    async def update_activity(
        activity_id: int,
        commute: bool = None,
        trainer: bool = None,
        hide_from_home: bool = None,
        description: str = None,
        name: str = None,
        type: str = None,
        sport_type: str = None,
        gear_id: str = None,
    ) -> str:
        """
        Update an existing activity.

        Only the fields that are given are changed.

        Args:
            activity_id: Activity ID
            commute: Whether activity was a commute
            trainer: Whether activity was on a trainer
            hide_from_home: Hide activity from home feed
            description: Activity description
            name: Activity name
            type: Activity type
            sport_type: Sport type
            gear_id: Gear ID ("none" clears the gear)

        Returns:
            Confirmation with the updated activity JSON
        """
        validate_choice(type, ACTIVITY_TYPES, "type")
        validate_choice(sport_type, ACTIVITY_TYPES, "sport_type")

        params = drop_nones({
            "commute": commute,
            "trainer": trainer,
            "hide_from_home": hide_from_home,
            "description": description,
            "name": name,
            "type": type,
            "sport_type": sport_type,
            "gear_id": gear_id,
        })
        activity = sdk_activities.update_activity(client, activity_id, params)
        return f"Activity updated successfully:\n{to_json(activity)}"

    @app.tool()
    async def delete_activity(activity_id: int) -> str:
        """
        Delete an activity.

        Args:
            activity_id: Activity ID to delete

        Returns:
            Confirmation message
        """
        sdk_activities.delete_activity(client, activity_id)
        return f"Activity {activity_id} deleted successfully"

    @app.tool()
    async def get_activity_streams(
        activity_id: int,
        keys: List[str] = None,
        key_by_type: bool = True,
    ) -> str:
        """
        Get activity streams (GPS, heart rate, power, cadence, etc.).

        Args:
            activity_id: Activity ID
            keys: Stream types to retrieve (time, latlng, distance, altitude,
                heartrate, watts, cadence, etc.)
            key_by_type: Return streams keyed by type (default: true)

        Returns:
            JSON with the requested streams
        """
        streams = sdk_activities.get_activity_streams(
            client,
            activity_id,
            keys=keys or DEFAULT_STREAM_KEYS,
            key_by_type=key_by_type,
        )
        return to_json(streams)

    @app.tool()
    async def get_activity_comments(activity_id: int, page: int = 1, per_page: int = 30) -> str:
        """
        Get comments for an activity.

        Args:
            activity_id: Activity ID
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30)
        """
        comments = sdk_activities.get_activity_comments(
            client, activity_id, page=page, per_page=cap_per_page(per_page),
        )
        return to_json(comments)

    @app.tool()
    async def get_activity_kudos(activity_id: int, page: int = 1, per_page: int = 30) -> str:
        """
        Get kudos for an activity.

        Args:
            activity_id: Activity ID
            page: Page number (default: 1)
            per_page: Number of items per page (default: 30)
        """
        kudos = sdk_activities.get_activity_kudos(
            client, activity_id, page=page, per_page=cap_per_page(per_page),
        )
        return to_json(kudos)

    return app
