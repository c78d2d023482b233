"""
Strava API types, enums, and constants.

All Strava-specific URLs, scopes and enumerations live here.
"""

from dataclasses import dataclass
from enum import Enum


# OAuth / API endpoints
AUTHORIZE_URL = "https://www.strava.com/oauth/authorize"
TOKEN_URL = "https://www.strava.com/oauth/token"
API_URL = "https://www.strava.com/api/v3"

# Refresh when the token expires within this many seconds
REFRESH_SKEW_SECONDS = 300


class Scope(str, Enum):
    """Preset OAuth scope strings (comma-joined permission identifiers)."""
    MINIMAL = "read,activity:read"
    READ_ONLY = "read,activity:read_all,profile:read_all"
    READ_WRITE = "read,activity:read_all,activity:write,profile:read_all"


DEFAULT_SCOPE = Scope.READ_WRITE.value


class GrantType(str, Enum):
    """Grant types accepted by the token endpoint."""
    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"


@dataclass(frozen=True)
class Credential:
    """OAuth credential triple.

    Frozen so the token store can only replace it as a whole.
    """
    access_token: str
    refresh_token: str
    expires_at: int  # Unix timestamp, seconds

    @classmethod
    def from_token_response(cls, data: dict) -> "Credential":
        """Build a Credential from a token endpoint JSON payload."""
        return cls(
            access_token=data["access_token"],
            refresh_token=data["refresh_token"],
            expires_at=int(data["expires_at"]),
        )

    def expires_within(self, now: float, skew: int = REFRESH_SKEW_SECONDS) -> bool:
        return self.expires_at <= now + skew


# Stream types requested when the caller does not pick any
DEFAULT_STREAM_KEYS = ("time", "latlng", "distance", "altitude", "heartrate", "watts")

LEADERBOARD_GENDERS = ("M", "F")

EXPLORE_ACTIVITY_TYPES = ("running", "riding")

MAX_PER_PAGE = 200

# Sport types accepted by create/update activity
ACTIVITY_TYPES = (
    "AlpineSki",
    "BackcountrySki",
    "Canoeing",
    "Crossfit",
    "EBikeRide",
    "Elliptical",
    "Golf",
    "Handcycle",
    "Hike",
    "IceSkate",
    "InlineSkate",
    "Kayaking",
    "Kitesurf",
    "NordicSki",
    "Ride",
    "RockClimbing",
    "RollerSki",
    "Rowing",
    "Run",
    "Sail",
    "Skateboard",
    "Snowboard",
    "Snowshoe",
    "Soccer",
    "StairStepper",
    "StandUpPaddling",
    "Surfing",
    "Swim",
    "Velomobile",
    "VirtualRide",
    "VirtualRun",
    "Walk",
    "WeightTraining",
    "Wheelchair",
    "Windsurf",
    "Workout",
    "Yoga",
)
