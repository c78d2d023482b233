"""
Strava API Low-Level SDK.

Thin typed wrapper over the Strava v3 REST API.
Each function maps 1:1 to a Strava endpoint; TokenStore owns OAuth.
"""

from strava_mcp.sdk.auth import TokenStore
from strava_mcp.sdk.client import StravaClient
from strava_mcp.sdk.errors import (
    StravaError,
    NoCredentialError,
    AuthExchangeError,
    AuthRefreshError,
    StravaAPIError,
)
from strava_mcp.sdk.types import (
    Credential,
    Scope,
    GrantType,
    ACTIVITY_TYPES,
    DEFAULT_SCOPE,
    DEFAULT_STREAM_KEYS,
    REFRESH_SKEW_SECONDS,
)

__all__ = [
    "TokenStore",
    "StravaClient",
    "StravaError",
    "NoCredentialError",
    "AuthExchangeError",
    "AuthRefreshError",
    "StravaAPIError",
    "Credential",
    "Scope",
    "GrantType",
    "ACTIVITY_TYPES",
    "DEFAULT_SCOPE",
    "DEFAULT_STREAM_KEYS",
    "REFRESH_SKEW_SECONDS",
]
