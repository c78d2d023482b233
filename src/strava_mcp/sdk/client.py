"""
Strava API HTTP Client.

Handles HTTP transport, bearer authentication and error handling.
All endpoint-specific calls live in the sibling modules (activities, athlete, etc.).
"""

import logging
from typing import Any, Dict, Optional

import requests

from strava_mcp.sdk.auth import TokenStore
from strava_mcp.sdk.errors import StravaAPIError, message_from_response
from strava_mcp.sdk.types import API_URL

logger = logging.getLogger(__name__)


class StravaClient:
    """
    Strava REST API transport.

    Asks the token store for a valid access token on every request and
    attaches it as a bearer header. Endpoint calls are in sibling modules
    (sdk.activities, sdk.athlete, ...).
    """

    def __init__(
        self,
        token_store: TokenStore,
        api_url: str = API_URL,
        session: Optional[requests.Session] = None,
    ):
        self._token_store = token_store
        self._api_url = api_url.rstrip("/")
        self._session = session or requests.Session()

    @property
    def token_store(self) -> TokenStore:
        return self._token_store

    @property
    def is_authenticated(self) -> bool:
        return self._token_store.has_credential()

    def make_request(
        self,
        method: str,
        endpoint: str,
        params: Dict = None,
        json_data: Dict = None,
    ) -> Any:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET/POST/PUT/DELETE)
            endpoint: API path (e.g. "/athlete/activities")
            params: Query parameters
            json_data: JSON body data

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            NoCredentialError: If no token has been installed
            AuthRefreshError: If the token needed refreshing and Strava refused
            StravaAPIError: If the API returns a non-success status or is
                unreachable (status_code is None then)
        """
        access_token = self._token_store.get_valid_access_token()

        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }
        url = f"{self._api_url}/{endpoint.lstrip('/')}"

        try:
            response = self._session.request(
                method.upper(),
                url,
                headers=headers,
                params=params,
                json=json_data,
            )
        except requests.RequestException as e:
            logger.warning(f"{method.upper()} {endpoint} failed: {e}")
            raise StravaAPIError(str(e)) from e

        if not response.ok:
            message = message_from_response(response)
            logger.warning(f"{method.upper()} {endpoint} failed: {message} ({response.status_code})")
            raise StravaAPIError(message, response.status_code)

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def bool_param(value: bool) -> str:
        """Serialize a boolean query parameter the way Strava expects."""
        return "true" if value else "false"
