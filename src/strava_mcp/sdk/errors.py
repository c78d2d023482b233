"""
Strava SDK exceptions.

Every error keeps the server-provided message and HTTP status (when there
was a response) so the MCP layer can surface them unchanged.
"""

from typing import Optional


class StravaError(Exception):
    """Base class for all Strava SDK errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self._format())

    def _format(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} ({self.status_code})"


class NoCredentialError(StravaError):
    """No credential is installed in the token store."""

    def __init__(self, message: str = "No Strava tokens available. Run strava-mcp-setup to authorize first."):
        super().__init__(message)


class AuthExchangeError(StravaError):
    """Authorization code exchange was rejected."""

    def _format(self) -> str:
        return f"Failed to exchange token: {super()._format()}"


class AuthRefreshError(StravaError):
    """Refresh was rejected; the authorization flow must be re-run."""

    def _format(self) -> str:
        return f"Failed to refresh token: {super()._format()}"


class StravaAPIError(StravaError):
    """Non-success response from the Strava REST API."""

    def _format(self) -> str:
        return f"Strava API error: {super()._format()}"


def message_from_response(response) -> str:
    """Extract the error message from a failed Strava response.

    Strava puts it in a JSON ``message`` field; fall back to the HTTP
    reason phrase when the body is missing or not JSON.
    """
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or f"HTTP {response.status_code}"
