"""
Strava OAuth token store.

Owns the single Credential of a process, refreshes it on demand and
performs the authorization-code exchange used by the onboarding flow.
"""

import logging
import threading
import time
from typing import Callable, Optional, Tuple
from urllib.parse import urlencode

import requests

from strava_mcp.sdk.errors import (
    AuthExchangeError,
    AuthRefreshError,
    NoCredentialError,
    message_from_response,
)
from strava_mcp.sdk.types import (
    AUTHORIZE_URL,
    DEFAULT_SCOPE,
    REFRESH_SKEW_SECONDS,
    TOKEN_URL,
    Credential,
    GrantType,
)

logger = logging.getLogger(__name__)


class TokenStore:
    """
    Holds the Strava credential and hands out valid access tokens.

    All state changes go through ``_lock``. The refresh network call is made
    while holding it, so concurrent callers that find an expiring token wait
    for the first refresh instead of sending their own.

    A rejected refresh is remembered against the credential it was sent for.
    Until a new credential is installed (``set_credential`` or a code
    exchange), later refreshes of that credential raise the same error
    without another request. The update listener runs under the lock, so
    persisted credentials are written in the order they were installed.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        session: Optional[requests.Session] = None,
        token_url: str = TOKEN_URL,
        authorize_url: str = AUTHORIZE_URL,
        clock: Callable[[], float] = time.time,
        on_update: Optional[Callable[[Credential], None]] = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._session = session or requests.Session()
        self._token_url = token_url
        self._authorize_url = authorize_url
        self._clock = clock
        self._on_update = on_update
        self._credential: Optional[Credential] = None
        self._failed_refresh: Optional[Tuple[Credential, AuthRefreshError]] = None
        self._lock = threading.Lock()

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def credential(self) -> Optional[Credential]:
        """Currently installed credential (read-only snapshot)."""
        return self._credential

    def set_credential(self, access_token: str, refresh_token: str, expires_at: int) -> Credential:
        """Install a credential from previously persisted values. No network call."""
        credential = Credential(access_token, refresh_token, int(expires_at))
        with self._lock:
            self._install(credential)
        return credential

    def has_credential(self) -> bool:
        return self._credential is not None

    def build_authorization_url(
        self,
        redirect_uri: str,
        scope: str = DEFAULT_SCOPE,
        approval_prompt: Optional[str] = None,
    ) -> str:
        """
        Build the consent URL the user opens in a browser.

        Args:
            redirect_uri: Where Strava sends the user back with ?code=
            scope: Comma-joined permission identifiers
            approval_prompt: "auto" or "force" (omitted when None)

        Returns:
            Absolute authorization URL
        """
        params = {
            "client_id": self._client_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": scope,
        }
        if approval_prompt:
            params["approval_prompt"] = approval_prompt
        return f"{self._authorize_url}?{urlencode(params, safe=',:')}"

    def exchange_code_for_credential(self, code: str) -> Credential:
        """
        Exchange an authorization code for tokens and install them.

        Raises:
            AuthExchangeError: If Strava rejects the code or is unreachable.
                The installed credential is left as it was.
        """
        with self._lock:
            credential = self._post_token_request(
                {"code": code, "grant_type": GrantType.AUTHORIZATION_CODE.value},
                AuthExchangeError,
            )
            self._install(credential)
            logger.info("Authorization code exchanged, token expires at %s", credential.expires_at)
            self._notify(credential)
        return credential

    def refresh_credential(self) -> Credential:
        """
        Exchange the refresh token for a new credential.

        Raises:
            NoCredentialError: If nothing is installed (no request is sent).
            AuthRefreshError: If the refresh is rejected, now or on an
                earlier attempt for the installed credential. The previous
                credential stays installed, unchanged.
        """
        with self._lock:
            return self._refresh_locked()

    def get_valid_access_token(self) -> str:
        """
        Return an access token that will not expire within the skew window.

        Refreshes synchronously when the installed token expires within
        REFRESH_SKEW_SECONDS.

        Raises:
            NoCredentialError: If nothing is installed.
            AuthRefreshError: If a needed refresh is rejected.
        """
        with self._lock:
            credential = self._require_credential()
            if credential.expires_within(self._clock(), REFRESH_SKEW_SECONDS):
                logger.info("Access token expires at %s, refreshing", credential.expires_at)
                credential = self._refresh_locked()
        return credential.access_token

    # ── Internals ────────────────────────────────────────────────────────

    def _require_credential(self) -> Credential:
        if self._credential is None:
            raise NoCredentialError()
        return self._credential

    def _install(self, credential: Credential) -> None:
        self._credential = credential
        self._failed_refresh = None

    def _refresh_locked(self) -> Credential:
        current = self._require_credential()
        if self._failed_refresh is not None and self._failed_refresh[0] is current:
            raise self._failed_refresh[1]

        try:
            credential = self._post_token_request(
                {"refresh_token": current.refresh_token, "grant_type": GrantType.REFRESH_TOKEN.value},
                AuthRefreshError,
            )
        except AuthRefreshError as e:
            self._failed_refresh = (current, e)
            raise

        self._install(credential)
        logger.info("Access token refreshed, expires at %s", credential.expires_at)
        self._notify(credential)
        return credential

    def _post_token_request(self, grant: dict, error_cls) -> Credential:
        body = {
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            **grant,
        }
        try:
            response = self._session.post(
                self._token_url,
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except requests.RequestException as e:
            logger.error("Token request (%s) failed: %s", grant["grant_type"], e)
            raise error_cls(str(e)) from e

        if not response.ok:
            message = message_from_response(response)
            logger.error(
                "Token request (%s) rejected: %s (%s)",
                grant["grant_type"], message, response.status_code,
            )
            raise error_cls(message, response.status_code)

        try:
            return Credential.from_token_response(response.json())
        except (KeyError, TypeError, ValueError) as e:
            raise error_cls(f"Malformed token response: {e!r}", response.status_code) from e

    def _notify(self, credential: Credential) -> None:
        if self._on_update is None:
            return
        try:
            self._on_update(credential)
        except Exception as e:
            logger.error(f"Failed to persist Strava tokens: {e}")
