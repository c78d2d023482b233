"""
Client factory for Strava MCP server.

Builds the process-wide TokenStore and StravaClient from Settings and
wires token persistence.

Token Persistence:
- Strava rotates refresh tokens, so a refreshed credential must outlive the process
- Solution: after every exchange/refresh the new triple is written back to
  the .env file the server was started from
"""

import logging
from functools import partial
from pathlib import Path

from dotenv import set_key

from strava_mcp.config import Settings
from strava_mcp.sdk.auth import TokenStore
from strava_mcp.sdk.client import StravaClient
from strava_mcp.sdk.types import Credential

logger = logging.getLogger(__name__)


def save_tokens(env_file: Path, credential: Credential) -> None:
    """
    Write a credential into a .env file.

    Only the three token variables are touched; other keys and comments
    in the file are kept.

    Args:
        env_file: Path to the .env file (created if missing)
        credential: Credential to store
    """
    env_file.touch(exist_ok=True)
    set_key(str(env_file), "STRAVA_ACCESS_TOKEN", credential.access_token, quote_mode="never")
    set_key(str(env_file), "STRAVA_REFRESH_TOKEN", credential.refresh_token, quote_mode="never")
    set_key(str(env_file), "STRAVA_EXPIRES_AT", str(credential.expires_at), quote_mode="never")
    logger.info(f"Saved Strava tokens to {env_file}")


def create_token_store(settings: Settings) -> TokenStore:
    """
    Create a TokenStore from settings.

    Installs the bootstrapped credential when all three token values are
    configured; otherwise the store starts unauthenticated.

    Args:
        settings: Loaded Settings

    Returns:
        TokenStore instance
    """
    on_update = None
    if settings.persist_tokens and settings.env_file is not None:
        on_update = partial(save_tokens, settings.env_file)

    store = TokenStore(
        settings.client_id,
        settings.client_secret,
        token_url=settings.token_url,
        authorize_url=settings.authorize_url,
        on_update=on_update,
    )

    if settings.has_tokens:
        store.set_credential(settings.access_token, settings.refresh_token, settings.expires_at)
    else:
        logger.warning(
            "No Strava tokens configured. Run strava-mcp-setup, or use the "
            "get_authorization_url and exchange_authorization_code tools."
        )

    return store


def create_client(settings: Settings) -> StravaClient:
    """
    Create the Strava API client used by every tool module.

    Args:
        settings: Loaded Settings

    Returns:
        StravaClient backed by a fresh TokenStore
    """
    return StravaClient(create_token_store(settings), api_url=settings.api_url)
