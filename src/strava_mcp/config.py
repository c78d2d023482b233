"""
Configuration for the Strava MCP server.

Settings come from the process environment, optionally seeded from a
.env file (written by strava-mcp-setup). Values already present in the
environment win over the file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from strava_mcp.sdk.types import API_URL, AUTHORIZE_URL, TOKEN_URL

logger = logging.getLogger(__name__)

ENV_FILE_VAR = "STRAVA_ENV_FILE"

TOKEN_VARS = ("STRAVA_ACCESS_TOKEN", "STRAVA_REFRESH_TOKEN", "STRAVA_EXPIRES_AT")


class ConfigError(ValueError):
    """Required configuration is missing or malformed."""


@dataclass
class Settings:
    client_id: str
    client_secret: str
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[int] = None
    api_url: str = API_URL
    authorize_url: str = AUTHORIZE_URL
    token_url: str = TOKEN_URL
    env_file: Optional[Path] = None
    persist_tokens: bool = True
    transport: str = "stdio"
    host: str = "0.0.0.0"
    port: int = 8081
    log_level: str = "INFO"

    @property
    def has_tokens(self) -> bool:
        return bool(self.access_token and self.refresh_token and self.expires_at is not None)


def resolve_env_file(env_file: Optional[str] = None) -> Optional[Path]:
    """Locate the .env file: explicit path, then $STRAVA_ENV_FILE, then search from cwd."""
    candidate = env_file or os.environ.get(ENV_FILE_VAR) or find_dotenv(usecwd=True)
    if not candidate:
        return None
    return Path(candidate)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment (and .env file if present).

    Args:
        env_file: Explicit path to a .env file

    Returns:
        Settings

    Raises:
        ConfigError: If the client id/secret are missing or STRAVA_EXPIRES_AT
            is not an integer
    """
    path = resolve_env_file(env_file)
    if path is not None and path.exists():
        load_dotenv(path, override=False)

    client_id = os.environ.get("STRAVA_CLIENT_ID", "").strip()
    client_secret = os.environ.get("STRAVA_CLIENT_SECRET", "").strip()
    missing = [
        name for name, value in (
            ("STRAVA_CLIENT_ID", client_id),
            ("STRAVA_CLIENT_SECRET", client_secret),
        )
        if not value
    ]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    settings = Settings(
        client_id=client_id,
        client_secret=client_secret,
        api_url=os.environ.get("STRAVA_API_URL", API_URL),
        authorize_url=os.environ.get("STRAVA_AUTHORIZE_URL", AUTHORIZE_URL),
        token_url=os.environ.get("STRAVA_TOKEN_URL", TOKEN_URL),
        env_file=path,
        persist_tokens=_parse_bool(os.environ.get("STRAVA_PERSIST_TOKENS", "true")),
        transport=os.environ.get("MCP_TRANSPORT", "stdio"),
        host=os.environ.get("MCP_HOST", "0.0.0.0"),
        port=int(os.environ.get("MCP_PORT", "8081")),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )

    present = [name for name in TOKEN_VARS if os.environ.get(name)]
    if len(present) == len(TOKEN_VARS):
        raw_expires_at = os.environ["STRAVA_EXPIRES_AT"]
        try:
            settings.expires_at = int(raw_expires_at)
        except ValueError:
            raise ConfigError(f"STRAVA_EXPIRES_AT must be a Unix timestamp, got {raw_expires_at!r}")
        settings.access_token = os.environ["STRAVA_ACCESS_TOKEN"]
        settings.refresh_token = os.environ["STRAVA_REFRESH_TOKEN"]
    elif present:
        logger.warning(
            "Ignoring partial Strava tokens (%s set, need all of %s)",
            ", ".join(present), ", ".join(TOKEN_VARS),
        )

    return settings
