"""
Strava OAuth authorization flow.

Provides the ExchangeResult interface used by the auth tools, and the
code extraction shared with the setup wizard.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlparse

from strava_mcp.sdk.auth import TokenStore
from strava_mcp.sdk.errors import AuthExchangeError


@dataclass
class ExchangeResult:
    """Result of an authorization code exchange."""
    success: bool
    expires_at: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    details: Optional[dict] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, excluding None values."""
        result = {"success": self.success}
        if self.success:
            result["expires_at"] = self.expires_at
            result["message"] = "Strava authorization complete"
        else:
            if self.error:
                result["error"] = self.error
            if self.error_code:
                result["error_code"] = self.error_code
            if self.details:
                result["details"] = self.details
        return result


def extract_code(value: str) -> str:
    """
    Get the authorization code from user input.

    Accepts either the bare code or the whole redirect URL
    (http://localhost/?state=&code=XXXX&scope=...).

    Raises:
        ValueError: If the input is empty or the URL carries no code
    """
    value = value.strip()
    if not value:
        raise ValueError("Authorization code is empty")
    if "code=" not in value:
        return value

    query = urlparse(value).query or value.split("?", 1)[-1]
    codes = parse_qs(query).get("code")
    if not codes or not codes[0]:
        raise ValueError("No authorization code found in the redirect URL")
    return codes[0]


def exchange_code(store: TokenStore, code: str) -> ExchangeResult:
    """
    Exchange an authorization code and install the resulting tokens.

    Args:
        store: TokenStore to install the credential into
        code: Authorization code or full redirect URL

    Returns:
        ExchangeResult with the new expiry if successful, error details if not
    """
    try:
        credential = store.exchange_code_for_credential(extract_code(code))
        return ExchangeResult(success=True, expires_at=credential.expires_at)

    except ValueError as e:
        return ExchangeResult(
            success=False,
            error=str(e),
            error_code="INVALID_CODE",
            details={
                "solution": "Paste the value of the code= parameter from the redirect URL, or the whole URL",
            },
        )

    except AuthExchangeError as e:
        if e.status_code in (400, 401):
            return ExchangeResult(
                success=False,
                error=f"Strava rejected the authorization code: {e.message}",
                error_code="EXCHANGE_REJECTED",
                details={
                    "status_code": e.status_code,
                    "solution": "Authorization codes are single use and expire quickly:\n  • Open the authorization URL again\n  • Approve access and copy the new code\n  • Check the client id and secret match your Strava API application",
                },
            )
        return ExchangeResult(
            success=False,
            error=str(e),
            error_code="EXCHANGE_ERROR",
            details={"status_code": e.status_code} if e.status_code else None,
        )
