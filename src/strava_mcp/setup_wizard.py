"""
Interactive OAuth setup for the Strava MCP server.

Walks through creating the .env file: client id/secret, scope choice,
browser authorization and the code exchange.

Usage:
    strava-mcp-setup
    strava-mcp-setup --env-file ~/.strava.env
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, Optional

from dotenv import dotenv_values

from strava_mcp.authorization import extract_code
from strava_mcp.sdk.auth import TokenStore
from strava_mcp.sdk.errors import AuthExchangeError
from strava_mcp.sdk.types import Scope

REDIRECT_URI = "http://localhost"
RULE = "=" * 60

SCOPE_CHOICES = {
    "1": ("Minimal permissions", Scope.MINIMAL),
    "2": ("Read-only (full) permissions", Scope.READ_ONLY),
    "3": ("Read + Write permissions", Scope.READ_WRITE),
}


def choose_scope(choice: str) -> Scope:
    """Map the menu answer to a scope; anything unknown falls back to minimal."""
    label, scope = SCOPE_CHOICES.get(choice.strip(), (None, None))
    if scope is None:
        print("Invalid choice. Defaulting to Minimal permissions.")
        return Scope.MINIMAL
    print(f"✓ Selected: {label}")
    return scope


def load_existing_env(env_path: Path) -> Dict[str, str]:
    """Read an existing .env file, or return {} when there is none."""
    if not env_path.exists():
        return {}
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def write_env_file(env_path: Path, env: Dict[str, str]) -> None:
    """Write the Strava .env file."""
    lines = [
        "# Strava API Credentials",
        "# Get these from: https://www.strava.com/settings/api",
        f"STRAVA_CLIENT_ID={env['STRAVA_CLIENT_ID']}",
        f"STRAVA_CLIENT_SECRET={env['STRAVA_CLIENT_SECRET']}",
        "",
        "# OAuth Tokens",
        "# These are obtained after completing the OAuth flow and refreshed automatically",
        f"STRAVA_ACCESS_TOKEN={env['STRAVA_ACCESS_TOKEN']}",
        f"STRAVA_REFRESH_TOKEN={env['STRAVA_REFRESH_TOKEN']}",
        f"STRAVA_EXPIRES_AT={env['STRAVA_EXPIRES_AT']}",
        "",
        "# OAuth Scope (for reference)",
        f"# STRAVA_SCOPE={env.get('STRAVA_SCOPE') or Scope.READ_ONLY.value}",
        "",
    ]
    env_path.write_text("\n".join(lines), encoding="utf-8")


def _ask_value(prompt: Callable[[str], str], existing: Optional[str], label: str, secret: bool = False) -> str:
    if not existing:
        return prompt(f"Enter your Strava {label}: ").strip()

    shown = "********" if secret else existing
    print(f"Using existing {label}: {shown}")
    if prompt(f"Keep this {label}? (y/n): ").strip().lower() != "y":
        return prompt(f"Enter your Strava {label}: ").strip()
    return existing


def run_setup(
    env_path: Path,
    prompt: Callable[[str], str] = input,
    store_factory: Callable[[str, str], TokenStore] = TokenStore,
) -> int:
    """
    Run the interactive setup.

    Args:
        env_path: .env file to read defaults from and write to
        prompt: Reads one answer from the user
        store_factory: Builds the TokenStore used for the exchange

    Returns:
        Process exit code (0 on success)
    """
    print(RULE)
    print("Strava MCP Server - OAuth Setup")
    print(RULE)
    print()

    existing = load_existing_env(env_path)

    if not existing.get("STRAVA_CLIENT_ID"):
        print("First, you need to create a Strava application:")
        print("1. Visit: https://www.strava.com/settings/api")
        print("2. Create a new application")
        print('3. For "Authorization Callback Domain" use: localhost')
        print()
    client_id = _ask_value(prompt, existing.get("STRAVA_CLIENT_ID"), "Client ID")
    client_secret = _ask_value(prompt, existing.get("STRAVA_CLIENT_SECRET"), "Client Secret", secret=True)

    print()
    print(RULE)
    print("Permission Scope Selection")
    print(RULE)
    print()
    print("1. Minimal (recommended for troubleshooting)")
    print(f"   Scope: {Scope.MINIMAL.value}")
    print("2. Read-only (full)")
    print("   - View all activities, athlete data, routes, segments, clubs, gear")
    print(f"   Scope: {Scope.READ_ONLY.value}")
    print("3. Read + Write")
    print("   - Everything in Read-only, plus create, update and delete activities")
    print(f"   Scope: {Scope.READ_WRITE.value}")
    print()
    scope = choose_scope(prompt("Enter your choice (1, 2, or 3): "))

    store = store_factory(client_id, client_secret)
    auth_url = store.build_authorization_url(REDIRECT_URI, scope.value, approval_prompt="auto")

    print()
    print(RULE)
    print("OAuth Authorization")
    print(RULE)
    print()
    print("Make sure your Strava app Authorization Callback Domain is localhost.")
    print()
    print("Step 1: Visit this URL in your browser:")
    print()
    print(auth_url)
    print()
    print("Step 2: Authorize the application")
    print("Step 3: You will be redirected to a URL like:")
    print(f"{REDIRECT_URI}/?state=&code=XXXXXX&scope=...")
    print("The page will not load - copy the URL from the address bar.")
    print()

    answer = prompt("Paste the redirect URL or the authorization code: ")
    print()
    print("Exchanging authorization code for tokens...")

    try:
        credential = store.exchange_code_for_credential(extract_code(answer))
    except (AuthExchangeError, ValueError) as e:
        print(file=sys.stderr)
        print("✗ Failed to exchange token:", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print(file=sys.stderr)
        print("Please check:", file=sys.stderr)
        print("- Your Client ID and Secret are correct", file=sys.stderr)
        print("- The authorization code is valid (they expire quickly!)", file=sys.stderr)
        print("- You copied the entire code from the URL", file=sys.stderr)
        return 1

    write_env_file(env_path, {
        "STRAVA_CLIENT_ID": client_id,
        "STRAVA_CLIENT_SECRET": client_secret,
        "STRAVA_ACCESS_TOKEN": credential.access_token,
        "STRAVA_REFRESH_TOKEN": credential.refresh_token,
        "STRAVA_EXPIRES_AT": str(credential.expires_at),
        "STRAVA_SCOPE": scope.value,
    })

    print()
    print("✓ Successfully obtained tokens!")
    print(f"✓ Credentials saved to: {env_path}")
    print()
    print(RULE)
    print("Setup Complete!")
    print(RULE)
    print("Start the server with: strava-mcp (or python -m strava_mcp)")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Strava MCP Server - OAuth setup")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Where to write the credentials (default: ./.env)"
    )
    args = parser.parse_args()

    try:
        code = run_setup(Path(args.env_file))
    except (KeyboardInterrupt, EOFError):
        print("\nSetup cancelled.", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
