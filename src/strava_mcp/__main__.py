"""
Entry point for running strava_mcp as a module.

Usage:
    python -m strava_mcp                    # Run with stdio transport
    python -m strava_mcp --http             # Run with HTTP transport
    python -m strava_mcp --http --port 9000 # Run HTTP on custom port
    python -m strava_mcp --env-file ~/.strava.env
"""

import argparse
import os

from strava_mcp import main as run_server
from strava_mcp.config import ENV_FILE_VAR


def main():
    parser = argparse.ArgumentParser(
        description="Strava MCP Server - Strava API tools over the Model Context Protocol"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Use http transport instead of stdio"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8081,
        help="Port for HTTP transport (default: 8081)"
    )
    parser.add_argument(
        "--env-file",
        help="Path to the .env file with Strava credentials (default: search from cwd)"
    )

    args = parser.parse_args()

    # Settings are read from the environment by strava_mcp.main
    if args.http:
        os.environ["MCP_TRANSPORT"] = "http"
        os.environ["MCP_HOST"] = args.host
        os.environ["MCP_PORT"] = str(args.port)
    else:
        os.environ["MCP_TRANSPORT"] = "stdio"
    if args.env_file:
        os.environ[ENV_FILE_VAR] = args.env_file

    run_server()


if __name__ == "__main__":
    main()
