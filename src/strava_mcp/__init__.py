"""
Modular MCP Server for the Strava API

Provides tools to read and manage Strava activities, athlete profile,
routes, segments, clubs and gear via the Model Context Protocol (MCP).

OAuth tokens are refreshed on demand by the SDK token store.

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For HTTP server deployment
"""

import logging
import sys

from fastmcp import FastMCP

from strava_mcp import auth_tool
from strava_mcp import activities
from strava_mcp import athlete
from strava_mcp import routes
from strava_mcp import segments
from strava_mcp import clubs
from strava_mcp import gear
from strava_mcp.client_factory import create_client
from strava_mcp.config import ConfigError, load_settings
from strava_mcp.sdk.client import StravaClient

logger = logging.getLogger(__name__)

TOOL_MODULES = (auth_tool, activities, athlete, routes, segments, clubs, gear)


def create_app(client: StravaClient) -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("strava-mcp")

    for module in TOOL_MODULES:
        app = module.register_tools(app, client)

    return app


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - STRAVA_CLIENT_ID / STRAVA_CLIENT_SECRET: Strava API application (required)
    - STRAVA_ACCESS_TOKEN / STRAVA_REFRESH_TOKEN / STRAVA_EXPIRES_AT: saved tokens
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    - LOG_LEVEL: Logging level (default: INFO)
    """
    try:
        settings = load_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"{e}. Run strava-mcp-setup to create a .env file.")
        sys.exit(1)

    # stdio transport owns stdout, logs go to stderr
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    app = create_app(create_client(settings))

    if settings.transport == "http":
        logger.info(f"Starting Strava MCP server on http://{settings.host}:{settings.port}/mcp")
        app.run(transport="http", host=settings.host, port=settings.port)
    else:
        app.run()


if __name__ == "__main__":
    main()
