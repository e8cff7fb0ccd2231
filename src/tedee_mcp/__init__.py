"""
MCP Server for Tedee smart locks

Provides tools to list Tedee locks, read their state and activity, and
open/close/pull-spring them via the Model Context Protocol (MCP).

Credentials and retry settings are read from the environment
(see tedee_mcp.sdk.config).

Supports two transport modes:
- stdio: For local usage (default)
- http: For HTTP server deployment
"""

import logging
import os

from fastmcp import FastMCP

from tedee_mcp import locks


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("Tedee Locks v1.0")

    app = locks.register_tools(app)

    return app


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    - TEDEE_LOG_LEVEL: Logging level (default: 'INFO')
    """
    logging.basicConfig(level=os.environ.get("TEDEE_LOG_LEVEL", "INFO").upper())

    app = create_app()

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()
