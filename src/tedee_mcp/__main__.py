"""
Entry point for running tedee_mcp as a module.

Usage:
    python -m tedee_mcp                    # Run with stdio transport
    python -m tedee_mcp --http             # Run with HTTP transport
    python -m tedee_mcp --http --port 9000 # Run HTTP on custom port
"""

import argparse
import os

from tedee_mcp import main as run_server


def main():
    parser = argparse.ArgumentParser(
        description="Tedee MCP Server - control Tedee smart locks via the Tedee cloud API"
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
        "--log-level",
        default=None,
        help="Logging level (default: TEDEE_LOG_LEVEL or INFO)"
    )

    args = parser.parse_args()

    if args.http:
        os.environ["MCP_TRANSPORT"] = "http"
        os.environ["MCP_HOST"] = args.host
        os.environ["MCP_PORT"] = str(args.port)
        print(f"Starting Tedee MCP server on http://{args.host}:{args.port}/mcp")
    else:
        os.environ["MCP_TRANSPORT"] = "stdio"
    if args.log_level:
        os.environ["TEDEE_LOG_LEVEL"] = args.log_level

    run_server()


if __name__ == "__main__":
    main()
