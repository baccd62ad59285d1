"""ABOUTME: Weather MCP server launcher.

Runs the weather server over the configured transport (stdio by default) and
keeps serving until the transport closes. Network transports bind to HOST/PORT,
0.0.0.0 by default so the server is reachable from other containers. A failure
to bring up the transport is logged and ends the process with exit status 1.
"""

import logging
import os
import sys

# Setup logging early
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

VALID_TRANSPORTS = ("stdio", "streamable-http", "sse")


def run_server(transport: str = "stdio", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the weather MCP server.

    Args:
        transport: Transport protocol ("stdio", "streamable-http", "sse")
        host: Host to bind to for network transports (default: 0.0.0.0 for Docker)
        port: Port to bind to for network transports (default: 8000)
    """
    if transport not in VALID_TRANSPORTS:
        logger.error(f"Unknown MCP transport: {transport}. Supported: {', '.join(VALID_TRANSPORTS)}")
        sys.exit(1)

    logger.info("Loading MCP server: weather")

    try:
        from weather import server as weather_server
        mcp_instance = weather_server.get_mcp()
    except ImportError as e:
        logger.error(f"Failed to import server module 'weather': {e}")
        sys.exit(1)

    if transport != "stdio":
        mcp_instance.settings.host = host
        mcp_instance.settings.port = port
        logger.info(f"Starting weather MCP server on {host}:{port} (transport: {transport})")
    else:
        logger.info("Weather MCP Server running on stdio")

    try:
        mcp_instance.run(transport=transport)
    except Exception as e:
        logger.error(f"Fatal error in weather MCP server: {e}", exc_info=True)
        sys.exit(1)


def main() -> None:
    """Console entry point; configuration comes from the environment."""
    transport = os.getenv("MCP_TRANSPORT", "stdio")
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    run_server(transport, host, port)


if __name__ == "__main__":
    main()
