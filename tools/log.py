# =============================================================================
# tools/log.py  —  Shared logging & startup for the MCP servers
# =============================================================================
#
# Both servers (math_server.py, zoo_server.py) log the same way and start
# the same way, so that code lives here.
#
# LOGGING TO STDERR:
#   With the stdio transport, STDOUT *is* the MCP message stream.  A stray
#   log line on stdout corrupts the JSON-RPC framing and the client drops
#   the connection.  STDERR is always safe, and on Cloud Run everything
#   written to stderr ends up in Cloud Logging anyway.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status messages
# =============================================================================

import asyncio
import json
import logging
import sys

from fastmcp import FastMCP

from core.config import ServerSettings

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("mcp.tools")


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}>>> Tool: '{tool_name}' called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result):
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'))}{_RESET}"
    )
    return result


def run_server(mcp: FastMCP, settings: ServerSettings) -> None:
    """Run `mcp` over the transport described by `settings`.

    Blocks until the server stops.
    """
    if settings.transport == "stdio":
        logger.info(f"MCP server '{mcp.name}' started on stdio")
        asyncio.run(mcp.run_async(transport="stdio"))
        return

    logger.info(
        f"MCP server '{mcp.name}' started on port {settings.port} "
        f"({settings.transport}, path {settings.path})"
    )
    asyncio.run(
        mcp.run_async(
            transport=settings.transport,
            host=settings.host,
            port=settings.port,
            path=settings.path,
        )
    )
