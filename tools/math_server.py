# =============================================================================
# tools/math_server.py  —  FastMCP arithmetic server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes core/arithmetic.py as two MCP tools, `add` and `subtract`.
#   This is the smallest useful remote MCP server: deploy it, point a
#   client at https://<service-url>/mcp, call add(1, 2), get 3.
#
# RUNNING THIS SERVER:
#   Locally:     python -m tools.math_server          (http://0.0.0.0:8080/mcp)
#   Cloud Run:   python deploy.py deploy math-mcp-server
#                (Dockerfile CMD with SERVER_MODULE=tools.math_server)
#
#   The port comes from $PORT, which Cloud Run always sets.
# =============================================================================

from dotenv import load_dotenv
from fastmcp import FastMCP

from core import arithmetic
from core.config import load_server_settings
from tools.log import _log_request, _log_response, configure_logging, run_server

mcp = FastMCP("MCP Server on Cloud Run")


@mcp.tool()
def add(a: int, b: int) -> int:
    """Use this to add two numbers together.

    Args:
        a: The first number.
        b: The second number.

    Returns:
        The sum of the two numbers.
    """
    _log_request("add", a=a, b=b)
    return _log_response("add", arithmetic.add(a, b))


@mcp.tool()
def subtract(a: int, b: int) -> int:
    """Use this to subtract two numbers.

    Args:
        a: The number to subtract from.
        b: The number to subtract.

    Returns:
        The difference of the two numbers (a - b).
    """
    _log_request("subtract", a=a, b=b)
    return _log_response("subtract", arithmetic.subtract(a, b))


def main() -> None:
    load_dotenv()
    configure_logging()
    run_server(mcp, load_server_settings())


if __name__ == "__main__":
    main()
