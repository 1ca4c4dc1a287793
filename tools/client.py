# =============================================================================
# tools/client.py  —  MCP smoke-test client
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Connects to an MCP server, lists its tools, and makes one sample call:
#
#     math server  →  add(a=1, b=2)                  expect 3
#     zoo server   →  get_animals_by_species(lion)   expect the lions
#
#   Run it after every deploy to prove the service is reachable, that IAM
#   lets you in, and that the tools answer.
#
# USAGE:
#   python -m tools.client                              # http://localhost:8080/mcp
#   python -m tools.client https://zoo-...a.run.app/mcp # deployed, with ID token
#
#   Against localhost no token is sent, which is what you want both for a
#   local server and for `gcloud run services proxy` (the proxy adds your
#   credentials itself).
# =============================================================================

import asyncio
import logging
import sys
from typing import Any

from dotenv import load_dotenv
from fastmcp import Client, FastMCP
from fastmcp.client.transports import StreamableHttpTransport

from core.auth import bearer_headers
from core.config import is_local_url

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8080/mcp"

# Tool to exercise for each kind of server, in order of preference.
_SAMPLE_CALLS: list[tuple[str, dict[str, Any]]] = [
    ("add", {"a": 1, "b": 2}),
    ("get_animals_by_species", {"species": "lion"}),
]


def _make_client(target: str | FastMCP, headers: dict[str, str] | None) -> Client:
    # A FastMCP instance is connected in-memory; tests use this.
    if isinstance(target, FastMCP):
        return Client(target)
    return Client(StreamableHttpTransport(target, headers=headers or {}))


async def check_server(
    target: str | FastMCP,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """List the server's tools and make one sample call.

    Returns:
        A dict with:
          - tools: Sorted tool names the server advertises
          - call: The sample tool that was called (None if none matched)
          - arguments: Arguments passed to it
          - result: The tool's structured result
    """
    async with _make_client(target, headers) as client:
        tools = await client.list_tools()
        names = sorted(tool.name for tool in tools)
        report: dict[str, Any] = {
            "tools": names,
            "call": None,
            "arguments": None,
            "result": None,
        }

        for tool_name, arguments in _SAMPLE_CALLS:
            if tool_name in names:
                result = await client.call_tool(tool_name, arguments)
                report.update(call=tool_name, arguments=arguments, result=result.data)
                break
        return report


def _print_report(url: str, report: dict[str, Any]) -> None:
    print(f"Connected to {url}")
    print(f"  Tools: {', '.join(report['tools']) or '(none)'}")
    if report["call"] is None:
        print("  No sample tool to call.")
        return
    args = ", ".join(f"{k}={v!r}" for k, v in report["arguments"].items())
    print(f"  {report['call']}({args}) -> {report['result']!r}")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    args = sys.argv[1:] if argv is None else argv
    url = args[0] if args else DEFAULT_URL
    headers = None if is_local_url(url) else bearer_headers(url)

    report = asyncio.run(check_server(url, headers))
    _print_report(url, report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
