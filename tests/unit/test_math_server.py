"""Tests for the math MCP server, through an in-memory FastMCP client."""

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from tools.math_server import mcp


class TestMathServer:
    """Test the tools the math server exposes."""

    @pytest.mark.asyncio
    async def test_lists_add_and_subtract(self):
        async with Client(mcp) as client:
            tools = await client.list_tools()
        assert sorted(tool.name for tool in tools) == ["add", "subtract"]

    @pytest.mark.asyncio
    async def test_add(self):
        async with Client(mcp) as client:
            result = await client.call_tool("add", {"a": 1, "b": 2})
        assert result.data == 3

    @pytest.mark.asyncio
    async def test_subtract(self):
        async with Client(mcp) as client:
            result = await client.call_tool("subtract", {"a": 10, "b": 4})
        assert result.data == 6

    @pytest.mark.asyncio
    async def test_both_operands_required(self):
        async with Client(mcp) as client:
            with pytest.raises(ToolError):
                await client.call_tool("add", {"a": 1})

    @pytest.mark.asyncio
    async def test_rejects_text_argument(self):
        async with Client(mcp) as client:
            with pytest.raises(ToolError):
                await client.call_tool("add", {"a": "one", "b": 2})
