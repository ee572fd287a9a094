"""Tests for the MCP tool registrations."""

import asyncio

from fastmcp import Client

from valuation_mcp.server import mcp


def _list_tools() -> dict:
    async def _list() -> dict:
        async with Client(mcp) as client:
            return {tool.name: tool for tool in await client.list_tools()}

    return asyncio.run(_list())


class TestToolRegistration:
    """Tests for the tools exposed by the server."""

    def test_registered_names(self) -> None:
        assert set(_list_tools()) == {
            "sanitize_valuation_report",
            "get_investment_decision",
            "get_quarterly_summary",
        }

    def test_sanitize_parameters(self) -> None:
        schema = _list_tools()["sanitize_valuation_report"].inputSchema
        assert set(schema["properties"]) == {"payload", "sources"}
        assert schema["required"] == ["payload"]

    def test_decision_parameters(self) -> None:
        schema = _list_tools()["get_investment_decision"].inputSchema
        assert set(schema["properties"]) == {
            "margin_of_safety",
            "roic",
            "wacc",
            "net_debt_to_ebitda",
        }
