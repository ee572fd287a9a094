"""Valuation tools."""

from valuation_mcp.tools.decision import classify_investment
from valuation_mcp.tools.quarterly import quarterly_summary
from valuation_mcp.tools.valuation import sanitize_valuation

__all__ = [
    "classify_investment",
    "quarterly_summary",
    "sanitize_valuation",
]
