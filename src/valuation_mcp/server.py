"""Valuation normalization MCP server using FastMCP."""

import json
import logging
import os
from typing import Any

from fastmcp import FastMCP

from valuation_mcp import SCHEMA_VERSION, SERVER_VERSION
from valuation_mcp.tools import classify_investment, quarterly_summary, sanitize_valuation

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="valuation",
)


# ============================================================================
# TOOLS
# ============================================================================


@mcp.tool
async def sanitize_valuation_report(payload: str, sources: list[dict[str, Any]] | None = None) -> str:
    """
    Normalize a model-generated equity valuation report.

    Every numeric field is coerced to a finite number, percentages are put on
    a 0-100 scale, negative intrinsic values are floored, and a
    GREEN/ORANGE/RED decision is derived from margin of safety, ROIC vs WACC,
    and leverage.

    Args:
        payload: Model response text containing the report JSON
        sources: Optional citations as [{title, uri}] or grounding chunks

    Returns:
        JSON with the canonical record, decision, valuation status and snapshot hash
    """
    result = await sanitize_valuation(payload=payload, sources=sources)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_investment_decision(
    margin_of_safety: float | str,
    roic: float | str,
    wacc: float | str,
    net_debt_to_ebitda: float | str,
) -> str:
    """
    Classify an investment from its key ratios.

    GREEN: margin of safety >= 20%, ROIC > WACC, net debt/EBITDA <= 2.0x.
    RED: margin of safety < -10% or ROIC <= WACC.
    ORANGE: everything else.

    Args:
        margin_of_safety: Percent (21 or 0.21)
        roic: Return on invested capital, percent
        wacc: Weighted average cost of capital, percent
        net_debt_to_ebitda: Leverage multiple

    Returns:
        JSON with normalized inputs, per-rule checks and the decision color
    """
    result = await classify_investment(
        margin_of_safety=margin_of_safety,
        roic=roic,
        wacc=wacc,
        net_debt_to_ebitda=net_debt_to_ebitda,
    )
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_quarterly_summary(payload: str) -> str:
    """
    Summarize the quarterly results embedded in a valuation report.

    Args:
        payload: Model response text containing the report JSON

    Returns:
        JSON with quarterly rows, trailing-four-quarter totals and fiscal year figures
    """
    result = await quarterly_summary(payload=payload)
    return json.dumps(result, indent=2, default=str)


# ============================================================================
# ENTRY POINT
# ============================================================================


def main() -> None:
    """Run the MCP server."""
    logger.info(f"Starting Valuation MCP Server v{SERVER_VERSION} (schema v{SCHEMA_VERSION})")
    mcp.run()


if __name__ == "__main__":
    main()
