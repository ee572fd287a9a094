"""Quarterly history summary tool."""

from time import perf_counter
from typing import Any

from valuation_mcp.data.payload import PayloadDecodeError, PayloadError, parse_payload
from valuation_mcp.engine.sanitizer import sanitize_analysis
from valuation_mcp.utils.frames import df_to_rows, quarterly_history_frame, trailing_totals
from valuation_mcp.utils.provenance import build_error_response, build_meta


async def quarterly_summary(payload: str) -> dict[str, Any]:
    """
    Summarize the quarterly history of a valuation response.

    Args:
        payload: Model response text

    Returns:
        Dict with quarterly rows, trailing-four-quarter totals, and the last
        fiscal year figures
    """
    start_time = perf_counter()

    try:
        record = sanitize_analysis(parse_payload(payload))
    except PayloadDecodeError as e:
        return build_error_response(error_type="invalid_payload", message=str(e))
    except PayloadError as e:
        return build_error_response(error_type="invalid_shape", message=str(e))

    deep_dive = record.deep_dive_metrics
    if deep_dive is None:
        return {
            "meta": build_meta("quarterly_summary", (perf_counter() - start_time) * 1000),
            "ticker": record.ticker,
            "quarters": [],
            "trailing": None,
            "fiscal_year": None,
        }

    df = quarterly_history_frame(deep_dive.quarterly_history)

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("quarterly_summary", duration_ms),
        "ticker": record.ticker,
        "quarters": df_to_rows(df),
        "trailing": trailing_totals(df) if not df.empty else None,
        "fiscal_year": {
            "label": deep_dive.last_fiscal_year_label,
            "revenue": deep_dive.last_fiscal_year_revenue,
            "net_income": deep_dive.last_fiscal_year_net_income,
        },
    }
