"""Standalone decision classification tool."""

from time import perf_counter
from typing import Any

from valuation_mcp.engine.decision import (
    GREEN_MAX_NET_DEBT_TO_EBITDA,
    GREEN_MIN_MARGIN_OF_SAFETY,
    RED_MAX_MARGIN_OF_SAFETY,
    classify_decision,
    decision_checks,
)
from valuation_mcp.utils.numbers import NumericKind, clean_percentage
from valuation_mcp.utils.provenance import build_meta


async def classify_investment(
    margin_of_safety: Any,
    roic: Any,
    wacc: Any,
    net_debt_to_ebitda: Any,
) -> dict[str, Any]:
    """
    Classify raw decision inputs.

    Inputs are normalized first (percentages onto 0-100, leverage as a plain
    multiple), so fractional and string values are accepted.

    Returns:
        Dict with normalized inputs, per-rule checks, and the decision color
    """
    start_time = perf_counter()

    inputs = {
        "margin_of_safety": clean_percentage(margin_of_safety, NumericKind.LARGE_PERCENTAGE),
        "roic": clean_percentage(roic, NumericKind.LARGE_PERCENTAGE),
        "wacc": clean_percentage(wacc, NumericKind.LARGE_PERCENTAGE),
        "net_debt_to_ebitda": clean_percentage(net_debt_to_ebitda, NumericKind.PLAIN_NUMBER),
    }
    color = classify_decision(**inputs)

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("classify_investment", duration_ms),
        "inputs": inputs,
        "checks": decision_checks(**inputs),
        "thresholds": {
            "green_min_margin_of_safety": GREEN_MIN_MARGIN_OF_SAFETY,
            "green_max_net_debt_to_ebitda": GREEN_MAX_NET_DEBT_TO_EBITDA,
            "red_max_margin_of_safety": RED_MAX_MARGIN_OF_SAFETY,
        },
        "decision": color.value,
    }
