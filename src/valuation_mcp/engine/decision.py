"""Decision classification from normalized ratios.

All inputs are on the canonical scale: margin of safety, ROIC and WACC in
percent (0-100), net debt / EBITDA as a plain multiple.
"""

from __future__ import annotations

import logging
import operator
from enum import Enum
from typing import Any

from valuation_mcp.models import DecisionColor
from valuation_mcp.utils.validators import check_rule, check_rule_expr

logger = logging.getLogger(__name__)

# GREEN: MOS >= 20%, ROIC > WACC, NetDebt/EBITDA <= 2.0x
GREEN_MIN_MARGIN_OF_SAFETY = 20.0
GREEN_MAX_NET_DEBT_TO_EBITDA = 2.0
# RED: MOS < -10% or ROIC <= WACC
RED_MAX_MARGIN_OF_SAFETY = -10.0

# Base Case upside beyond +/- this band moves the valuation status off "fair"
VALUATION_STATUS_BAND = 15.0


class ValuationStatus(str, Enum):
    UNDERVALUED = "UNDERVALUED"
    FAIRLY_VALUED = "FAIRLY_VALUED"
    OVERVALUED = "OVERVALUED"


def decision_checks(
    margin_of_safety: float,
    roic: float,
    wacc: float,
    net_debt_to_ebitda: float,
) -> dict[str, bool | None]:
    """Evaluate each decision rule on its own."""
    return {
        "mos_at_least_green": check_rule(
            margin_of_safety, GREEN_MIN_MARGIN_OF_SAFETY, operator.ge
        ),
        "mos_below_red": check_rule(margin_of_safety, RED_MAX_MARGIN_OF_SAFETY, operator.lt),
        "roic_above_wacc": check_rule_expr(roic, wacc, operator.gt),
        "leverage_within_green": check_rule(
            net_debt_to_ebitda, GREEN_MAX_NET_DEBT_TO_EBITDA, operator.le
        ),
    }


def classify_decision(
    margin_of_safety: float,
    roic: float,
    wacc: float,
    net_debt_to_ebitda: float,
) -> DecisionColor:
    """
    Classify an investment as GREEN, ORANGE, or RED.

    RED wins whenever ROIC <= WACC, regardless of margin of safety: value
    destroying returns override an attractive price.

    Args:
        margin_of_safety: Percent by which intrinsic value exceeds price
        roic: Return on invested capital, percent
        wacc: Weighted average cost of capital, percent
        net_debt_to_ebitda: Leverage multiple

    Returns:
        DecisionColor
    """
    checks = decision_checks(margin_of_safety, roic, wacc, net_debt_to_ebitda)

    if checks["mos_below_red"] or not checks["roic_above_wacc"]:
        return DecisionColor.RED
    if checks["mos_at_least_green"] and checks["leverage_within_green"]:
        return DecisionColor.GREEN
    return DecisionColor.ORANGE


def classify_valuation_status(upside_downside: float) -> ValuationStatus:
    """Status of price vs. Base Case intrinsic value from the upside percent."""
    if upside_downside > VALUATION_STATUS_BAND:
        return ValuationStatus.UNDERVALUED
    if upside_downside < -VALUATION_STATUS_BAND:
        return ValuationStatus.OVERVALUED
    return ValuationStatus.FAIRLY_VALUED


def is_value_creating(roic: float, wacc: float) -> bool:
    return roic > wacc


def reconcile_reported_color(derived: DecisionColor, reported: Any) -> None:
    """Log when the source's own verdict disagrees with the derived one."""
    if not reported:
        return
    if str(reported).upper().strip() != derived.value:
        logger.warning(
            f"Reported decision color {reported!r} disagrees with derived "
            f"{derived.value}; using derived"
        )
