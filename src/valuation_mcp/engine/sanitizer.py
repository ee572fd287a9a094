"""Schema-driven sanitization of raw valuation payloads.

Walks the static field tables, normalizes every numeric field according to
its declared kind, applies the intrinsic value floor, and derives the
decision verdict. Missing or malformed scalars degrade to 0; structural
problems (no scenarios, payload not an object) raise PayloadShapeError.
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from typing import Any

from valuation_mcp.data.payload import PayloadShapeError
from valuation_mcp.engine.decision import classify_decision, reconcile_reported_color
from valuation_mcp.engine.fields import (
    DEEP_DIVE_FIELDS,
    DEEP_DIVE_KEY,
    DEEP_DIVE_TEXT,
    QUARTER_FIELDS,
    QUARTER_TEXT,
    QUARTERLY_HISTORY_KEY,
    SCENARIO_FIELDS,
    SCENARIO_TEXT,
    SCENARIOS_KEY,
    THESIS_FIELDS,
    THESIS_KEY,
    THESIS_TEXT,
    THESIS_TEXT_LISTS,
    TOP_LEVEL_FIELDS,
    TOP_LEVEL_TEXT,
    FieldTable,
)
from valuation_mcp.models import (
    CanonicalRecord,
    DeepDiveMetrics,
    InvestmentThesis,
    ScenarioResult,
    ScenarioType,
    Source,
    find_base_scenario,
)
from valuation_mcp.utils.normalize import get_path, set_path
from valuation_mcp.utils.numbers import ScaleThresholds, clean_percentage
from valuation_mcp.utils.sanitize import sanitize_sources, text_list, text_or_default
from valuation_mcp.utils.validators import normalize_ticker

logger = logging.getLogger(__name__)


def check_intrinsic_floor(floor: float) -> float:
    """Reject a floor that would let a negative or NaN intrinsic value through."""
    if not (math.isfinite(floor) and floor >= 0):
        raise ValueError(f"Invalid intrinsic value floor '{floor}'. Must be finite and >= 0")
    return floor


def intrinsic_floor_from_env() -> float:
    """Read VALUATION_INTRINSIC_FLOOR, defaulting to 0.0."""
    return check_intrinsic_floor(float(os.environ.get("VALUATION_INTRINSIC_FLOOR", "0.0")))


# Per-share intrinsic value never goes below this (limited liability)
INTRINSIC_VALUE_FLOOR = intrinsic_floor_from_env()

EXPECTED_SCENARIO_COUNT = 3

_SCENARIO_TYPES = {
    **{t.value.lower(): t.value for t in ScenarioType},
    **{t.name.lower(): t.value for t in ScenarioType},
}


def _normalize_fields(
    source: Any,
    table: FieldTable,
    thresholds: ScaleThresholds | None,
) -> dict[str, Any]:
    """Normalize every numeric field of `table` read out of `source`."""
    out: dict[str, Any] = {}
    for path, kind in table.items():
        set_path(out, path, clean_percentage(get_path(source, path), kind, thresholds))
    return out


def _copy_text(source: Any, text_fields: Mapping[str, str], out: dict[str, Any]) -> None:
    block = source if isinstance(source, dict) else {}
    for key, fallback in text_fields.items():
        out[key] = text_or_default(block.get(key), fallback)


def _scenario_type(value: Any) -> str:
    text = text_or_default(value)
    return _SCENARIO_TYPES.get(text.lower().strip(), text)


def floor_intrinsic_value(value: float, floor: float | None = None) -> float:
    """Clamp a per-share intrinsic value at the floor."""
    if floor is None:
        floor = INTRINSIC_VALUE_FLOOR
    else:
        check_intrinsic_floor(floor)
    if value < floor:
        logger.debug(f"Flooring intrinsic value {value} at {floor}")
        return floor
    return value


def _sanitize_scenario(raw: Any, thresholds: ScaleThresholds | None) -> ScenarioResult:
    out = _normalize_fields(raw, SCENARIO_FIELDS, thresholds)
    _copy_text(raw, SCENARIO_TEXT, out)
    out["type"] = _scenario_type(out["type"])
    out["intrinsicValue"] = floor_intrinsic_value(out["intrinsicValue"])
    return ScenarioResult.from_wire(out)


def _sanitize_scenarios(
    raw: Any,
    thresholds: ScaleThresholds | None,
) -> tuple[ScenarioResult, ...]:
    if raw is None:
        raise PayloadShapeError("Payload is missing 'scenarios'")
    if not isinstance(raw, list):
        raise PayloadShapeError(
            f"'scenarios' must be a list, got {type(raw).__name__}"
        )

    scenarios: list[ScenarioResult] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise PayloadShapeError(
                f"scenarios[{index}] must be an object, got {type(entry).__name__}"
            )
        scenarios.append(_sanitize_scenario(entry, thresholds))

    if len(scenarios) != EXPECTED_SCENARIO_COUNT:
        logger.warning(
            f"Expected {EXPECTED_SCENARIO_COUNT} scenarios, got {len(scenarios)}; "
            "missing scenarios are not synthesized"
        )
    return tuple(scenarios)


def _sanitize_deep_dive(raw: dict[str, Any], thresholds: ScaleThresholds | None) -> DeepDiveMetrics:
    out = _normalize_fields(raw, DEEP_DIVE_FIELDS, thresholds)
    _copy_text(raw, DEEP_DIVE_TEXT, out)

    history = raw.get(QUARTERLY_HISTORY_KEY)
    quarters: list[dict[str, Any]] = []
    if isinstance(history, list):
        for entry in history:
            quarter = _normalize_fields(entry, QUARTER_FIELDS, thresholds)
            _copy_text(entry, QUARTER_TEXT, quarter)
            quarters.append(quarter)
    out[QUARTERLY_HISTORY_KEY] = quarters

    return DeepDiveMetrics.from_wire(out)


def _sanitize_thesis(
    raw: dict[str, Any],
    thresholds: ScaleThresholds | None,
    scenarios: tuple[ScenarioResult, ...],
    deep_dive: DeepDiveMetrics | None,
) -> InvestmentThesis:
    out = _normalize_fields(raw, THESIS_FIELDS, thresholds)
    _copy_text(raw, THESIS_TEXT, out)
    for key in THESIS_TEXT_LISTS:
        out[key] = text_list(raw.get(key))

    # A re-sanitized record carries the source's claim under its own key
    reported = raw.get("reportedDecisionColor", raw.get("decisionColor"))
    out["reportedDecisionColor"] = text_or_default(reported).upper().strip()

    base = find_base_scenario(scenarios)
    wacc = base.assumptions.wacc if base else 0.0
    roic = deep_dive.roic if deep_dive else 0.0

    color = classify_decision(
        margin_of_safety=out["marginOfSafety"],
        roic=roic,
        wacc=wacc,
        net_debt_to_ebitda=out["netDebtToEbitda"],
    )
    reconcile_reported_color(color, out["reportedDecisionColor"])
    out["decisionColor"] = color.value

    return InvestmentThesis.from_wire(out)


def sanitize_analysis(
    raw: Any,
    *,
    sources: Any = None,
    thresholds: ScaleThresholds | None = None,
) -> CanonicalRecord:
    """
    Turn a raw valuation payload into a canonical record.

    Args:
        raw: Decoded payload (a JSON object)
        sources: Citation list; defaults to raw["sources"]
        thresholds: Override for the percentage scale thresholds

    Returns:
        CanonicalRecord with every numeric field finite and on its canonical scale

    Raises:
        PayloadShapeError: If raw is not an object or scenarios are missing/malformed
    """
    if not isinstance(raw, dict):
        raise PayloadShapeError(f"Payload must be an object, got {type(raw).__name__}")

    scenarios = _sanitize_scenarios(raw.get(SCENARIOS_KEY), thresholds)

    top = _normalize_fields(raw, TOP_LEVEL_FIELDS, thresholds)
    _copy_text(raw, TOP_LEVEL_TEXT, top)

    deep_dive = None
    if isinstance(raw.get(DEEP_DIVE_KEY), dict):
        deep_dive = _sanitize_deep_dive(raw[DEEP_DIVE_KEY], thresholds)

    thesis = None
    if isinstance(raw.get(THESIS_KEY), dict):
        thesis = _sanitize_thesis(raw[THESIS_KEY], thresholds, scenarios, deep_dive)

    if sources is None:
        sources = raw.get("sources")

    return CanonicalRecord(
        ticker=normalize_ticker(top["ticker"]),
        company_name=top["companyName"],
        current_price=top["currentPrice"],
        currency=top["currency"],
        risk_free_rate=top["riskFreeRate"],
        beta=top["beta"],
        last_revenue=top["lastRevenue"],
        analysis_summary=top["analysisSummary"],
        scenarios=scenarios,
        deep_dive_metrics=deep_dive,
        investment_thesis=thesis,
        last_updated=top["lastUpdated"],
        sources=tuple(Source(**entry) for entry in sanitize_sources(sources)),
    )
