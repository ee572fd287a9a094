"""Valuation payload sanitization tool."""

from time import perf_counter
from typing import Any

from valuation_mcp.data.payload import PayloadDecodeError, PayloadError, parse_payload
from valuation_mcp.engine.decision import classify_valuation_status, is_value_creating
from valuation_mcp.engine.sanitizer import sanitize_analysis
from valuation_mcp.utils.normalize import build_record_snapshot
from valuation_mcp.utils.provenance import build_error_response, build_meta, build_provenance
from valuation_mcp.utils.sanitize import text_or_default
from valuation_mcp.utils.validators import normalize_ticker


async def sanitize_valuation(payload: str, sources: list[Any] | None = None) -> dict[str, Any]:
    """
    Decode and sanitize a model valuation response.

    Args:
        payload: Model response text (JSON, optionally inside a fenced block)
        sources: Grounding citations returned alongside the response

    Returns:
        Dict with the canonical record, decision, valuation status and snapshot,
        or a standard error response when the payload is structurally unusable
    """
    start_time = perf_counter()

    try:
        raw = parse_payload(payload)
    except PayloadDecodeError as e:
        return build_error_response(error_type="invalid_payload", message=str(e))
    except PayloadError as e:
        return build_error_response(error_type="invalid_shape", message=str(e))

    try:
        record = sanitize_analysis(raw, sources=sources)
    except PayloadError as e:
        # The payload decoded, so it may still name the ticker it describes
        ticker = normalize_ticker(text_or_default(raw.get("ticker"))) or None
        return build_error_response(error_type="invalid_shape", message=str(e), ticker=ticker)

    base = record.base_scenario()
    deep_dive = record.deep_dive_metrics

    valuation_status = None
    value_creating = None
    if base is not None:
        valuation_status = classify_valuation_status(base.upside_downside).value
        if deep_dive is not None:
            value_creating = is_value_creating(deep_dive.roic, base.assumptions.wacc)

    warnings: list[str] = []
    if len(record.scenarios) != 3:
        warnings.append(f"expected 3 scenarios, got {len(record.scenarios)}")
    if deep_dive is None:
        warnings.append("deepDiveMetrics block absent")
    if record.investment_thesis is None:
        warnings.append("investmentThesis block absent; no decision derived")

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("sanitize_valuation", duration_ms),
        "data_provenance": {
            "analysis": build_provenance(
                source="external_model",
                as_of=record.last_updated,
                source_count=len(record.sources),
                warnings=warnings,
            ),
        },
        "ticker": record.ticker,
        "record": record.to_dict(),
        "decision": record.decision.value if record.decision else None,
        "valuation_status": valuation_status,
        "is_value_creating": value_creating,
        "snapshot": build_record_snapshot(record),
    }
