"""Utility modules."""

from valuation_mcp.utils.frames import df_to_rows, quarterly_history_frame, trailing_totals
from valuation_mcp.utils.normalize import build_record_snapshot, canonical_dumps
from valuation_mcp.utils.numbers import (
    DEFAULT_THRESHOLDS,
    NumericKind,
    ScaleThresholds,
    clean_number,
    clean_percentage,
)
from valuation_mcp.utils.provenance import build_error_response, build_meta, build_provenance
from valuation_mcp.utils.sanitize import sanitize_sources, text_list, text_or_default
from valuation_mcp.utils.validators import check_rule, check_rule_expr, normalize_ticker

__all__ = [
    "df_to_rows",
    "quarterly_history_frame",
    "trailing_totals",
    "build_record_snapshot",
    "canonical_dumps",
    "DEFAULT_THRESHOLDS",
    "NumericKind",
    "ScaleThresholds",
    "clean_number",
    "clean_percentage",
    "build_error_response",
    "build_meta",
    "build_provenance",
    "sanitize_sources",
    "text_list",
    "text_or_default",
    "check_rule",
    "check_rule_expr",
    "normalize_ticker",
]
