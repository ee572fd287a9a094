"""Numeric normalization and decision classification engine."""

from valuation_mcp.engine.decision import (
    ValuationStatus,
    classify_decision,
    classify_valuation_status,
    decision_checks,
    is_value_creating,
)
from valuation_mcp.engine.fields import iter_field_paths
from valuation_mcp.engine.sanitizer import floor_intrinsic_value, sanitize_analysis

__all__ = [
    "ValuationStatus",
    "classify_decision",
    "classify_valuation_status",
    "decision_checks",
    "floor_intrinsic_value",
    "is_value_creating",
    "iter_field_paths",
    "sanitize_analysis",
]
