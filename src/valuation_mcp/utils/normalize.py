"""Path helpers, canonical JSON, and diff-stable record snapshots.

The snapshot is a reduced view of a canonical record holding only the
decision-relevant fields, plus a short hash of its canonical JSON. Two
searches for the same ticker can be compared by hash alone.
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from valuation_mcp.models import CanonicalRecord

# Snapshot format version - bump when snapshot fields change
SNAPSHOT_VERSION = "1.0.0"


def canonical_dumps(obj: Any) -> str:
    """Produce canonical JSON string with sorted keys and minimal separators.

    Uses allow_nan=False to fail fast if NaN/inf values slip through
    sanitization. This ensures JSON validity across all parsers.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


# ---------------- Path helpers ----------------

def get_path(root: Any, path: tuple[str, ...]) -> Any:
    """Get value at nested path, or None if not found."""
    cur: Any = root
    for k in path:
        if not isinstance(cur, dict) or k not in cur:
            return None
        cur = cur[k]
    return cur


def set_path(root: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    """Set value at nested path, creating intermediate dicts as needed."""
    cur: Any = root
    for k in path[:-1]:
        if k not in cur or not isinstance(cur[k], dict):
            cur[k] = {}
        cur = cur[k]
    cur[path[-1]] = value


# ---------------- Snapshot ----------------

def build_record_snapshot(record: CanonicalRecord) -> dict[str, Any]:
    """
    Build a compact, hashable snapshot of a canonical record.

    The hash covers snapshot_version, so a version bump changes every hash.

    Args:
        record: Sanitized record

    Returns:
        Snapshot dict with version and 16-char snapshot_hash
    """
    base = record.base_scenario()
    thesis = record.investment_thesis

    snapshot_data = {
        "snapshot_version": SNAPSHOT_VERSION,
        "ticker": record.ticker,
        "currency": record.currency,
        "current_price": record.current_price,
        "base_intrinsic_value": base.intrinsic_value if base else None,
        "base_upside_downside": base.upside_downside if base else None,
        "scenario_values": [s.intrinsic_value for s in record.scenarios],
        "decision": record.decision.value if record.decision else None,
        "margin_of_safety": thesis.margin_of_safety if thesis else None,
        "fair_value": thesis.fair_value if thesis else None,
        "last_updated": record.last_updated or None,
    }

    canonical_json = canonical_dumps(snapshot_data)
    snapshot_hash = hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()[:16]

    return {
        **snapshot_data,
        "snapshot_hash": snapshot_hash,
    }
