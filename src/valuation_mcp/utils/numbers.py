"""Scalar normalization for scale-ambiguous numeric fields.

The external model returns numbers in whatever shape it likes: plain floats,
strings with currency symbols and thousands separators, percentages written
either as fractions (0.21) or already scaled (21). This module turns one raw
scalar into a finite float and, for percentage fields, into the canonical
0-100 scale.

Both functions are total: malformed input degrades to 0.0 and never raises.
A 0.0 result does not distinguish "absent" from "genuinely zero".
"""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Everything that is not a digit, '.', or '-' is dropped before parsing
_NON_NUMERIC = re.compile(r"[^0-9.\-]")

# Longest leading decimal literal, e.g. "12.5" in "12.5.3" or "-4" in "-4-2"
_LEADING_DECIMAL = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")

# Rounding applied after fractional upscaling to drop binary float noise
_SCALE_DIGITS = 10


class NumericKind(Enum):
    """How a field's cleaned number is interpreted for scale purposes."""

    PLAIN_NUMBER = "plain_number"
    LARGE_PERCENTAGE = "large_percentage"
    SMALL_PERCENTAGE = "small_percentage"


@dataclass(frozen=True)
class ScaleThresholds:
    """Heuristic cut-offs below which a percentage is read as a fraction.

    large: values with abs <= large are fractional (0.21 -> 21). Inclusive.
    small: values with abs < small are fractional (0.04 -> 4). Strict.
    """

    large: float = 1.0
    small: float = 0.15

    def __post_init__(self) -> None:
        if not (math.isfinite(self.large) and self.large > 0):
            raise ValueError(f"Invalid large percentage threshold '{self.large}'. Must be > 0")
        if not (math.isfinite(self.small) and self.small > 0):
            raise ValueError(f"Invalid small percentage threshold '{self.small}'. Must be > 0")

    @classmethod
    def from_env(cls) -> ScaleThresholds:
        """Build thresholds from VALUATION_*_PCT_THRESHOLD environment variables."""
        return cls(
            large=float(os.environ.get("VALUATION_LARGE_PCT_THRESHOLD", "1.0")),
            small=float(os.environ.get("VALUATION_SMALL_PCT_THRESHOLD", "0.15")),
        )


# Process-wide defaults, read once at import
DEFAULT_THRESHOLDS = ScaleThresholds.from_env()


def _finite_or_zero(value: float) -> float:
    if not math.isfinite(value) or value == 0:
        # Also folds -0.0 into 0.0
        return 0.0
    return value


def clean_number(raw: Any) -> float:
    """
    Coerce a raw scalar into a finite float.

    Numbers pass through (NaN/inf become 0.0). Anything else is stringified,
    stripped of every character except digits, '.', and '-', and the leading
    decimal literal is parsed. Booleans, None, empty strings, and strings with
    no parseable number all yield 0.0.

    Args:
        raw: Value as received from the payload

    Returns:
        Finite float, 0.0 when nothing usable was found
    """
    if isinstance(raw, bool) or raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        try:
            return _finite_or_zero(float(raw))
        except OverflowError:
            return 0.0

    text = _NON_NUMERIC.sub("", str(raw))
    match = _LEADING_DECIMAL.match(text)
    if match is None:
        return 0.0
    return _finite_or_zero(float(match.group(0)))


def clean_percentage(
    raw: Any,
    kind: NumericKind,
    thresholds: ScaleThresholds | None = None,
) -> float:
    """
    Clean a raw scalar and bring it onto the scale its kind demands.

    LARGE_PERCENTAGE: 0 < abs(x) <= thresholds.large is multiplied by 100.
    SMALL_PERCENTAGE: 0 < abs(x) < thresholds.small is multiplied by 100.
    PLAIN_NUMBER: no scale inference.

    Args:
        raw: Value as received from the payload
        kind: Declared numeric kind of the field
        thresholds: Override for the process-wide DEFAULT_THRESHOLDS

    Returns:
        Finite float on the canonical scale for the kind
    """
    if thresholds is None:
        thresholds = DEFAULT_THRESHOLDS

    num = clean_number(raw)
    if num == 0 or kind is NumericKind.PLAIN_NUMBER:
        return num

    if kind is NumericKind.LARGE_PERCENTAGE:
        is_fraction = abs(num) <= thresholds.large
    elif kind is NumericKind.SMALL_PERCENTAGE:
        is_fraction = abs(num) < thresholds.small
    else:
        raise ValueError(f"Unknown numeric kind: {kind!r}")

    if not is_fraction:
        return num
    # 0.07 * 100 == 7.000000000000001
    return round(num * 100, _SCALE_DIGITS)
