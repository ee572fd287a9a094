"""Validation utilities."""

import operator
from collections.abc import Callable


def normalize_ticker(value: str) -> str:
    """Uppercase and strip a ticker symbol."""
    return value.upper().strip()


def check_rule(
    value: float | None,
    threshold: float,
    comparator: Callable[[float, float], bool] = operator.gt,
) -> bool | None:
    """
    Check a rule with nullable boolean semantics.

    If value is None, returns None (not False).

    Args:
        value: The value to check (may be None)
        threshold: The threshold to compare against
        comparator: Comparison function (default: operator.gt)

    Returns:
        True/False if value is not None, None otherwise
    """
    if value is None:
        return None
    return comparator(value, threshold)


def check_rule_expr(
    value1: float | None,
    value2: float | None,
    comparator: Callable[[float, float], bool] = operator.gt,
) -> bool | None:
    """
    Check a rule comparing two values with nullable boolean semantics.

    If either value is None, returns None (not False).
    """
    if value1 is None or value2 is None:
        return None
    return comparator(value1, value2)
