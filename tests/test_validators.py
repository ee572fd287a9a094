"""Tests for validators."""

import operator

from valuation_mcp.utils.validators import check_rule, check_rule_expr, normalize_ticker


class TestNormalizeTicker:
    """Tests for normalize_ticker function."""

    def test_uppercase(self) -> None:
        assert normalize_ticker("aapl") == "AAPL"

    def test_strips_whitespace(self) -> None:
        assert normalize_ticker("  nvda  ") == "NVDA"

    def test_empty(self) -> None:
        assert normalize_ticker("") == ""


class TestCheckRule:
    """Tests for check_rule function."""

    def test_check_rule_true(self) -> None:
        """Test rule that triggers."""
        assert check_rule(25.0, 20.0, operator.ge) is True

    def test_check_rule_false(self) -> None:
        """Test rule that doesn't trigger."""
        assert check_rule(5.0, 20.0, operator.ge) is False

    def test_check_rule_none_value(self) -> None:
        """Test rule with None value returns None (not False)."""
        assert check_rule(None, 20.0, operator.ge) is None

    def test_check_rule_default_gt(self) -> None:
        """Test default comparator is strict greater-than."""
        assert check_rule(2.0, 2.0) is False


class TestCheckRuleExpr:
    """Tests for check_rule_expr function."""

    def test_check_rule_expr_true(self) -> None:
        assert check_rule_expr(15.0, 9.0, operator.gt) is True

    def test_check_rule_expr_equal_not_gt(self) -> None:
        assert check_rule_expr(9.0, 9.0, operator.gt) is False

    def test_check_rule_expr_none(self) -> None:
        assert check_rule_expr(None, 9.0) is None
        assert check_rule_expr(15.0, None) is None
