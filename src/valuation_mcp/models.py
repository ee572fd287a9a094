"""Canonical record types.

The record tree is immutable once built. Python attribute names are
snake_case; to_dict() produces the camelCase wire shape the presentation
layer consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any


class ScenarioType(str, Enum):
    WORST = "Worst Case"
    BASE = "Base Case"
    BEST = "Best Case"


class DecisionColor(str, Enum):
    """Investment decision verdict."""

    GREEN = "GREEN"
    ORANGE = "ORANGE"
    RED = "RED"


def wire_name(f: Any) -> str:
    """Wire key of a dataclass field (explicit metadata or camelCase)."""
    if "wire" in f.metadata:
        return f.metadata["wire"]
    head, *rest = f.name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _scalar_kwargs(cls: type, data: dict[str, Any], skip: set[str]) -> dict[str, Any]:
    """Map wire keys of `data` onto dataclass kwargs, skipping nested fields."""
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in skip:
            continue
        key = wire_name(f)
        if key in data:
            kwargs[f.name] = data[key]
    return kwargs


def _to_wire(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, tuple):
        return [_to_wire(item) for item in obj]
    if hasattr(obj, "__dataclass_fields__"):
        out: dict[str, Any] = {}
        for f in fields(obj):
            value = getattr(obj, f.name)
            if value is None and f.metadata.get("omit_if_none"):
                continue
            out[wire_name(f)] = _to_wire(value)
        return out
    return obj


@dataclass(frozen=True)
class ValuationAssumptions:
    revenue_growth: float = 0.0
    operating_margin: float = 0.0
    tax_rate: float = 0.0
    wacc: float = 0.0
    terminal_growth_rate: float = 0.0


@dataclass(frozen=True)
class ScenarioResult:
    """One DCF scenario. intrinsic_value is floored, never negative."""

    type: str = ""
    intrinsic_value: float = 0.0
    relative_value: float = 0.0
    upside_downside: float = 0.0
    assumptions: ValuationAssumptions = field(default_factory=ValuationAssumptions)
    description: str = ""

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> ScenarioResult:
        kwargs = _scalar_kwargs(cls, data, skip={"assumptions"})
        kwargs["assumptions"] = ValuationAssumptions(
            **_scalar_kwargs(ValuationAssumptions, data.get("assumptions") or {}, skip=set())
        )
        return cls(**kwargs)


@dataclass(frozen=True)
class QuarterlyData:
    period: str = "N/A"
    revenue: float = 0.0
    net_income: float = 0.0
    eps: float = 0.0


@dataclass(frozen=True)
class DeepDiveMetrics:
    """Damodaran-style deep-dive metrics. Percentages are on the 0-100 scale."""

    equity_risk_premium: float = 0.0
    cost_of_equity: float = 0.0
    cost_of_debt: float = 0.0
    roic: float = 0.0
    reinvestment_rate: float = 0.0
    pv_terminal_value_pct: float = 0.0
    firm_type: str = ""
    narrative: str = ""

    interest_coverage_ratio: float = 0.0
    synthetic_rating: str = ""
    default_spread: float = 0.0
    debt_to_equity_ratio: float = 0.0
    sales_to_capital_ratio: float = 0.0
    roe: float = 0.0
    pe_ratio: float = 0.0
    sector_pe_ratio: float = 0.0

    market_cap: float = 0.0
    enterprise_value: float = 0.0
    cash_and_equivalents: float = 0.0
    pre_tax_operating_margin: float = 0.0
    effective_tax_rate: float = 0.0
    dividend_yield: float = 0.0
    fcf_to_firm: float = 0.0

    gross_margin: float = 0.0
    peg_ratio: float = 0.0
    book_value_per_share: float = 0.0

    quarterly_history: tuple[QuarterlyData, ...] = ()

    last_fiscal_year_label: str = "Last Year"
    last_fiscal_year_revenue: float = 0.0
    last_fiscal_year_net_income: float = 0.0

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> DeepDiveMetrics:
        kwargs = _scalar_kwargs(cls, data, skip={"quarterly_history"})
        kwargs["quarterly_history"] = tuple(
            QuarterlyData(**_scalar_kwargs(QuarterlyData, quarter, skip=set()))
            for quarter in data.get("quarterlyHistory") or ()
        )
        return cls(**kwargs)


@dataclass(frozen=True)
class InvestmentThesis:
    """Investment thesis block. decision_color is derived, never taken from the source."""

    decision_color: DecisionColor = DecisionColor.ORANGE
    reported_decision_color: str = ""
    decision_headline: str = ""
    margin_of_safety: float = 0.0

    ev_sales_ttm: float = field(default=0.0, metadata={"wire": "evSalesTTM"})
    ev_sales_fwd: float = 0.0
    justified_ev_sales: float = 0.0
    fwd_peg: float = 0.0
    justified_peg: float = 0.0
    fair_value: float = 0.0
    net_debt_to_ebitda: float = 0.0

    market_narrative: str = ""
    catalysts: tuple[str, ...] = ()
    thesis_breakers: tuple[str, ...] = ()
    long_narrative: str = ""
    portfolio_allocation: str = ""

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> InvestmentThesis:
        kwargs = _scalar_kwargs(cls, data, skip={"decision_color", "catalysts", "thesis_breakers"})
        kwargs["decision_color"] = DecisionColor(data["decisionColor"])
        kwargs["catalysts"] = tuple(data.get("catalysts") or ())
        kwargs["thesis_breakers"] = tuple(data.get("thesisBreakers") or ())
        return cls(**kwargs)


@dataclass(frozen=True)
class Source:
    title: str
    uri: str


def find_base_scenario(scenarios: tuple[ScenarioResult, ...]) -> ScenarioResult | None:
    """Base Case by type, else the second scenario, else the first."""
    for scenario in scenarios:
        if scenario.type == ScenarioType.BASE.value:
            return scenario
    if len(scenarios) > 1:
        return scenarios[1]
    return scenarios[0] if scenarios else None


@dataclass(frozen=True)
class CanonicalRecord:
    """Sanitized valuation report, one per external-source response."""

    ticker: str = ""
    company_name: str = ""
    current_price: float = 0.0
    currency: str = ""
    risk_free_rate: float = 0.0
    beta: float = 0.0
    last_revenue: float = 0.0
    analysis_summary: str = ""
    scenarios: tuple[ScenarioResult, ...] = ()
    deep_dive_metrics: DeepDiveMetrics | None = field(
        default=None, metadata={"omit_if_none": True}
    )
    investment_thesis: InvestmentThesis | None = field(
        default=None, metadata={"omit_if_none": True}
    )
    last_updated: str = ""
    sources: tuple[Source, ...] = ()

    def base_scenario(self) -> ScenarioResult | None:
        return find_base_scenario(self.scenarios)

    @property
    def decision(self) -> DecisionColor | None:
        if self.investment_thesis is None:
            return None
        return self.investment_thesis.decision_color

    def to_dict(self) -> dict[str, Any]:
        """camelCase wire shape; optional blocks are omitted when absent."""
        return _to_wire(self)
