"""Static field tables for the valuation payload.

Every numeric field of the canonical record is listed here with its
NumericKind. Paths are tuples of wire (camelCase) keys relative to the block
they belong to. Text fields are listed separately with their fallback.

The tables are read-only mappings built once at import.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from valuation_mcp.utils.numbers import NumericKind

FieldTable = Mapping[tuple[str, ...], NumericKind]

# Payload keys of the nested blocks
SCENARIOS_KEY = "scenarios"
DEEP_DIVE_KEY = "deepDiveMetrics"
QUARTERLY_HISTORY_KEY = "quarterlyHistory"
THESIS_KEY = "investmentThesis"

_PLAIN = NumericKind.PLAIN_NUMBER
_LARGE = NumericKind.LARGE_PERCENTAGE
_SMALL = NumericKind.SMALL_PERCENTAGE

TOP_LEVEL_FIELDS: FieldTable = MappingProxyType({
    ("currentPrice",): _PLAIN,
    ("riskFreeRate",): _SMALL,
    ("beta",): _PLAIN,
    ("lastRevenue",): _PLAIN,
})

SCENARIO_FIELDS: FieldTable = MappingProxyType({
    ("intrinsicValue",): _PLAIN,
    ("relativeValue",): _PLAIN,
    ("upsideDownside",): _LARGE,
    ("assumptions", "revenueGrowth"): _LARGE,
    ("assumptions", "operatingMargin"): _LARGE,
    ("assumptions", "taxRate"): _LARGE,
    ("assumptions", "wacc"): _LARGE,
    ("assumptions", "terminalGrowthRate"): _SMALL,
})

DEEP_DIVE_FIELDS: FieldTable = MappingProxyType({
    # Cost of capital
    ("equityRiskPremium",): _SMALL,
    ("costOfEquity",): _LARGE,
    ("costOfDebt",): _SMALL,
    ("roic",): _LARGE,
    ("reinvestmentRate",): _LARGE,
    ("pvTerminalValuePct",): _LARGE,
    # Credit risk
    ("interestCoverageRatio",): _PLAIN,
    ("defaultSpread",): _SMALL,
    ("debtToEquityRatio",): _LARGE,
    ("salesToCapitalRatio",): _PLAIN,
    ("roe",): _LARGE,
    ("peRatio",): _PLAIN,
    ("sectorPeRatio",): _PLAIN,
    # Supplementary
    ("marketCap",): _PLAIN,
    ("enterpriseValue",): _PLAIN,
    ("cashAndEquivalents",): _PLAIN,
    ("preTaxOperatingMargin",): _LARGE,
    ("effectiveTaxRate",): _LARGE,
    ("dividendYield",): _SMALL,
    ("fcfToFirm",): _PLAIN,
    ("grossMargin",): _LARGE,
    ("pegRatio",): _PLAIN,
    ("bookValuePerShare",): _PLAIN,
    ("lastFiscalYearRevenue",): _PLAIN,
    ("lastFiscalYearNetIncome",): _PLAIN,
})

QUARTER_FIELDS: FieldTable = MappingProxyType({
    ("revenue",): _PLAIN,
    ("netIncome",): _PLAIN,
    ("eps",): _PLAIN,
})

THESIS_FIELDS: FieldTable = MappingProxyType({
    ("marginOfSafety",): _LARGE,
    ("evSalesTTM",): _PLAIN,
    ("evSalesFwd",): _PLAIN,
    ("justifiedEvSales",): _PLAIN,
    ("fwdPeg",): _PLAIN,
    ("justifiedPeg",): _PLAIN,
    ("fairValue",): _PLAIN,
    ("netDebtToEbitda",): _PLAIN,
})

# Text fields: key -> fallback when absent or empty
TOP_LEVEL_TEXT: Mapping[str, str] = MappingProxyType({
    "ticker": "",
    "companyName": "",
    "currency": "",
    "analysisSummary": "",
    "lastUpdated": "",
})

SCENARIO_TEXT: Mapping[str, str] = MappingProxyType({
    "type": "",
    "description": "",
})

DEEP_DIVE_TEXT: Mapping[str, str] = MappingProxyType({
    "firmType": "",
    "narrative": "",
    "syntheticRating": "",
    "lastFiscalYearLabel": "Last Year",
})

QUARTER_TEXT: Mapping[str, str] = MappingProxyType({
    "period": "N/A",
})

THESIS_TEXT: Mapping[str, str] = MappingProxyType({
    "decisionHeadline": "",
    "marketNarrative": "",
    "longNarrative": "",
    "portfolioAllocation": "",
})

THESIS_TEXT_LISTS: tuple[str, ...] = ("catalysts", "thesisBreakers")

# (path prefix, field table); "*" stands for every item of a list
_BLOCKS: tuple[tuple[tuple[str, ...], FieldTable], ...] = (
    ((), TOP_LEVEL_FIELDS),
    ((SCENARIOS_KEY, "*"), SCENARIO_FIELDS),
    ((DEEP_DIVE_KEY,), DEEP_DIVE_FIELDS),
    ((DEEP_DIVE_KEY, QUARTERLY_HISTORY_KEY, "*"), QUARTER_FIELDS),
    ((THESIS_KEY,), THESIS_FIELDS),
)


def iter_field_paths() -> Iterator[tuple[tuple[str, ...], NumericKind]]:
    """
    Yield every numeric field as a full path from the payload root.

    Flat view of the tables for introspection and coverage checks; the
    sanitizer walks the same block keys one block at a time.
    """
    for prefix, table in _BLOCKS:
        for path, kind in table.items():
            yield prefix + path, kind
