"""Pytest configuration and fixtures."""

import copy
import json
from typing import Any

import pytest

_RAW_PAYLOAD: dict[str, Any] = {
    "ticker": " msft ",
    "companyName": "Microsoft Corporation",
    "currentPrice": "$412.30",
    "currency": "USD",
    "riskFreeRate": 0.042,
    "beta": "0.9",
    "lastRevenue": "245.1",
    "analysisSummary": "Durable cash generator priced for steady growth.",
    "scenarios": [
        {
            "type": "Worst Case",
            "intrinsicValue": 310.5,
            "relativeValue": 300,
            "upsideDownside": -0.247,
            "assumptions": {
                "revenueGrowth": 0.06,
                "operatingMargin": 0.38,
                "taxRate": 0.19,
                "wacc": 0.095,
                "terminalGrowthRate": 0.02,
            },
            "description": "Cloud growth slows sharply.",
        },
        {
            "type": "Base Case",
            "intrinsicValue": "520.00",
            "relativeValue": "505.5",
            "upsideDownside": "26.1%",
            "assumptions": {
                "revenueGrowth": 12,
                "operatingMargin": "44%",
                "taxRate": 19,
                "wacc": 9,
                "terminalGrowthRate": 2.5,
            },
            "description": "Azure and Copilot keep compounding.",
        },
        {
            "type": "Best Case",
            "intrinsicValue": 680,
            "relativeValue": 650,
            "upsideDownside": 64.9,
            "assumptions": {
                "revenueGrowth": 16,
                "operatingMargin": 47,
                "taxRate": 18,
                "wacc": 8.5,
                "terminalGrowthRate": 3,
            },
            "description": "AI monetization surprises to the upside.",
        },
    ],
    "deepDiveMetrics": {
        "equityRiskPremium": 4.6,
        "costOfEquity": 0.091,
        "costOfDebt": "4.1%",
        "roic": 0.28,
        "reinvestmentRate": 35,
        "pvTerminalValuePct": 0.62,
        "firmType": "Mature Growth",
        "narrative": "Platform franchise with expanding AI moat.",
        "interestCoverageRatio": "45.2x",
        "syntheticRating": "AAA",
        "defaultSpread": 0.0069,
        "debtToEquityRatio": 0.29,
        "salesToCapitalRatio": 1.4,
        "roe": 35.6,
        "peRatio": 35.2,
        "sectorPeRatio": 28.0,
        "marketCap": "3,065.4",
        "enterpriseValue": 3010,
        "cashAndEquivalents": 75.5,
        "preTaxOperatingMargin": 44.6,
        "effectiveTaxRate": 0.18,
        "dividendYield": 0.7,
        "fcfToFirm": 70.2,
        "grossMargin": 69.4,
        "pegRatio": 2.2,
        "bookValuePerShare": 36.1,
        "quarterlyHistory": [
            {"period": "Q4 2024", "revenue": 69.6, "netIncome": 24.1, "eps": 3.23},
            {"period": "Q3 2024", "revenue": 65.6, "netIncome": 24.7, "eps": 3.30},
            {"period": "Q2 2024", "revenue": 64.7, "netIncome": 22.0, "eps": 2.95},
            {"period": "Q1 2024", "revenue": 61.9, "netIncome": 21.9, "eps": 2.94},
        ],
        "lastFiscalYearLabel": "FY 2024",
        "lastFiscalYearRevenue": 245.1,
        "lastFiscalYearNetIncome": 88.1,
    },
    "investmentThesis": {
        "decisionColor": "green",
        "decisionHeadline": "Quality compounder at a fair discount.",
        "marginOfSafety": 0.26,
        "evSalesTTM": 12.3,
        "evSalesFwd": 10.8,
        "justifiedEvSales": 14.1,
        "fwdPeg": 2.1,
        "justifiedPeg": 2.4,
        "fairValue": "520",
        "netDebtToEbitda": -0.3,
        "marketNarrative": "Market prices in steady double-digit growth.",
        "catalysts": ["Copilot seat growth", "Azure share gains"],
        "thesisBreakers": ["Azure growth below 20%"],
        "longNarrative": "Microsoft sells software and cloud infrastructure.",
        "portfolioAllocation": "Core holding, 5-8% of equity sleeve.",
    },
    "lastUpdated": "2025-01-30",
    "sources": [
        {"title": "10-K", "uri": "https://example.com/10k"},
        {"title": "10-K (dup)", "uri": "https://example.com/10k"},
        {"title": "", "uri": "https://example.com/untitled"},
    ],
}


@pytest.fixture
def raw_payload() -> dict[str, Any]:
    """Complete raw payload with mixed number encodings."""
    return copy.deepcopy(_RAW_PAYLOAD)


@pytest.fixture
def minimal_payload() -> dict[str, Any]:
    """Payload with only the mandatory scenarios and no optional blocks."""
    return {
        "ticker": "ionq",
        "scenarios": [
            {"type": "Worst Case", "intrinsicValue": -3.5},
            {"type": "Base Case", "intrinsicValue": -4.2},
            {"type": "Best Case", "intrinsicValue": 12},
        ],
    }


@pytest.fixture
def fenced_response(raw_payload: dict[str, Any]) -> str:
    """Model response text wrapping the payload in a ```json fence."""
    return "Here is the valuation:\n```json\n" + json.dumps(raw_payload) + "\n```\nDone."
