"""Quarterly history table utilities."""

from collections.abc import Iterable

import pandas as pd

from valuation_mcp.models import QuarterlyData

QUARTERLY_COLUMNS = ["period", "revenue", "net_income", "eps"]


def quarterly_history_frame(quarters: Iterable[QuarterlyData]) -> pd.DataFrame:
    """
    Build the quarterly history table.

    Output columns (always, in this order): period, revenue, net_income, eps.
    Row order is the order the source supplied (most recent first by convention).

    Args:
        quarters: Sanitized quarterly rows

    Returns:
        DataFrame with a stable schema, empty when there is no history
    """
    rows = [
        {
            "period": q.period,
            "revenue": q.revenue,
            "net_income": q.net_income,
            "eps": q.eps,
        }
        for q in quarters
    ]
    # Explicit columns keep the schema when rows is empty
    return pd.DataFrame(rows, columns=QUARTERLY_COLUMNS)


def trailing_totals(df: pd.DataFrame, quarters: int = 4) -> dict[str, float | int | None]:
    """
    Sum the most recent `quarters` rows.

    Net margin is net income over revenue in percent, None when revenue is zero.
    """
    recent = df.head(quarters)
    revenue = float(recent["revenue"].sum())
    net_income = float(recent["net_income"].sum())
    return {
        "quarters_used": int(len(recent)),
        "revenue": revenue,
        "net_income": net_income,
        "eps": float(recent["eps"].sum()),
        "net_margin": round(net_income / revenue * 100, 2) if revenue else None,
    }


def df_to_rows(df: pd.DataFrame) -> list[dict]:
    """Convert to list of dicts keyed by the snake_case column names."""
    return df.to_dict("records")
