# expense_frontend/aggregation.py
# dashboard figures derived from already fetched data, nothing is persisted

from dataclasses import dataclass
from datetime import timezone
from typing import List, Optional

import numpy as np
import pandas as pd
import plotly.express as px

from .models import EXPENSE, REVENUE, parse_api_date

COLUMNS = ["id", "amount", "type", "category", "description", "date"]


@dataclass
class CategorySpend:
    name: str
    budget: float
    spent: float
    percent: Optional[float]
    bar_width: float
    over_budget: bool

    @property
    def has_budget(self):
        return self.percent is not None


def _naive_utc(value):
    parsed = parse_api_date(value)
    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def transactions_frame(transactions) -> pd.DataFrame:
    """Build a DataFrame from Transaction records, dropping rows without a usable date"""
    rows = [
        {
            "id": t.id,
            "amount": t.amount,
            "type": t.type,
            "category": t.category,
            "description": t.description,
            "date": _naive_utc(t.date),
        }
        for t in transactions
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").astype(float)
    return df.dropna(subset=["date", "amount"])


def filter_month(df: pd.DataFrame, month: int, year: int) -> pd.DataFrame:
    """Rows dated inside the given month (1-12) and year"""
    mask = (df["date"].dt.month == month) & (df["date"].dt.year == year)
    return df.loc[mask].copy()


def monthly_totals(df: pd.DataFrame):
    """Return (expenses, revenue) for the rows given"""
    expenses = df.loc[df["type"] == EXPENSE, "amount"].sum()
    revenue = df.loc[df["type"] == REVENUE, "amount"].sum()
    return float(expenses), float(revenue)


def category_spend(categories, df: pd.DataFrame) -> List[CategorySpend]:
    """Spend per category matched on the category name.

    The percentage of budget is left unclamped so overspending stays visible;
    only the bar width is capped at 100. A category without budget gets no
    percentage at all.
    """
    if not categories:
        return []

    expense_df = df[df["type"] == EXPENSE]
    totals = expense_df.groupby("category")["amount"].sum()

    budgets = np.array([c.budget for c in categories], dtype=float)
    spent = np.array([float(totals.get(c.name, 0.0)) for c in categories], dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        percent = np.where(budgets > 0, spent / budgets * 100, np.nan)

    result = []
    for category, cat_spent, cat_budget, cat_percent in zip(categories, spent, budgets, percent):
        if np.isnan(cat_percent):
            result.append(CategorySpend(
                name=category.name,
                budget=float(cat_budget),
                spent=float(cat_spent),
                percent=None,
                bar_width=0.0,
                over_budget=bool(cat_spent > 0),
            ))
        else:
            result.append(CategorySpend(
                name=category.name,
                budget=float(cat_budget),
                spent=float(cat_spent),
                percent=float(cat_percent),
                bar_width=float(min(cat_percent, 100.0)),
                over_budget=bool(cat_percent > 100),
            ))
    return result


def expense_pie(spend):
    """Donut chart of spend per category, None when nothing was spent"""
    if not spend or sum(s.spent for s in spend) <= 0:
        return None
    chart_df = pd.DataFrame({"Categoria": [s.name for s in spend], "Gasto": [s.spent for s in spend]})
    fig = px.pie(chart_df, names="Categoria", values="Gasto", title="Despesas por Categoria", hole=0.4)
    fig.update_layout(template="plotly_white", legend=dict(orientation="v", x=1.0))
    return fig
