"""
Portfolio Metrics

Pure aggregates over the property and renovation collections. Amounts are
whole currency units and are summed as integers; ratios are percentages
computed with a single division and rounded for display. A zero denominator
yields 0.0 instead of NaN or infinity.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from app.records.models import (
    Property,
    Renovation,
    RenovationCategory,
    RenovationStatus,
)

PROPERTY_COLORS = ["#1B6B4A", "#D4A853", "#4A90D9", "#E54545", "#8B5CF6", "#F97316"]
CATEGORY_COLORS = ["#E54545", "#F5A623", "#4A90D9", "#8B5CF6", "#1B6B4A"]

MONTHS_PER_YEAR = 12
DEFAULT_CATEGORY_LIMIT = 5
OPEN_STATUSES = {RenovationStatus.pending, RenovationStatus.in_progress}


@dataclass
class ChartPoint:
    """One bar of a summary chart."""

    label: str
    value: int
    color: str


def percent_of(numerator: int, denominator: int, ndigits: int = 2) -> float:
    """
    Express ``numerator`` as a percentage of ``denominator``.

    Returns 0.0 when the denominator is zero.
    """
    if not denominator:
        return 0.0
    return round(numerator * 100 / denominator, ndigits)


def property_color(index: int) -> str:
    return PROPERTY_COLORS[index % len(PROPERTY_COLORS)]


# === Property level ===

def property_equity(prop: Property) -> int:
    return prop.current_value - prop.purchase_price


def property_monthly_cashflow(prop: Property) -> int:
    return prop.monthly_rent - prop.monthly_expenses


def equity_percent(prop: Property) -> float:
    """
    Equity as a percentage of purchase price, to one decimal.

    A property bought for nothing has no meaningful gain and reports 0.0.
    """
    return percent_of(property_equity(prop), prop.purchase_price, 1)


# === Portfolio level ===

def portfolio_value(properties: Sequence[Property]) -> int:
    return sum(p.current_value for p in properties)


def portfolio_invested(properties: Sequence[Property]) -> int:
    return sum(p.purchase_price for p in properties)


def portfolio_equity(properties: Sequence[Property]) -> int:
    return portfolio_value(properties) - portfolio_invested(properties)


def monthly_income(properties: Sequence[Property]) -> int:
    return sum(p.monthly_rent for p in properties)


def monthly_expenses(properties: Sequence[Property]) -> int:
    return sum(p.monthly_expenses for p in properties)


def monthly_cashflow(properties: Sequence[Property]) -> int:
    return sum(property_monthly_cashflow(p) for p in properties)


def annual_income(properties: Sequence[Property]) -> int:
    return monthly_income(properties) * MONTHS_PER_YEAR


def annual_expenses(properties: Sequence[Property]) -> int:
    return monthly_expenses(properties) * MONTHS_PER_YEAR


def annual_cashflow(properties: Sequence[Property]) -> int:
    return monthly_cashflow(properties) * MONTHS_PER_YEAR


def cap_rate(properties: Sequence[Property]) -> float:
    """Annual cash flow as a percentage of current portfolio value."""
    return percent_of(annual_cashflow(properties), portfolio_value(properties))


def cash_on_cash(properties: Sequence[Property]) -> float:
    """Annual cash flow as a percentage of total purchase price."""
    return percent_of(annual_cashflow(properties), portfolio_invested(properties))


def portfolio_roi(properties: Sequence[Property]) -> float:
    """Portfolio equity as a percentage of capital invested, to one decimal."""
    return percent_of(portfolio_equity(properties), portfolio_invested(properties), 1)


def equity_gain_percent(properties: Sequence[Property]) -> float:
    """Like ``portfolio_roi`` but divides by at least one dollar invested."""
    return percent_of(
        portfolio_equity(properties), max(portfolio_invested(properties), 1), 1
    )


# === Renovations ===

def renovation_spend(renovations: Sequence[Renovation]) -> int:
    """Money spent on completed renovations (actual cost, else estimate)."""
    return sum(r.spent for r in renovations if r.is_completed)


def renovation_remaining_budget(renovations: Sequence[Renovation]) -> int:
    """Estimated cost of every renovation not yet completed."""
    return sum(r.estimated_cost for r in renovations if not r.is_completed)


def budget_by_category(
    renovations: Sequence[Renovation],
    limit: int = DEFAULT_CATEGORY_LIMIT,
    statuses: Optional[Iterable[RenovationStatus]] = None,
) -> List[Tuple[RenovationCategory, int]]:
    """
    Estimated budget per category, largest first, top ``limit`` entries.

    Only renovations whose status is in ``statuses`` count; by default that
    is every status but completed.

    Categories appear in first-seen order before sorting, and the sort is
    stable, so equal budgets keep that order.
    """
    if statuses is None:
        included = OPEN_STATUSES
    else:
        included = {RenovationStatus(s) for s in statuses}
    totals: Dict[RenovationCategory, int] = {}
    for r in renovations:
        if r.status not in included:
            continue
        totals[r.category] = totals.get(r.category, 0) + r.estimated_cost
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


# === Chart series ===

def _short_name(name: str) -> str:
    parts = name.split(" ")
    return parts[0] if parts else name


def cashflow_by_property(properties: Sequence[Property]) -> List[ChartPoint]:
    return [
        ChartPoint(_short_name(p.name), property_monthly_cashflow(p), property_color(i))
        for i, p in enumerate(properties)
    ]


def value_by_property(properties: Sequence[Property]) -> List[ChartPoint]:
    return [
        ChartPoint(_short_name(p.name), p.current_value, property_color(i))
        for i, p in enumerate(properties)
    ]


def budget_by_category_chart(
    renovations: Sequence[Renovation],
    limit: int = DEFAULT_CATEGORY_LIMIT,
) -> List[ChartPoint]:
    return [
        ChartPoint(
            category.value[:5], total, CATEGORY_COLORS[i % len(CATEGORY_COLORS)]
        )
        for i, (category, total) in enumerate(budget_by_category(renovations, limit))
    ]


# === Summary ===

@dataclass
class PortfolioSummary:
    """Every portfolio-level figure shown on the dashboard and financials."""

    property_count: int
    total_value: int
    total_invested: int
    total_equity: int
    monthly_income: int
    monthly_expenses: int
    monthly_cashflow: int
    annual_income: int
    annual_expenses: int
    annual_cashflow: int
    cap_rate: float
    cash_on_cash: float
    roi: float
    equity_gain_percent: float
    renovation_spend: int
    renovation_remaining_budget: int
    budget_by_category: List[ChartPoint] = field(default_factory=list)
    cashflow_by_property: List[ChartPoint] = field(default_factory=list)
    value_by_property: List[ChartPoint] = field(default_factory=list)


def summarize_portfolio(
    properties: Sequence[Property],
    renovations: Sequence[Renovation],
    category_limit: Optional[int] = None,
) -> PortfolioSummary:
    """Compute the full portfolio summary."""
    limit = DEFAULT_CATEGORY_LIMIT if category_limit is None else category_limit
    return PortfolioSummary(
        property_count=len(properties),
        total_value=portfolio_value(properties),
        total_invested=portfolio_invested(properties),
        total_equity=portfolio_equity(properties),
        monthly_income=monthly_income(properties),
        monthly_expenses=monthly_expenses(properties),
        monthly_cashflow=monthly_cashflow(properties),
        annual_income=annual_income(properties),
        annual_expenses=annual_expenses(properties),
        annual_cashflow=annual_cashflow(properties),
        cap_rate=cap_rate(properties),
        cash_on_cash=cash_on_cash(properties),
        roi=portfolio_roi(properties),
        equity_gain_percent=equity_gain_percent(properties),
        renovation_spend=renovation_spend(renovations),
        renovation_remaining_budget=renovation_remaining_budget(renovations),
        budget_by_category=budget_by_category_chart(renovations, limit),
        cashflow_by_property=cashflow_by_property(properties),
        value_by_property=value_by_property(properties),
    )
