"""
Portfolio overview API endpoints.

These endpoints return the figures behind the dashboard and financials
views, both raw and formatted for display.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from app.api.dependencies import get_clock, get_record_store
from app.calculations import filters, metrics
from app.calculations.formatting import (
    format_currency,
    format_currency_short,
    format_percent,
    greeting,
    property_count_label,
)
from app.config import get_settings
from app.records import Priority, RenovationStatus
from app.records.factory import Clock
from app.store import RecordStore

router = APIRouter()


@router.get("/dashboard")
async def get_dashboard(
    store: RecordStore = Depends(get_record_store),
    clock: Clock = Depends(get_clock),
):
    """Headline figures, the needs-attention list and per-property badges."""
    settings = get_settings()
    properties = store.load_properties().value
    renovations = store.load_renovations().value

    total_value = metrics.portfolio_value(properties)
    total_equity = metrics.portfolio_equity(properties)
    monthly_cashflow = metrics.monthly_cashflow(properties)
    remaining_budget = metrics.renovation_remaining_budget(renovations)
    pending = filters.filter_by_status(renovations, RenovationStatus.pending)
    in_progress = filters.filter_by_status(renovations, RenovationStatus.in_progress)
    high_priority = filters.high_priority_open(renovations)
    counts = filters.active_counts_by_property(properties, renovations)

    return {
        "greeting": greeting(clock()),
        "property_count": len(properties),
        "property_count_label": property_count_label(len(properties)),
        "total_value": total_value,
        "total_value_display": format_currency(total_value),
        "total_equity": total_equity,
        "total_equity_display": format_currency_short(total_equity),
        "roi": metrics.portfolio_roi(properties),
        "roi_display": format_percent(metrics.portfolio_roi(properties), 1),
        "monthly_cashflow": monthly_cashflow,
        "monthly_cashflow_display": format_currency(monthly_cashflow),
        "annual_cashflow": metrics.annual_cashflow(properties),
        "pending_renovations": len(pending),
        "in_progress_renovations": len(in_progress),
        "high_priority_renovations": len(high_priority),
        "renovation_budget": remaining_budget,
        "renovation_budget_display": format_currency_short(remaining_budget),
        "attention": [
            {
                "id": item.renovation.id,
                "title": item.renovation.title,
                "property_name": item.property_name,
                "badge": item.badge,
                "estimated_cost_display": format_currency(item.renovation.estimated_cost),
            }
            for item in filters.attention_items(
                properties, renovations, settings.attention_limit
            )
        ],
        "properties": [
            {
                "id": p.id,
                "name": p.name,
                "current_value": p.current_value,
                "monthly_cashflow": metrics.property_monthly_cashflow(p),
                "active_renovations": counts[p.id],
            }
            for p in properties
        ],
    }


@router.get("/financials")
async def get_financials(
    store: RecordStore = Depends(get_record_store),
):
    """Full portfolio financial summary with chart series."""
    settings = get_settings()
    properties = store.load_properties().value
    renovations = store.load_renovations().value

    summary = metrics.summarize_portfolio(
        properties, renovations, settings.category_budget_limit
    )
    by_priority = filters.group_by_priority(filters.active_renovations(renovations))

    return {
        "summary": asdict(summary),
        "display": {
            "total_value": format_currency_short(summary.total_value),
            "total_invested": format_currency_short(summary.total_invested),
            "total_equity": format_currency_short(summary.total_equity),
            "equity_gain": f"{format_percent(summary.equity_gain_percent, 1)} gain",
            "monthly_income": format_currency(summary.monthly_income),
            "monthly_expenses": format_currency(summary.monthly_expenses),
            "monthly_cashflow": format_currency(summary.monthly_cashflow),
            "annual_income": format_currency(summary.annual_income),
            "annual_expenses": format_currency(summary.annual_expenses),
            "annual_cashflow": format_currency(summary.annual_cashflow),
            "cap_rate": format_percent(summary.cap_rate, 2),
            "cash_on_cash": format_percent(summary.cash_on_cash, 2),
            "renovation_spend": format_currency(summary.renovation_spend),
            "renovation_remaining_budget": format_currency(
                summary.renovation_remaining_budget
            ),
        },
        "open_by_priority": {
            priority.value: len(by_priority[priority]) for priority in Priority
        },
    }
