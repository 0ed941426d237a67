"""
Budget and projected-spending insights for the current month.

Transactions are scoped to "this month" relative to a reference date. The
default ``month_matching="month"`` compares the calendar month number only,
so the same month of earlier years is counted too; pass ``"year_month"`` to
require the year to match as well.
"""
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from typing import Literal

from finance_insights.domain.money import to_cents
from finance_insights.domain.months import days_in_month, same_month
from finance_insights.logger import get_logger
from finance_insights.models import Budget, PredictiveInsight, Transaction

logger = get_logger(__name__)

MonthMatching = Literal["month", "year_month"]

DEFAULT_ALERT_RATIO = Decimal("0.8")
DEFAULT_PROJECTION_THRESHOLD = Decimal("1000")
BUDGET_INSIGHT_CONFIDENCE = 0.9
PROJECTION_INSIGHT_CONFIDENCE = 0.85


def _format_limit(value: Decimal) -> str:
    # 300 -> "300", 300.50 -> "300.5"
    return format(value.normalize(), "f")


def scope_expenses(
    transactions: Iterable[Transaction],
    reference_date: date,
    *,
    month_matching: MonthMatching = "month",
) -> list[Transaction]:
    match_year = month_matching == "year_month"
    return [
        t for t in transactions
        if t.type == "expense" and same_month(t.date, reference_date, match_year=match_year)
    ]


def budget_insight(budget: Budget, spent: Decimal, alert_ratio: Decimal = DEFAULT_ALERT_RATIO) -> PredictiveInsight | None:
    if budget.limit <= 0:
        return None
    if spent < budget.limit * alert_ratio:
        return None

    return PredictiveInsight(
        id=f"budget-{budget.id}",
        type="warning" if spent > budget.limit else "suggestion",
        title=f"{budget.category} Budget Alert",
        description=(
            f"You've spent ${to_cents(spent)} of your ${_format_limit(budget.limit)} "
            f"{budget.category} budget"
        ),
        confidence=BUDGET_INSIGHT_CONFIDENCE,
        actionable=True,
    )


def projected_spending(total: Decimal, reference_date: date) -> Decimal | None:
    """Linear month-end projection from spending so far; None when no days have elapsed."""
    elapsed_days = reference_date.day
    if elapsed_days <= 0:
        return None
    average_daily = total / Decimal(elapsed_days)
    return average_daily * days_in_month(reference_date.year, reference_date.month)


def generate_insights(
    transactions: Sequence[Transaction],
    budgets: Sequence[Budget],
    reference_date: date,
    *,
    month_matching: MonthMatching = "month",
    alert_ratio: Decimal = DEFAULT_ALERT_RATIO,
    projection_threshold: Decimal = DEFAULT_PROJECTION_THRESHOLD,
) -> list[PredictiveInsight]:
    insights: list[PredictiveInsight] = []
    scoped = scope_expenses(transactions, reference_date, month_matching=month_matching)

    for budget in budgets:
        spent = sum((t.amount for t in scoped if t.category == budget.category), Decimal("0"))
        insight = budget_insight(budget, spent, alert_ratio)
        if insight:
            insights.append(insight)
        elif budget.limit <= 0:
            logger.debug("[INSIGHTS] Skipping budget %s with zero limit.", budget.id)

    total = sum((t.amount for t in scoped), Decimal("0"))
    projected = projected_spending(total, reference_date)
    if projected is not None and projected > projection_threshold:
        insights.append(PredictiveInsight(
            id="high-spending",
            type="warning",
            title="High Spending Alert",
            description=(
                f"Based on current trends, you're projected to spend ${to_cents(projected)} this month"
            ),
            confidence=PROJECTION_INSIGHT_CONFIDENCE,
            actionable=True,
        ))

    logger.debug(
        "[INSIGHTS] %d scoped expense(s), %d budget(s) -> %d insight(s)",
        len(scoped), len(budgets), len(insights),
    )
    return insights
