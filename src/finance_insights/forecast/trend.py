from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from finance_insights.domain.months import month_label, next_month
from finance_insights.logger import get_logger
from finance_insights.models import SpendingTrend, Transaction

logger = get_logger(__name__)

FORECAST_WINDOW = 3
MAX_TREND_POINTS = 6


def monthly_totals(transactions: Sequence[Transaction]) -> list[tuple[str, Decimal]]:
    """Expense totals per month label, in the order each label is first seen."""
    totals: dict[str, Decimal] = {}
    for t in transactions:
        if t.type != "expense":
            continue
        label = month_label(t.date)
        totals[label] = totals.get(label, Decimal("0")) + t.amount
    return list(totals.items())


def average_delta(amounts: Sequence[Decimal]) -> Decimal:
    if len(amounts) < 2:
        return Decimal("0")
    deltas = [current - previous for previous, current in zip(amounts, amounts[1:])]
    return sum(deltas, Decimal("0")) / Decimal(len(amounts) - 1)


def forecast_trend(
    transactions: Sequence[Transaction],
    *,
    today: date | None = None,
    sort_by_date: bool = False,
) -> list[SpendingTrend]:
    """
    Monthly expense totals followed by a one-month forecast point.

    Months are emitted in first-seen order, so transactions must be supplied
    chronologically unless ``sort_by_date`` is set. The forecast is labelled
    with the month after ``today`` (defaults to the current date).
    """
    if sort_by_date:
        transactions = sorted(transactions, key=lambda t: t.date)

    trends = [SpendingTrend(month=label, amount=amount) for label, amount in monthly_totals(transactions)]

    window = [trend.amount for trend in trends[-FORECAST_WINDOW:]]
    if len(window) >= 2:
        predicted = max(Decimal("0"), window[-1] + average_delta(window))
        forecast_month = next_month(today or date.today())
        trends.append(SpendingTrend(month=month_label(forecast_month), amount=predicted, predicted=True))
        logger.debug("[TREND] Forecast %s: %s", month_label(forecast_month), predicted)

    return trends[-MAX_TREND_POINTS:]
