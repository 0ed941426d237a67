from datetime import date
from decimal import Decimal

from finance_insights.domain.months import days_in_month, month_label, next_month
from finance_insights.forecast.trend import average_delta, forecast_trend, monthly_totals
from finance_insights.models import Transaction

TODAY = date(2024, 12, 18)


def _tx(day: date, amount: str, type: str = "expense") -> Transaction:
    return Transaction(
        id=f"{day}-{amount}-{type}",
        amount=Decimal(amount),
        category="Other",
        description="test",
        date=day,
        type=type,
    )


def test_single_month_has_no_forecast():
    trends = forecast_trend([_tx(date(2024, 3, 1), "40"), _tx(date(2024, 3, 9), "60")], today=TODAY)
    assert len(trends) == 1
    assert trends[0].month == "Mar 24"
    assert trends[0].amount == Decimal("100")
    assert trends[0].predicted is False

def test_forecast_uses_last_three_months():
    transactions = [
        _tx(date(2024, 1, 10), "100"),
        _tx(date(2024, 2, 10), "150"),
        _tx(date(2024, 3, 10), "250"),
        _tx(date(2024, 4, 10), "300"),
    ]
    trends = forecast_trend(transactions, today=TODAY)
    assert len(trends) == 5
    assert [t.predicted for t in trends] == [False, False, False, False, True]
    forecast = trends[-1]
    # deltas 100 and 50 over the trailing window
    assert forecast.amount == Decimal("375")
    assert forecast.month == "Jan 25"

def test_forecast_with_two_months():
    trends = forecast_trend([_tx(date(2024, 5, 1), "100"), _tx(date(2024, 6, 1), "130")], today=TODAY)
    assert trends[-1].amount == Decimal("160")
    assert trends[-1].predicted is True

def test_forecast_clamped_at_zero():
    trends = forecast_trend([_tx(date(2024, 5, 1), "300"), _tx(date(2024, 6, 1), "100")], today=TODAY)
    assert trends[-1].amount == Decimal("0")

def test_long_history_truncated_to_six_points():
    transactions = [_tx(date(2024, month, 1), str(month * 10)) for month in range(1, 9)]
    trends = forecast_trend(transactions, today=TODAY)
    assert len(trends) == 6
    assert [t.month for t in trends[:5]] == ["Apr 24", "May 24", "Jun 24", "Jul 24", "Aug 24"]
    assert trends[-1].predicted is True
    assert trends[-1].amount == Decimal("90")

def test_income_is_ignored():
    transactions = [_tx(date(2024, 5, 1), "1000", type="income"), _tx(date(2024, 5, 2), "20")]
    trends = forecast_trend(transactions, today=TODAY)
    assert [(t.month, t.amount) for t in trends] == [("May 24", Decimal("20"))]

def test_first_seen_order_unless_sorted():
    transactions = [_tx(date(2024, 2, 1), "20"), _tx(date(2024, 1, 1), "10")]
    assert [label for label, _ in monthly_totals(transactions)] == ["Feb 24", "Jan 24"]

    trends = forecast_trend(transactions, today=TODAY, sort_by_date=True)
    assert [t.month for t in trends] == ["Jan 24", "Feb 24", "Jan 25"]
    assert trends[-1].amount == Decimal("30")

def test_empty_transactions():
    assert forecast_trend([], today=TODAY) == []

def test_average_delta():
    assert average_delta([Decimal("10")]) == Decimal("0")
    assert average_delta([Decimal("10"), Decimal("40"), Decimal("40")]) == Decimal("15")

def test_month_helpers():
    assert month_label(date(2009, 7, 4)) == "Jul 09"
    assert next_month(date(2024, 12, 31)) == date(2025, 1, 1)
    assert next_month(date(2024, 1, 31)) == date(2024, 2, 1)
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
