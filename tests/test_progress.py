from datetime import date
from decimal import Decimal

import pytest

from finance_insights.data.demo import demo_budgets, demo_goals, demo_transactions
from finance_insights.domain.months import previous_month
from finance_insights.domain.progress import (
    analytics_summary,
    average_goal_progress,
    budget_status,
    budget_summary,
    category_totals,
    dashboard_summary,
    goal_progress,
    goal_summary,
)
from finance_insights.models import Budget, Goal, Transaction

TODAY = date(2024, 12, 15)


def _tx(amount: str, category: str = "Other", day: date = TODAY, type: str = "expense"):
    return Transaction(
        id=f"{category}-{day}-{amount}", amount=Decimal(amount), category=category,
        description="test", date=day, type=type,
    )


@pytest.mark.parametrize(
    ("spent", "expected"),
    [("100", "exceeded"), ("120", "exceeded"), ("80", "warning"), ("79.99", "on_track")],
)
def test_budget_status(spent, expected):
    budget = Budget(id="1", category="Food & Dining", limit=Decimal("100"), spent=Decimal(spent))
    assert budget_status(budget) == expected

def test_zero_limit_budget_is_on_track():
    budget = Budget(id="1", category="Food & Dining", limit=Decimal("0"), spent=Decimal("10"))
    summary = budget_summary(budget)
    assert summary["status"] == "on_track"
    assert summary["usage_percent"] == 0.0

def test_budget_summary_fields():
    budget = Budget(id="1", category="Health", limit=Decimal("75"), spent=Decimal("32.50"))
    summary = budget_summary(budget)
    assert summary["remaining"] == "42.50"
    assert summary["usage_percent"] == 43.3
    assert summary["category"] == "Health"

def test_goal_progress_and_summary():
    goal = Goal(
        id="1", name="Emergency Fund", target_amount=Decimal("2000"), current_amount=Decimal("850"),
        deadline=date(2025, 6, 1), category="Savings", priority="high",
    )
    assert goal_progress(goal) == Decimal("42.5")
    summary = goal_summary(goal, date(2025, 5, 1))
    assert summary["progress_percent"] == 42.5
    assert summary["remaining"] == "1150"
    assert summary["days_left"] == 31

def test_goal_with_zero_target():
    goal = Goal(id="1", name="x", target_amount=Decimal("0"), deadline=date(2025, 1, 1), category="Savings")
    assert goal_progress(goal) == Decimal("0")

def test_dashboard_summary_over_demo_data():
    summary = dashboard_summary(demo_transactions(), demo_budgets(), demo_goals(), TODAY)
    assert summary["income"] == "1700"
    assert summary["expenses"] == "444.43"
    assert summary["net_balance"] == "1255.57"
    assert summary["budget_spent"] == "802.23"
    assert summary["budget_limit"] == "1225"
    assert summary["budget_usage_percent"] == 65.5
    assert summary["goal_progress_percent"] == 31.2

def test_dashboard_summary_guards_empty_inputs():
    zero_limit = Budget(id="1", category="Health", limit=Decimal("0"), spent=Decimal("20"))
    summary = dashboard_summary([], [zero_limit], [], TODAY)
    assert summary["budget_usage_percent"] == 0.0
    assert summary["goal_progress_percent"] == 0.0
    assert summary["net_balance"] == "0"
    assert average_goal_progress([]) == Decimal("0")

def test_dashboard_summary_strict_month_matching():
    transactions = [_tx("40"), _tx("60", day=date(2023, 12, 1))]
    assert dashboard_summary(transactions, [], [], TODAY)["expenses"] == "100"
    assert dashboard_summary(transactions, [], [], TODAY, match_year=True)["expenses"] == "40"

def test_category_totals_sorted_and_capped():
    transactions = [_tx(str(n), category=f"c{n}") for n in range(1, 8)]
    transactions.append(_tx("100", category="c1", type="income"))
    totals = category_totals(transactions)
    assert [category for category, _ in totals] == ["c7", "c6", "c5", "c4", "c3", "c2"]
    assert totals[0] == ("c7", Decimal("7"))

def test_analytics_summary_over_demo_data():
    summary = analytics_summary(demo_transactions(), TODAY)
    assert summary["top_categories"][:2] == [
        {"category": "Education", "amount": "245.99"},
        {"category": "Shopping", "amount": "157.39"},
    ]
    assert len(summary["top_categories"]) == 6
    assert summary["this_month_spending"] == "444.43"
    assert summary["last_month_spending"] == "338.79"
    assert summary["monthly_change"] == "105.64"
    assert summary["monthly_change_percent"] == 31.2
    assert summary["average_daily_spending"] == "29.63"
    assert summary["total_income"] == "2900"
    assert summary["total_expenses"] == "783.22"
    assert summary["savings_rate_percent"] == 73.0

def test_january_compares_with_december():
    assert previous_month(date(2025, 1, 10)) == date(2024, 12, 1)
    summary = analytics_summary([_tx("50", day=date(2024, 12, 5))], date(2025, 1, 10))
    assert summary["last_month_spending"] == "50"
    assert summary["this_month_spending"] == "0"
    assert summary["monthly_change_percent"] == -100.0

def test_analytics_zero_divisors():
    summary = analytics_summary([_tx("30")], TODAY)
    assert summary["last_month_spending"] == "0"
    assert summary["monthly_change_percent"] == 0.0
    assert summary["savings_rate_percent"] == 0.0

def test_average_daily_spending_rounds_half_up():
    summary = analytics_summary([_tx("45.365", day=date(2024, 12, 1))], date(2024, 12, 1))
    assert summary["average_daily_spending"] == "45.37"
