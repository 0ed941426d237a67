from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from typing import Literal

from finance_insights.domain.money import to_cents
from finance_insights.domain.months import days_until, previous_month, same_month
from finance_insights.models import Budget, Goal, Transaction

BudgetStatus = Literal["exceeded", "warning", "on_track"]

_HUNDRED = Decimal("100")
TOP_CATEGORY_LIMIT = 6


def budget_usage(budget: Budget) -> Decimal:
    """Percentage of the limit already spent; 0 for a zero limit."""
    if budget.limit <= 0:
        return Decimal("0")
    return budget.spent / budget.limit * _HUNDRED


def budget_status(budget: Budget) -> BudgetStatus:
    usage = budget_usage(budget)
    if usage >= 100:
        return "exceeded"
    if usage >= 80:
        return "warning"
    return "on_track"


def budget_summary(budget: Budget) -> dict[str, object]:
    return {
        **budget.model_dump(mode="json"),
        "remaining": str(budget.limit - budget.spent),
        "usage_percent": round(float(budget_usage(budget)), 1),
        "status": budget_status(budget),
    }


def goal_progress(goal: Goal) -> Decimal:
    if goal.target_amount <= 0:
        return Decimal("0")
    return goal.current_amount / goal.target_amount * _HUNDRED


def goal_summary(goal: Goal, today: date) -> dict[str, object]:
    return {
        **goal.model_dump(mode="json"),
        "progress_percent": round(float(goal_progress(goal)), 1),
        "remaining": str(max(Decimal("0"), goal.target_amount - goal.current_amount)),
        "days_left": days_until(goal.deadline, today),
    }


def _percent(part: Decimal, whole: Decimal) -> Decimal:
    if whole <= 0:
        return Decimal("0")
    return part / whole * _HUNDRED


def _total(transactions: Iterable[Transaction], type: str) -> Decimal:
    return sum((t.amount for t in transactions if t.type == type), Decimal("0"))


def average_goal_progress(goals: Sequence[Goal]) -> Decimal:
    if not goals:
        return Decimal("0")
    return sum((goal_progress(goal) for goal in goals), Decimal("0")) / len(goals)


def category_totals(transactions: Iterable[Transaction], limit: int = TOP_CATEGORY_LIMIT) -> list[tuple[str, Decimal]]:
    """Expense totals per category, largest first."""
    totals: dict[str, Decimal] = {}
    for t in transactions:
        if t.type == "expense":
            totals[t.category] = totals.get(t.category, Decimal("0")) + t.amount
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)[:limit]


def dashboard_summary(
    transactions: Sequence[Transaction],
    budgets: Sequence[Budget],
    goals: Sequence[Goal],
    today: date,
    *,
    match_year: bool = False,
) -> dict[str, object]:
    this_month = [t for t in transactions if same_month(t.date, today, match_year=match_year)]
    income = _total(this_month, "income")
    expenses = _total(this_month, "expense")
    budget_spent = sum((b.spent for b in budgets), Decimal("0"))
    budget_limit = sum((b.limit for b in budgets), Decimal("0"))
    return {
        "income": str(income),
        "expenses": str(expenses),
        "net_balance": str(income - expenses),
        "budget_spent": str(budget_spent),
        "budget_limit": str(budget_limit),
        "budget_usage_percent": round(float(_percent(budget_spent, budget_limit)), 1),
        "goal_progress_percent": round(float(average_goal_progress(goals)), 1),
    }


def analytics_summary(
    transactions: Sequence[Transaction],
    today: date,
    *,
    match_year: bool = False,
) -> dict[str, object]:
    expenses = [t for t in transactions if t.type == "expense"]
    last_month = previous_month(today)
    this_month_spend = sum(
        (t.amount for t in expenses if same_month(t.date, today, match_year=match_year)), Decimal("0")
    )
    last_month_spend = sum(
        (t.amount for t in expenses if same_month(t.date, last_month, match_year=match_year)), Decimal("0")
    )
    change = this_month_spend - last_month_spend
    total_income = _total(transactions, "income")
    total_expenses = _total(transactions, "expense")
    return {
        "top_categories": [
            {"category": category, "amount": str(amount)}
            for category, amount in category_totals(expenses)
        ],
        "this_month_spending": str(this_month_spend),
        "last_month_spending": str(last_month_spend),
        "monthly_change": str(change),
        "monthly_change_percent": round(float(_percent(change, last_month_spend)), 1),
        "average_daily_spending": str(to_cents(this_month_spend / today.day)),
        "total_income": str(total_income),
        "total_expenses": str(total_expenses),
        "savings_rate_percent": round(float(_percent(total_income - total_expenses, total_income)), 1),
    }
