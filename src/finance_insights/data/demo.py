from datetime import date
from decimal import Decimal

from finance_insights.models import Budget, Goal, Transaction

# (id, amount, category, description, date, type)
_TRANSACTION_ROWS = (
    ("1", "45.50", "Food & Dining", "Campus Cafeteria Lunch", "2024-12-15", "expense"),
    ("2", "1200", "Income", "Part-time Job Payment", "2024-12-14", "income"),
    ("3", "89.99", "Education", "Chemistry Textbook", "2024-12-13", "expense"),
    ("4", "15.75", "Transportation", "Uber to Campus", "2024-12-12", "expense"),
    ("5", "12.99", "Entertainment", "Netflix Subscription", "2024-12-11", "expense"),
    ("6", "67.40", "Shopping", "Amazon Purchase - Supplies", "2024-12-10", "expense"),
    ("7", "24.30", "Food & Dining", "Coffee Shop Study Session", "2024-12-09", "expense"),
    ("8", "500", "Income", "Scholarship Disbursement", "2024-12-08", "income"),
    ("9", "156.00", "Education", "Lab Equipment Fee", "2024-12-07", "expense"),
    ("10", "32.50", "Health", "Pharmacy - Vitamins", "2024-12-06", "expense"),
    ("11", "78.20", "Food & Dining", "Grocery Shopping", "2024-11-28", "expense"),
    ("12", "1200", "Income", "Part-time Job Payment", "2024-11-15", "income"),
    ("13", "125.00", "Entertainment", "Concert Tickets", "2024-11-20", "expense"),
    ("14", "45.60", "Transportation", "Monthly Bus Pass", "2024-11-18", "expense"),
    ("15", "89.99", "Shopping", "Winter Jacket", "2024-11-10", "expense"),
)

# (id, category, limit, spent, color)
_BUDGET_ROWS = (
    ("1", "Food & Dining", "300", "167.50", "#3B82F6"),
    ("2", "Transportation", "100", "61.35", "#10B981"),
    ("3", "Entertainment", "150", "137.99", "#F59E0B"),
    ("4", "Education", "400", "245.99", "#8B5CF6"),
    ("5", "Shopping", "200", "156.90", "#EF4444"),
    ("6", "Health", "75", "32.50", "#06B6D4"),
)

# (id, name, target, current, deadline, category, priority)
_GOAL_ROWS = (
    ("1", "Emergency Fund", "2000", "850", "2025-06-01", "Savings", "high"),
    ("2", "New Laptop", "1500", "650", "2025-03-15", "Technology", "medium"),
    ("3", "Study Abroad", "5000", "1200", "2025-08-01", "Education", "high"),
    ("4", "Car Down Payment", "3000", "450", "2025-12-01", "Transportation", "low"),
)


def demo_transactions() -> list[Transaction]:
    return [
        Transaction(
            id=tx_id,
            amount=Decimal(amount),
            category=category,
            description=description,
            date=date.fromisoformat(day),
            type=tx_type,
        )
        for tx_id, amount, category, description, day, tx_type in _TRANSACTION_ROWS
    ]


def demo_budgets() -> list[Budget]:
    return [
        Budget(id=b_id, category=category, limit=Decimal(limit), spent=Decimal(spent), color=color)
        for b_id, category, limit, spent, color in _BUDGET_ROWS
    ]


def demo_goals() -> list[Goal]:
    return [
        Goal(
            id=g_id,
            name=name,
            target_amount=Decimal(target),
            current_amount=Decimal(current),
            deadline=date.fromisoformat(deadline),
            category=category,
            priority=priority,
        )
        for g_id, name, target, current, deadline, category, priority in _GOAL_ROWS
    ]
