import uuid
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Any

from finance_insights.logger import get_logger
from finance_insights.manager import InsightService
from finance_insights.models import Budget, Goal, Transaction, TransactionType

logger = get_logger(__name__)


class RecordNotFoundError(LookupError):
    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind} '{record_id}' not found")
        self.kind = kind
        self.record_id = record_id


def _new_id() -> str:
    return uuid.uuid4().hex


class LedgerStore:
    """
    In-memory transactions, budgets and goals for a single user.

    Records are immutable; updates replace them. Transactions are kept
    newest-entry first.
    """

    def __init__(
        self,
        service: InsightService,
        transactions: Iterable[Transaction] = (),
        budgets: Iterable[Budget] = (),
        goals: Iterable[Goal] = (),
    ) -> None:
        self.service = service
        self.transactions: list[Transaction] = list(transactions)
        self.budgets: list[Budget] = list(budgets)
        self.goals: list[Goal] = list(goals)

    def list_transactions(self, category: str | None = None, search: str | None = None) -> list[Transaction]:
        needle = (search or "").lower()
        results = []
        for t in self.transactions:
            if category and category != "All" and t.category != category:
                continue
            if needle and needle not in t.description.lower() and needle not in t.category.lower():
                continue
            results.append(t)
        return results

    def chronological_transactions(self) -> list[Transaction]:
        return sorted(self.transactions, key=lambda t: t.date)

    def add_transaction(
        self,
        *,
        amount: Decimal,
        description: str,
        date: date,
        type: TransactionType = "expense",
        category: str | None = None,
        is_recurring: bool = False,
    ) -> Transaction:
        fields: dict[str, Any] = {}
        if not category and description:
            prediction = self.service.categorize(description)
            category = prediction.category.name
            fields["predicted_category"] = prediction.category.name
            fields["confidence"] = prediction.confidence
            logger.info(
                "[LEDGER] Auto-categorized '%s' as '%s' (%.2f).",
                description[:50],
                category,
                prediction.confidence,
            )

        transaction = Transaction(
            id=_new_id(),
            amount=amount,
            category=category or "Other",
            description=description,
            date=date,
            type=type,
            is_recurring=is_recurring,
            **fields,
        )
        self.transactions.insert(0, transaction)

        if transaction.type == "expense":
            self.budgets = [
                b.model_copy(update={"spent": b.spent + transaction.amount})
                if b.category == transaction.category else b
                for b in self.budgets
            ]
        return transaction

    def add_budget(self, **fields: Any) -> Budget:
        fields.pop("spent", None)
        budget = Budget(id=_new_id(), spent=Decimal("0"), **fields)
        self.budgets.append(budget)
        return budget

    def update_budget(self, budget_id: str, updates: dict[str, Any]) -> Budget:
        return self._replace(self.budgets, "Budget", budget_id, updates)

    def add_goal(self, **fields: Any) -> Goal:
        goal = Goal(id=_new_id(), **fields)
        self.goals.append(goal)
        return goal

    def update_goal(self, goal_id: str, updates: dict[str, Any]) -> Goal:
        return self._replace(self.goals, "Goal", goal_id, updates)

    def contribute_to_goal(self, goal_id: str, amount: Decimal) -> Goal:
        """Add savings to a goal; the balance never passes the target."""
        goal = next((g for g in self.goals if g.id == goal_id), None)
        if goal is None:
            raise RecordNotFoundError("Goal", goal_id)
        current = min(goal.current_amount + amount, goal.target_amount)
        return self._replace(self.goals, "Goal", goal_id, {"current_amount": current})

    @staticmethod
    def _replace(records: list[Any], kind: str, record_id: str, updates: dict[str, Any]) -> Any:
        for index, record in enumerate(records):
            if record.id == record_id:
                # Re-validate so updates cannot bypass field constraints.
                updated = type(record).model_validate({**record.model_dump(), **updates, "id": record_id})
                records[index] = updated
                return updated
        raise RecordNotFoundError(kind, record_id)
