from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException

from finance_insights.api.dependencies import get_ledger, get_service
from finance_insights.api.schemas import (
    BudgetCreate,
    BudgetUpdate,
    GoalContribution,
    GoalCreate,
    GoalUpdate,
    TransactionCreate,
)
from finance_insights.domain.progress import (
    analytics_summary,
    budget_summary,
    dashboard_summary,
    goal_summary,
)
from finance_insights.logger import get_logger
from finance_insights.manager import InsightService
from finance_insights.models import Transaction
from finance_insights.services.ledger import LedgerStore, RecordNotFoundError

logger = get_logger(__name__)

router = APIRouter(prefix="/api")


@router.get("/transactions", response_model=list[Transaction])
async def list_transactions(
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
    category: str | None = None,
    search: str | None = None,
) -> list[Transaction]:
    return ledger.list_transactions(category=category, search=search)


@router.post("/transactions", response_model=Transaction, status_code=201)
async def add_transaction(
    req: TransactionCreate,
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> Transaction:
    transaction = ledger.add_transaction(**req.model_dump())
    logger.info("[LEDGER] Added %s %s '%s'.", transaction.type, transaction.amount, transaction.category)
    return transaction


@router.get("/budgets")
async def list_budgets(
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> list[dict[str, Any]]:
    return [budget_summary(budget) for budget in ledger.budgets]


@router.post("/budgets", status_code=201)
async def add_budget(
    req: BudgetCreate,
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> dict[str, Any]:
    return budget_summary(ledger.add_budget(**req.model_dump()))


@router.patch("/budgets/{budget_id}")
async def update_budget(
    budget_id: str,
    req: BudgetUpdate,
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> dict[str, Any]:
    try:
        budget = ledger.update_budget(budget_id, req.model_dump(exclude_none=True))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return budget_summary(budget)


@router.get("/goals")
async def list_goals(
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> list[dict[str, Any]]:
    today = date.today()
    return [goal_summary(goal, today) for goal in ledger.goals]


@router.post("/goals", status_code=201)
async def add_goal(
    req: GoalCreate,
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> dict[str, Any]:
    return goal_summary(ledger.add_goal(**req.model_dump()), date.today())


@router.patch("/goals/{goal_id}")
async def update_goal(
    goal_id: str,
    req: GoalUpdate,
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> dict[str, Any]:
    try:
        goal = ledger.update_goal(goal_id, req.model_dump(exclude_none=True))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return goal_summary(goal, date.today())


@router.post("/goals/{goal_id}/contribute")
async def contribute_to_goal(
    goal_id: str,
    req: GoalContribution,
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> dict[str, Any]:
    try:
        goal = ledger.contribute_to_goal(goal_id, req.amount)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    logger.info("[LEDGER] Goal '%s' now at %s of %s.", goal.name, goal.current_amount, goal.target_amount)
    return goal_summary(goal, date.today())


@router.get("/summary")
async def get_summary(
    service: Annotated[InsightService, Depends(get_service)],
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> dict[str, Any]:
    return dashboard_summary(
        ledger.transactions,
        ledger.budgets,
        ledger.goals,
        date.today(),
        match_year=service.month_matching == "year_month",
    )


@router.get("/analytics")
async def get_analytics(
    service: Annotated[InsightService, Depends(get_service)],
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> dict[str, Any]:
    return analytics_summary(
        ledger.transactions,
        date.today(),
        match_year=service.month_matching == "year_month",
    )
