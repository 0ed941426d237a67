from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from finance_insights.models import (
    Budget,
    BudgetPeriod,
    GoalPriority,
    Transaction,
    TransactionType,
)


class CategorizeRequest(BaseModel):
    description: str


class InsightsRequest(BaseModel):
    transactions: list[Transaction] = Field(default_factory=list)
    budgets: list[Budget] = Field(default_factory=list)
    reference_date: Optional[date] = None


class TrendRequest(BaseModel):
    transactions: list[Transaction] = Field(default_factory=list)
    today: Optional[date] = None


class TransactionCreate(BaseModel):
    amount: Decimal = Field(ge=0)
    description: str
    date: date
    type: TransactionType = "expense"
    category: Optional[str] = None  # empty -> auto-categorized
    is_recurring: bool = False


class BudgetCreate(BaseModel):
    category: str
    limit: Decimal = Field(gt=0)
    period: BudgetPeriod = "monthly"
    color: str = "#3B82F6"


class BudgetUpdate(BaseModel):
    category: Optional[str] = None
    limit: Optional[Decimal] = Field(default=None, gt=0)
    spent: Optional[Decimal] = Field(default=None, ge=0)
    period: Optional[BudgetPeriod] = None
    color: Optional[str] = None


class GoalCreate(BaseModel):
    name: str
    target_amount: Decimal = Field(gt=0)
    current_amount: Decimal = Field(default=Decimal("0"), ge=0)
    deadline: date
    category: str
    priority: GoalPriority = "medium"


class GoalUpdate(BaseModel):
    name: Optional[str] = None
    target_amount: Optional[Decimal] = Field(default=None, gt=0)
    current_amount: Optional[Decimal] = Field(default=None, ge=0)
    deadline: Optional[date] = None
    category: Optional[str] = None
    priority: Optional[GoalPriority] = None


class GoalContribution(BaseModel):
    amount: Decimal = Field(gt=0)
