from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

TransactionType = Literal["income", "expense"]
BudgetPeriod = Literal["monthly", "weekly"]
InsightType = Literal["warning", "suggestion", "achievement"]
GoalPriority = Literal["high", "medium", "low"]


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    amount: Decimal = Field(ge=0)
    category: str
    description: str
    date: date
    type: TransactionType
    is_recurring: bool = False
    predicted_category: Optional[str] = None
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class Budget(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: str
    limit: Decimal = Field(ge=0)
    spent: Decimal = Field(default=Decimal("0"), ge=0)
    period: BudgetPeriod = "monthly"
    color: str = "#3B82F6"


class Goal(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    target_amount: Decimal = Field(ge=0)
    current_amount: Decimal = Field(default=Decimal("0"), ge=0)
    deadline: date
    category: str
    priority: GoalPriority = "medium"


class Category(BaseModel):
    name: str


class CategorizationResult(BaseModel):
    category: Category
    confidence: float = Field(ge=0.0, le=1.0)
    source: str  # "keyword" or "fallback"


class PredictiveInsight(BaseModel):
    id: str
    type: InsightType
    title: str
    description: str
    confidence: float = Field(ge=0.0, le=1.0)
    actionable: bool


class SpendingTrend(BaseModel):
    month: str  # "Dec 24"
    amount: Decimal = Field(ge=0)
    predicted: bool = False
