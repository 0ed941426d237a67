from typing import Annotated

from fastapi import APIRouter, Depends

from finance_insights.api.dependencies import get_ledger, get_service
from finance_insights.api.schemas import InsightsRequest, TrendRequest
from finance_insights.manager import InsightService
from finance_insights.models import PredictiveInsight, SpendingTrend
from finance_insights.services.ledger import LedgerStore

router = APIRouter()


@router.post("/insights", response_model=list[PredictiveInsight])
async def generate_insights(
    req: InsightsRequest,
    service: Annotated[InsightService, Depends(get_service)],
) -> list[PredictiveInsight]:
    return service.insights(req.transactions, req.budgets, req.reference_date)


@router.post("/trend", response_model=list[SpendingTrend])
async def forecast_trend(
    req: TrendRequest,
    service: Annotated[InsightService, Depends(get_service)],
) -> list[SpendingTrend]:
    return service.trend(req.transactions, today=req.today)


@router.get("/api/insights", response_model=list[PredictiveInsight])
async def ledger_insights(
    service: Annotated[InsightService, Depends(get_service)],
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> list[PredictiveInsight]:
    return service.insights(ledger.transactions, ledger.budgets)


@router.get("/api/trend", response_model=list[SpendingTrend])
async def ledger_trend(
    service: Annotated[InsightService, Depends(get_service)],
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
) -> list[SpendingTrend]:
    # The store keeps newest entries first; the forecaster needs oldest first.
    return service.trend(ledger.chronological_transactions())
