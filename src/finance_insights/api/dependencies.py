from fastapi import HTTPException, Request

from finance_insights.manager import InsightService
from finance_insights.services.ledger import LedgerStore


def get_service(request: Request) -> InsightService:
    service = getattr(request.app.state, "service", None)
    if not service:
        raise HTTPException(status_code=500, detail="Service not initialized")
    return service


def get_ledger(request: Request) -> LedgerStore:
    ledger = getattr(request.app.state, "ledger", None)
    if not ledger:
        raise HTTPException(status_code=500, detail="Ledger not initialized")
    return ledger
