from typing import Annotated

from fastapi import APIRouter, Depends

from finance_insights.api.dependencies import get_service
from finance_insights.api.schemas import CategorizeRequest
from finance_insights.manager import InsightService
from finance_insights.models import CategorizationResult

router = APIRouter()


@router.post("/categorize", response_model=CategorizationResult)
async def categorize_description(
    req: CategorizeRequest,
    service: Annotated[InsightService, Depends(get_service)],
) -> CategorizationResult:
    return service.categorize(req.description)


@router.get("/categories")
async def get_categories(
    service: Annotated[InsightService, Depends(get_service)],
) -> list[str]:
    return service.categories()


@router.get("/api/suggest", response_model=CategorizationResult | None)
async def suggest_category(
    service: Annotated[InsightService, Depends(get_service)],
    description: str = "",
) -> CategorizationResult | None:
    return service.suggest(description)
