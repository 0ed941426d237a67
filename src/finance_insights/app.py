from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from finance_insights.api.routes import categorize, insights, ledger
from finance_insights.core import settings
from finance_insights.data.demo import demo_budgets, demo_goals, demo_transactions
from finance_insights.logger import get_logger, setup_logging
from finance_insights.manager import InsightService
from finance_insights.services.ledger import LedgerStore

logger = get_logger(__name__)


def build_ledger(service: InsightService) -> LedgerStore:
    if not settings.get_env_bool("SEED_DEMO_DATA", True):
        logger.info("[LEDGER] Starting with an empty ledger.")
        return LedgerStore(service)
    store = LedgerStore(
        service,
        transactions=demo_transactions(),
        budgets=demo_budgets(),
        goals=demo_goals(),
    )
    logger.info(
        "[LEDGER] Seeded demo data: %d transactions, %d budgets, %d goals.",
        len(store.transactions),
        len(store.budgets),
        len(store.goals),
    )
    return store


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        service = InsightService.from_env()
        app.state.service = service
        app.state.ledger = build_ledger(service)

        logger.info("Services initialized.")
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Finance Insights", lifespan=lifespan)

    app.include_router(categorize.router)
    app.include_router(insights.router)
    app.include_router(ledger.router)

    return app
