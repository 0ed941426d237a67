from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from finance_insights.classifiers.base import Classifier
from finance_insights.classifiers.keyword import KeywordClassifier
from finance_insights.core import settings
from finance_insights.forecast.trend import forecast_trend
from finance_insights.insights.generator import MonthMatching, generate_insights
from finance_insights.logger import get_logger
from finance_insights.models import (
    Budget,
    CategorizationResult,
    PredictiveInsight,
    SpendingTrend,
    Transaction,
)

logger = get_logger(__name__)


class InsightService:
    """
    Holds engine options only; every call recomputes from the records passed in.
    """

    def __init__(self,
                 classifier: Classifier | None = None,
                 *,
                 auto_suggest_threshold: float = settings.DEFAULT_AUTO_SUGGEST_THRESHOLD,
                 month_matching: MonthMatching = "month",
                 alert_ratio: Decimal = settings.DEFAULT_BUDGET_ALERT_RATIO,
                 projection_threshold: Decimal = settings.DEFAULT_PROJECTED_SPENDING_THRESHOLD,
                 sort_trend_input: bool = False):
        self.classifier = classifier or KeywordClassifier()
        self.auto_suggest_threshold = auto_suggest_threshold
        self.month_matching: MonthMatching = month_matching
        self.alert_ratio = alert_ratio
        self.projection_threshold = projection_threshold
        self.sort_trend_input = sort_trend_input

    @classmethod
    def from_env(cls) -> "InsightService":
        service = cls(
            auto_suggest_threshold=settings.get_env_float(
                "AUTO_SUGGEST_THRESHOLD",
                settings.DEFAULT_AUTO_SUGGEST_THRESHOLD,
                min_value=0.0,
                max_value=1.0,
            ),
            month_matching="year_month" if settings.get_env_bool("STRICT_MONTH_MATCHING") else "month",
            alert_ratio=settings.get_env_decimal(
                "BUDGET_ALERT_RATIO", settings.DEFAULT_BUDGET_ALERT_RATIO, min_value=Decimal("0")
            ),
            projection_threshold=settings.get_env_decimal(
                "PROJECTED_SPENDING_THRESHOLD",
                settings.DEFAULT_PROJECTED_SPENDING_THRESHOLD,
                min_value=Decimal("0"),
            ),
            sort_trend_input=settings.get_env_bool("SORT_TREND_INPUT"),
        )
        logger.info(
            "Insight engine configured: month_matching=%s, alert_ratio=%s, projection_threshold=%s",
            service.month_matching,
            service.alert_ratio,
            service.projection_threshold,
        )
        return service

    def categorize(self, description: str) -> CategorizationResult:
        return self.classifier.classify(description)

    def suggest(self, description: str) -> CategorizationResult | None:
        result = self.classifier.suggest(description, self.auto_suggest_threshold)
        if result is None:
            logger.debug("No suggestion above %.2f for '%s'", self.auto_suggest_threshold, description[:50])
        return result

    def categories(self) -> list[str]:
        return self.classifier.categories()

    def insights(
        self,
        transactions: Sequence[Transaction],
        budgets: Sequence[Budget],
        reference_date: date | None = None,
    ) -> list[PredictiveInsight]:
        return generate_insights(
            transactions,
            budgets,
            reference_date or date.today(),
            month_matching=self.month_matching,
            alert_ratio=self.alert_ratio,
            projection_threshold=self.projection_threshold,
        )

    def trend(self, transactions: Sequence[Transaction], today: date | None = None) -> list[SpendingTrend]:
        return forecast_trend(transactions, today=today, sort_by_date=self.sort_trend_input)
