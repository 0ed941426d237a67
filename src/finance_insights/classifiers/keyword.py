from decimal import Decimal
from typing import Optional

from finance_insights.logger import get_logger
from finance_insights.models import CategorizationResult, Category

from .base import Classifier

logger = get_logger(__name__)

FALLBACK_CATEGORY = "Other"

# Evaluation order is significant: the first category with any keyword hit wins.
CategoryRules = tuple[tuple[str, tuple[str, ...]], ...]

DEFAULT_RULES: CategoryRules = (
    ("Food & Dining", (
        "restaurant", "food", "meal", "pizza", "coffee",
        "lunch", "dinner", "breakfast", "snack", "cafeteria",
    )),
    ("Education", (
        "book", "tuition", "course", "textbook", "supplies",
        "lab", "library", "academic", "school",
    )),
    ("Transportation", (
        "gas", "uber", "bus", "train", "parking", "taxi", "metro", "fuel", "car",
    )),
    ("Entertainment", (
        "movie", "game", "music", "netflix", "spotify", "concert", "party", "club",
    )),
    ("Shopping", (
        "amazon", "store", "clothes", "shopping", "retail", "purchase", "buy",
    )),
    ("Health", (
        "pharmacy", "doctor", "medical", "health", "medicine", "clinic", "hospital",
    )),
    ("Utilities", (
        "internet", "phone", "electricity", "water", "bill", "utility",
    )),
)

BASE_CONFIDENCE = Decimal("0.6")
CONFIDENCE_PER_MATCH = Decimal("0.15")
MAX_CONFIDENCE = Decimal("0.95")
FALLBACK_CONFIDENCE = Decimal("0.3")


def match_confidence(match_count: int) -> float:
    return float(min(MAX_CONFIDENCE, BASE_CONFIDENCE + CONFIDENCE_PER_MATCH * match_count))


class KeywordClassifier(Classifier):
    def __init__(self, rules: CategoryRules = DEFAULT_RULES, fallback: str = FALLBACK_CATEGORY):
        if isinstance(rules, dict):
            raise TypeError("rules must be an ordered sequence of (category, keywords) pairs")
        self.rules: CategoryRules = tuple(
            (category, tuple(keyword.lower() for keyword in keywords))
            for category, keywords in rules
            if category != fallback
        )
        self.fallback = fallback

    def categories(self) -> list[str]:
        return [category for category, _ in self.rules] + [self.fallback]

    def classify(self, description: str) -> CategorizationResult:
        text = (description or "").lower()

        for category, keywords in self.rules:
            matches = sum(1 for keyword in keywords if keyword in text)
            if matches:
                confidence = match_confidence(matches)
                logger.debug(
                    "[CLASSIFY] '%s' -> '%s' (%d keyword(s), confidence %.2f)",
                    text[:50], category, matches, confidence,
                )
                return CategorizationResult(
                    category=Category(name=category),
                    confidence=confidence,
                    source="keyword",
                )

        logger.debug("[CLASSIFY] '%s' -> fallback '%s'", text[:50], self.fallback)
        return CategorizationResult(
            category=Category(name=self.fallback),
            confidence=float(FALLBACK_CONFIDENCE),
            source="fallback",
        )


def classify(description: str) -> CategorizationResult:
    return KeywordClassifier().classify(description)


def suggest_category(description: str, threshold: float = 0.6) -> Optional[CategorizationResult]:
    return KeywordClassifier().suggest(description, threshold)
