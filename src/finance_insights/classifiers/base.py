from abc import ABC, abstractmethod

from finance_insights.models import CategorizationResult


class Classifier(ABC):
    @abstractmethod
    def classify(self, description: str) -> CategorizationResult:
        """Categorize a free-text description; never fails, falls back to a catch-all."""
        pass

    @abstractmethod
    def categories(self) -> list[str]:
        """Category names in evaluation order, catch-all last."""
        pass

    def suggest(self, description: str, threshold: float) -> CategorizationResult | None:
        """Classification for live auto-fill; None unless confidence clears the threshold."""
        if not description:
            return None
        result = self.classify(description)
        if result.confidence > threshold:
            return result
        return None
