"""Configured meal merge service."""

import logging
from dataclasses import dataclass

from meal_merge.config import Settings
from meal_merge.domain.nutrition import MacroTotals
from meal_merge.services.matching import DEFAULT_SIMILARITY_THRESHOLD
from meal_merge.services.merge import (
    DEFAULT_SIGNIFICANT_CHANGE_RATIO,
    merge_foods_preserving_existing,
)
from meal_merge.services.totals import calculate_totals

_logger = logging.getLogger(__name__)


@dataclass
class MealMergeService:
    """Merges refined foods into meal logs with configured thresholds."""

    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    significant_change_ratio: float = DEFAULT_SIGNIFICANT_CHANGE_RATIO
    debug: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "MealMergeService":
        """Build a service from application settings."""
        return cls(
            similarity_threshold=settings.similarity_threshold,
            significant_change_ratio=settings.significant_change_ratio,
            debug=settings.debug,
        )

    def merge(
        self,
        existing: list[dict[str, object]] | None,
        refined: list[dict[str, object]] | None,
    ) -> list[dict[str, object]]:
        """Merge refined foods into existing foods."""
        merged = merge_foods_preserving_existing(
            existing,
            refined,
            threshold=self.similarity_threshold,
            ratio=self.significant_change_ratio,
        )
        if self.debug:
            existing_count = len(existing or [])
            _logger.info(
                "Meal merge: existing=%s refined=%s result=%s appended=%s",
                existing_count,
                len(refined or []),
                len(merged),
                len(merged) - existing_count,
            )
        return merged

    def summarize(self, foods: list[dict[str, object]]) -> MacroTotals:
        """Return macro totals for a food list."""
        return calculate_totals(foods)
