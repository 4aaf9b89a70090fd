"""Conversational meal refinement on top of the merge service."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from meal_merge.domain.foods import ChatMessage, MealAnalysis
from meal_merge.domain.nutrition import MacroTotals
from meal_merge.services.meals import MealMergeService

_logger = logging.getLogger(__name__)

REFINEMENT_SYSTEM_PROMPT = (
    "You are an expert nutrition analysis assistant. You will be given a "
    "conversation history containing previous meal analyses (as JSON) and user "
    "corrections. Return a new, complete and corrected meal analysis as JSON "
    "only.\n"
    "- Modify or replace existing items based on the correction; do not create "
    "duplicates. If the meal has 'strawberry protein shake' and the correction "
    "is 'shake was blueberry', return 'blueberry protein shake' instead of it, "
    "not both.\n"
    "- For simple substitutions keep every other item, quantity and nutrition "
    "value exactly as it was.\n"
    "- Use this shape: {\"foods\": [{\"name\", \"quantity\", \"unit\", "
    "\"calories\", \"protein\", \"carbs\", \"fat\", \"fiber\", \"sugar\", "
    "\"sodium\"}], \"totalCalories\", \"totalProtein\", \"totalCarbs\", "
    "\"totalFat\", \"confidence\", \"notes\"}."
)


class RefinementClient(Protocol):
    """Interface for the model that produces refined meal analyses."""

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        messages: list[ChatMessage],
    ) -> str:
        """Return the raw JSON content of a refined meal analysis."""


@dataclass(frozen=True)
class RefinementResult:
    """Outcome of one correction round."""

    foods: list[dict[str, object]]
    totals: MacroTotals
    analysis: MealAnalysis
    history: list[ChatMessage]


@dataclass
class MealRefinementService:
    """Applies a user correction to a meal through the refinement model."""

    client: RefinementClient
    merge_service: MealMergeService
    model: str
    temperature: float = 0.2
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def refine(
        self,
        existing_foods: list[dict[str, object]],
        history: list[ChatMessage],
        correction: str,
    ) -> RefinementResult:
        """Send a correction, merge the refined foods and return the new state."""
        text = correction.strip()
        if not text:
            raise ValueError("Correction text must not be empty")

        messages = [*history, ChatMessage(role="user", content=text)]
        content = await self._complete_with_retry(messages)
        if not content.strip():
            raise RuntimeError("Refinement returned an empty response")

        analysis = MealAnalysis.model_validate_json(content)
        foods = self.merge_service.merge(existing_foods, analysis.food_records())
        if self.debug:
            _logger.info(
                "Meal refinement: history=%s refined_foods=%s merged_foods=%s",
                len(messages),
                len(analysis.foods),
                len(foods),
            )
        return RefinementResult(
            foods=foods,
            totals=self.merge_service.summarize(foods),
            analysis=analysis,
            history=[*messages, ChatMessage(role="assistant", content=content)],
        )

    async def _complete_with_retry(self, messages: list[ChatMessage]) -> str:
        """Call the refinement client with a short retry."""
        attempt = 0
        while True:
            try:
                return await self.client.complete(
                    model=self.model,
                    temperature=self.temperature,
                    system_prompt=REFINEMENT_SYSTEM_PROMPT,
                    messages=messages,
                )
            except Exception as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "Meal refinement failed (attempt %s/%s): %s",
                        attempt,
                        self.retry_attempts + 1,
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)
