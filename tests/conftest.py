"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from meal_merge.config import Settings
from meal_merge.domain.foods import ChatMessage
from meal_merge.services.meals import MealMergeService
from meal_merge.services.refinement import MealRefinementService, RefinementClient


@dataclass
class FakeRefinementClient(RefinementClient):
    """Fake refinement client that replays canned responses."""

    responses: list[str] = field(default_factory=list)
    calls: list[list[ChatMessage]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        messages: list[ChatMessage],
    ) -> str:
        self.calls.append(list(messages))
        return self.responses.pop(0)


@dataclass
class FlakyRefinementClient(RefinementClient):
    """Refinement client that fails a fixed number of times before answering."""

    failures: int
    response: str
    calls: int = 0

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        messages: list[ChatMessage],
    ) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise RuntimeError("model unavailable")
        return self.response


def analysis_json(foods: list[dict[str, object]], **extra: object) -> str:
    payload: dict[str, object] = {
        "foods": foods,
        "totalCalories": sum(float(food.get("calories", 0)) for food in foods),
        "totalProtein": 0,
        "totalCarbs": 0,
        "totalFat": 0,
        "confidence": 0.9,
    }
    payload.update(extra)
    return json.dumps(payload)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        similarity_threshold=0.85,
        significant_change_ratio=0.1,
        refinement_model="test-model",
    )


@pytest.fixture
def merge_service(settings: Settings) -> MealMergeService:
    return MealMergeService.from_settings(settings)


@pytest.fixture
def refinement_client() -> FakeRefinementClient:
    return FakeRefinementClient()


@pytest.fixture
def refinement_service(
    refinement_client: FakeRefinementClient, merge_service: MealMergeService
) -> MealRefinementService:
    return MealRefinementService(
        client=refinement_client,
        merge_service=merge_service,
        model="test-model",
        retry_delay_seconds=0,
    )


@pytest.fixture
def breakfast() -> list[dict[str, object]]:
    return [
        {
            "name": "Strawberry Protein Shake",
            "quantity": 1,
            "unit": "cup",
            "calories": 300,
            "protein": 40,
            "carbs": 20,
            "fat": 5,
        },
        {
            "name": "Scrambled Eggs",
            "quantity": 2,
            "unit": "large",
            "calories": 180,
            "protein": 12,
            "carbs": 2,
            "fat": 14,
        },
        {
            "name": "Greek Yogurt",
            "quantity": 1,
            "unit": "cup",
            "calories": 130,
            "protein": 17,
            "carbs": 9,
            "fat": 0,
        },
    ]
