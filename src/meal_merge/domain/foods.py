"""Models for refined meal analyses returned by the refinement step."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RefinedFood(BaseModel):
    """Single food item from a refined analysis."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1)
    quantity: float | str | None = None
    unit: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    nutrition: dict[str, float | None] | None = None
    ingredients: list[dict[str, object]] | None = None

    def to_record(self) -> dict[str, object]:
        """Return the food as a plain record, keeping only fields that were sent."""
        return self.model_dump(exclude_unset=True)


class MealAnalysis(BaseModel):
    """Structured output of a meal refinement."""

    model_config = ConfigDict(populate_by_name=True)

    foods: list[RefinedFood]
    total_calories: float = Field(default=0.0, alias="totalCalories")
    total_protein: float = Field(default=0.0, alias="totalProtein")
    total_carbs: float = Field(default=0.0, alias="totalCarbs")
    total_fat: float = Field(default=0.0, alias="totalFat")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    notes: str | None = None

    def food_records(self) -> list[dict[str, object]]:
        """Return the refined foods as plain records."""
        return [food.to_record() for food in self.foods]


class ChatMessage(BaseModel):
    """One turn of a meal correction conversation."""

    role: Literal["user", "assistant"]
    content: str
