"""Nutrition domain models and accessors."""

from dataclasses import dataclass

NUTRIENT_FIELDS: tuple[str, ...] = ("calories", "protein", "carbs", "fat")


@dataclass(frozen=True)
class MacroTotals:
    """Summed macronutrients for a food list."""

    calories: float
    protein: float
    carbs: float
    fat: float


def read_nutrient(food: dict[str, object], field: str) -> float:
    """Read a nutrient from either the nested or the flat record shape.

    The nested ``nutrition.<field>`` value wins when it is a non-zero number;
    otherwise the flat ``<field>`` value is used. Anything else reads as 0.
    """
    nutrition = food.get("nutrition")
    if isinstance(nutrition, dict):
        nested = as_number(nutrition.get(field))
        if nested:
            return nested
    return as_number(food.get(field))


def as_number(value: object) -> float:
    """Coerce a loosely typed nutrient value to a float, defaulting to 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        return float(value)
    return 0.0
