"""Aggregate macronutrients across food lists."""

from meal_merge.domain.nutrition import MacroTotals, read_nutrient


def _sum_field(foods: list[dict[str, object]], field: str) -> float:
    return sum((read_nutrient(food, field) for food in foods), 0.0)


def calculate_total_calories(foods: list[dict[str, object]]) -> float:
    """Sum calories across foods."""
    return _sum_field(foods, "calories")


def calculate_total_protein(foods: list[dict[str, object]]) -> float:
    """Sum protein across foods."""
    return _sum_field(foods, "protein")


def calculate_total_carbs(foods: list[dict[str, object]]) -> float:
    """Sum carbs across foods."""
    return _sum_field(foods, "carbs")


def calculate_total_fat(foods: list[dict[str, object]]) -> float:
    """Sum fat across foods."""
    return _sum_field(foods, "fat")


def calculate_totals(foods: list[dict[str, object]]) -> MacroTotals:
    """Return all four totals for a food list."""
    return MacroTotals(
        calories=calculate_total_calories(foods),
        protein=calculate_total_protein(foods),
        carbs=calculate_total_carbs(foods),
        fat=calculate_total_fat(foods),
    )
