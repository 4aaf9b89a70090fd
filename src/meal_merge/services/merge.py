"""Reconcile refined food lists with existing meal logs."""

from meal_merge.domain.nutrition import NUTRIENT_FIELDS, as_number
from meal_merge.services.matching import (
    DEFAULT_SIMILARITY_THRESHOLD,
    are_similar_names,
    food_name,
)

DEFAULT_SIGNIFICANT_CHANGE_RATIO = 0.1


def is_significant_change(
    old: float, new: float, ratio: float = DEFAULT_SIGNIFICANT_CHANGE_RATIO
) -> bool:
    """Return True when a nutrient change is large enough to trust."""
    if old == 0 and new == 0:
        return False
    if old == 0 or new == 0:
        return True
    return abs((new - old) / old) > ratio


def merge_nutrition(
    existing: dict[str, object],
    refined: dict[str, object],
    *,
    ratio: float = DEFAULT_SIGNIFICANT_CHANGE_RATIO,
) -> dict[str, object]:
    """Merge a refined version of a food into the existing one.

    Serving size from the refinement always wins. Nutrients are only replaced
    on a significant change, inside whichever shape the refinement uses.
    A non-empty refined ``ingredients`` list replaces the existing one; an
    empty or missing list leaves it alone.
    """
    result = dict(existing)
    for key in ("quantity", "unit"):
        # None means the refinement left the serving size out.
        if refined.get(key) is not None:
            result[key] = refined[key]

    refined_nutrition = refined.get("nutrition")
    if isinstance(refined_nutrition, dict):
        current = result.get("nutrition")
        target = dict(current) if isinstance(current, dict) else {}
        result["nutrition"] = target
        _merge_fields(target, refined_nutrition, ratio)
    else:
        _merge_fields(result, refined, ratio)

    ingredients = refined.get("ingredients")
    if isinstance(ingredients, list) and ingredients:
        result["ingredients"] = ingredients
    return result


def _merge_fields(
    target: dict[str, object], source: dict[str, object], ratio: float
) -> None:
    for field in NUTRIENT_FIELDS:
        if field not in source:
            continue
        value = source[field]
        if isinstance(value, bool) or not isinstance(value, int | float):
            continue
        if is_significant_change(as_number(target.get(field)), value, ratio):
            target[field] = value


def merge_foods_preserving_existing(
    existing_foods: list[dict[str, object]] | None,
    refined_foods: list[dict[str, object]] | None,
    *,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ratio: float = DEFAULT_SIGNIFICANT_CHANGE_RATIO,
) -> list[dict[str, object]]:
    """Merge refined foods into existing foods without dropping any of them.

    Each refined food updates the first unconsumed existing food with a
    similar name, or is appended when nothing matches. Existing foods keep
    their positions.
    """
    if not existing_foods:
        return list(refined_foods or [])
    if not refined_foods:
        return list(existing_foods)

    merged = list(existing_foods)
    consumed: set[int] = set()
    for refined in refined_foods:
        index = _find_unconsumed_match(
            food_name(refined), existing_foods, consumed, threshold
        )
        if index is None:
            merged.append(refined)
            continue
        merged[index] = merge_nutrition(existing_foods[index], refined, ratio=ratio)
        consumed.add(index)
    return merged


def _find_unconsumed_match(
    name: str,
    foods: list[dict[str, object]],
    consumed: set[int],
    threshold: float,
) -> int | None:
    for index, food in enumerate(foods):
        if index in consumed:
            continue
        if are_similar_names(name, food_name(food), threshold):
            return index
    return None
