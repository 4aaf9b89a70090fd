"""Tests for refinement payload models."""

import pytest
from pydantic import ValidationError

from meal_merge.domain.foods import ChatMessage, MealAnalysis, RefinedFood
from meal_merge.services.merge import merge_nutrition


def test_meal_analysis_accepts_camel_case_totals() -> None:
    analysis = MealAnalysis.model_validate(
        {
            "foods": [{"name": "Banana", "calories": 105}],
            "totalCalories": 105,
            "totalProtein": 1.3,
            "confidence": 0.8,
            "notes": "medium banana",
        }
    )

    assert analysis.total_calories == 105
    assert analysis.total_protein == 1.3
    assert analysis.total_fat == 0
    assert analysis.notes == "medium banana"


def test_meal_analysis_rejects_out_of_range_confidence() -> None:
    with pytest.raises(ValidationError):
        MealAnalysis.model_validate({"foods": [], "confidence": 1.5})


def test_refined_food_requires_name() -> None:
    with pytest.raises(ValidationError):
        RefinedFood.model_validate({"name": "", "calories": 10})


def test_refined_food_record_keeps_only_sent_fields() -> None:
    food = RefinedFood.model_validate(
        {"name": "Latte", "quantity": 1, "unit": "grande", "caffeine_mg": 150}
    )

    record = food.to_record()

    assert record == {
        "name": "Latte",
        "quantity": 1,
        "unit": "grande",
        "caffeine_mg": 150,
    }
    assert "ingredients" not in record


def test_refined_food_record_keeps_explicit_empty_ingredients() -> None:
    food = RefinedFood.model_validate({"name": "Wrap", "ingredients": []})

    assert food.to_record()["ingredients"] == []


def test_chat_message_role_is_restricted() -> None:
    assert ChatMessage(role="user", content="it was blueberry").role == "user"
    with pytest.raises(ValidationError):
        ChatMessage.model_validate({"role": "system", "content": "hi"})


def test_refined_food_accepts_null_nested_nutrient() -> None:
    analysis = MealAnalysis.model_validate_json(
        '{"foods": [{"name": "Oatmeal", '
        '"nutrition": {"calories": 160, "fiber": null}}]}'
    )
    record = analysis.food_records()[0]

    merged = merge_nutrition(
        {"name": "Oatmeal", "nutrition": {"calories": 100, "fiber": 4}}, record
    )

    assert record["nutrition"] == {"calories": 160, "fiber": None}
    assert merged["nutrition"] == {"calories": 160, "fiber": 4}
