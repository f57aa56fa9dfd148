"""Tests for superfood detection."""

from recipe_nutrition.domain.recipes import IngredientInput, RecipeInput
from recipe_nutrition.services.superfoods import (
    SuperfoodService,
    detect_recipe_superfoods,
    detect_superfoods,
    list_superfood_categories,
)
from tests.conftest import make_recipe


def test_detects_by_alias() -> None:
    assert detect_superfoods("2 tbsp Extra Virgin Olive Oil") == ["oliveOil"]
    assert detect_superfoods("1 cup baby spinach") == ["spinach"]


def test_requires_word_boundaries() -> None:
    assert detect_superfoods("sliced olives") == []
    assert detect_superfoods("codfish cakes") == []
    assert detect_superfoods("yams, peeled") == []


def test_one_hit_per_category_in_table_order() -> None:
    text = "garlic, greek yogurt and black beans"

    assert detect_superfoods(text) == ["beans", "fermented", "garlic"]


def test_empty_or_non_string_text() -> None:
    assert detect_superfoods("") == []
    assert detect_superfoods(None) == []
    assert detect_superfoods(12) == []


def test_recipe_detection_accepts_strings_and_ingredients() -> None:
    found = detect_recipe_superfoods(
        ["salmon fillet", IngredientInput(text="quinoa"), IngredientInput(name="Kale")]
    )

    assert found == frozenset({"salmon", "quinoa", "kale"})


def test_service_returns_categories_in_display_order() -> None:
    service = SuperfoodService()
    recipe = make_recipe("minced garlic", "blueberries", "wild salmon", "salmon")

    detected = service.detect(recipe)

    assert [category.id for category in detected] == ["salmon", "blueberries", "garlic"]
    assert detected[0].name == "Salmon"


def test_lists_all_categories() -> None:
    categories = list_superfood_categories()

    assert len(categories) == 28
    assert categories[0].id == "beans"
    assert categories[-1].name == "Garlic"
    assert len({category.id for category in categories}) == 28


def test_recipe_detection_falls_back_to_name_for_non_string_text() -> None:
    ingredient = IngredientInput(text=42, name="Salmon")  # type: ignore[arg-type]

    assert detect_recipe_superfoods([ingredient]) == frozenset({"salmon"})


def test_service_handles_missing_ingredient_list() -> None:
    recipe = RecipeInput(ingredients=None)  # type: ignore[arg-type]

    assert SuperfoodService().detect(recipe) == []
