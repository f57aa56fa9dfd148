"""Shared test fixtures."""

import pytest

from recipe_nutrition.config import Settings
from recipe_nutrition.domain.recipes import IngredientInput, RecipeInput
from recipe_nutrition.services.analysis import NutritionalAnalysisService


def make_recipe(*ingredients: str, **fields: object) -> RecipeInput:
    """Build a recipe from ingredient texts and optional recipe fields."""
    return RecipeInput(
        ingredients=tuple(IngredientInput(text=text) for text in ingredients),
        **fields,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG", analysis_debug=True)


@pytest.fixture
def analysis_service() -> NutritionalAnalysisService:
    return NutritionalAnalysisService()
