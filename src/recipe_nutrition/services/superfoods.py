"""Superfood detection over ingredient text."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from recipe_nutrition.domain.recipes import IngredientInput, RecipeInput
from recipe_nutrition.domain.superfoods import SUPERFOODS, SuperfoodCategory

# Aliases match on word boundaries so "olive" does not match "olives".
_PATTERNS: tuple[tuple[str, tuple[re.Pattern[str], ...]], ...] = tuple(
    (
        category.id,
        tuple(
            re.compile(rf"\b{re.escape(alias)}\b", re.IGNORECASE)
            for alias in category.aliases
        ),
    )
    for category in SUPERFOODS
)


def detect_superfoods(text: object) -> list[str]:
    """Return superfood category ids found in one ingredient text."""
    if not isinstance(text, str) or not text:
        return []
    return [
        category_id
        for category_id, patterns in _PATTERNS
        if any(pattern.search(text) for pattern in patterns)
    ]


def detect_recipe_superfoods(
    ingredients: Iterable[str | IngredientInput],
) -> frozenset[str]:
    """Return the distinct superfood categories across ingredients."""
    found: set[str] = set()
    for ingredient in ingredients:
        if isinstance(ingredient, IngredientInput):
            text = ingredient.match_text()
        else:
            text = ingredient
        found.update(detect_superfoods(text))
    return frozenset(found)


def list_superfood_categories() -> list[SuperfoodCategory]:
    """Return every superfood category in display order."""
    return list(SUPERFOODS)


@dataclass
class SuperfoodService:
    """Service wrapper for superfood lookups on recipes."""

    def detect(self, recipe: RecipeInput) -> list[SuperfoodCategory]:
        """Return superfood categories present in a recipe, in display order."""
        found = detect_recipe_superfoods(recipe.ingredients or ())
        return [category for category in SUPERFOODS if category.id in found]

    def categories(self) -> list[SuperfoodCategory]:
        """Return every superfood category for selection lists."""
        return list_superfood_categories()
