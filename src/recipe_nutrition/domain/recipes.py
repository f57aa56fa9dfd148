"""Domain models for recipes consumed by the analysis engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IngredientInput:
    """Single ingredient line with free-form text."""

    text: str | None = None
    name: str | None = None

    def match_text(self) -> str:
        """Return lower-cased text used for keyword matching."""
        for value in (self.text, self.name):
            if isinstance(value, str) and value:
                return value.lower()
        return ""


@dataclass(frozen=True)
class RecipeInput:
    """Recipe fields the analysis engine reads."""

    title: str = ""
    description: str = ""
    ingredients: tuple[IngredientInput, ...] = ()
    calories: float | None = None
    protein: float | None = None
    fiber: float | None = None

    def ingredient_texts(self) -> list[str]:
        """Return lower-cased ingredient texts in recipe order."""
        return [_match_text(ingredient) for ingredient in self.ingredients or ()]


def _match_text(ingredient: object) -> str:
    if isinstance(ingredient, IngredientInput):
        return ingredient.match_text()
    if isinstance(ingredient, str):
        return ingredient.lower()
    return ""
