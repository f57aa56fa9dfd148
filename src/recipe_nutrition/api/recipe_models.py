"""Pydantic models for incoming recipe payloads."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recipe_nutrition.domain.recipes import IngredientInput, RecipeInput


class IngredientPayload(BaseModel):
    """Ingredient line payload."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = None
    name: str | None = None


class RecipePayload(BaseModel):
    """Recipe payload validated before analysis."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    description: str = ""
    ingredients: list[IngredientPayload] = Field(default_factory=list)
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("calories", "protein", "fiber", mode="before")
    @classmethod
    def _reject_bool_macros(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("macro values must be numbers")
        return value

    @field_validator("ingredients", mode="before")
    @classmethod
    def _wrap_plain_strings(cls, value: object) -> object:
        """Accept bare ingredient strings alongside ingredient objects."""
        if value is None:
            return []
        if isinstance(value, list):
            return [{"text": item} if isinstance(item, str) else item for item in value]
        return value

    def to_domain(self) -> RecipeInput:
        """Convert the payload into the engine's recipe input."""
        return RecipeInput(
            title=self.title,
            description=self.description,
            ingredients=tuple(
                IngredientInput(text=item.text, name=item.name)
                for item in self.ingredients
            ),
            calories=self.calories,
            protein=self.protein,
            fiber=self.fiber,
        )
