"""Nutritional analysis orchestration."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from recipe_nutrition.api.recipe_models import RecipePayload
from recipe_nutrition.domain.analysis import NutritionalAnalysisResult
from recipe_nutrition.domain.recipes import RecipeInput
from recipe_nutrition.services.antioxidants import analyze_antioxidants
from recipe_nutrition.services.density import calculate_density_score
from recipe_nutrition.services.insights import key_nutrients, nutrient_gaps
from recipe_nutrition.services.micronutrients import estimate_micronutrients
from recipe_nutrition.services.omega3 import analyze_omega3

_logger = logging.getLogger(__name__)


def perform_nutritional_analysis(recipe: RecipeInput) -> NutritionalAnalysisResult:
    """Run every analyzer on a recipe and aggregate the results.

    The analysis is pure: missing data degrades to zero estimates and the
    same recipe always yields an equal result.
    """
    micronutrients = estimate_micronutrients(recipe)
    omega3 = analyze_omega3(recipe)
    antioxidants = analyze_antioxidants(recipe)

    return NutritionalAnalysisResult(
        micronutrients=micronutrients,
        omega3=omega3,
        antioxidants=antioxidants,
        nutritional_density_score=calculate_density_score(
            recipe, micronutrients, omega3, antioxidants
        ),
        key_nutrients=tuple(key_nutrients(micronutrients, omega3, antioxidants)),
        nutrient_gaps=tuple(nutrient_gaps(micronutrients, omega3, antioxidants)),
    )


@dataclass
class NutritionalAnalysisService:
    """Service entry point for recipe nutritional analysis."""

    debug: bool = False

    def analyze(self, recipe: RecipeInput) -> NutritionalAnalysisResult:
        """Analyze a typed recipe."""
        result = perform_nutritional_analysis(recipe)
        if self.debug:
            _logger.info(
                "Nutritional analysis: title=%s ingredients=%s density=%s "
                "key=%s gaps=%s",
                recipe.title,
                len(recipe.ingredients or ()),
                result.nutritional_density_score,
                ",".join(result.key_nutrients),
                ",".join(result.nutrient_gaps),
            )
        return result

    def analyze_payload(self, raw: Mapping[str, object]) -> NutritionalAnalysisResult:
        """Validate an untyped recipe payload and analyze it.

        Raises pydantic.ValidationError when the payload has the wrong shape.
        """
        recipe = RecipePayload.model_validate(raw).to_domain()
        return self.analyze(recipe)

    def analyze_many(
        self, recipes: Iterable[RecipeInput]
    ) -> list[NutritionalAnalysisResult]:
        """Analyze recipes independently, preserving input order."""
        return [self.analyze(recipe) for recipe in recipes]
