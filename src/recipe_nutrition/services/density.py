"""Composite nutritional density score."""

from recipe_nutrition.domain.analysis import (
    AntioxidantProfile,
    MicronutrientProfile,
    Omega3Profile,
)
from recipe_nutrition.domain.recipes import RecipeInput
from recipe_nutrition.services.rounding import round_half_up

# (minimum value, points), highest band first.
DIVERSITY_BANDS = ((15, 40), (10, 30), (7, 20), (5, 10))
PROTEIN_EFFICIENCY_BANDS = ((0.20, 10), (0.15, 7), (0.10, 4))
FIBER_BANDS = ((5, 10), (3, 7), (1, 4))

OMEGA3_WEIGHT = 0.2
ANTIOXIDANT_WEIGHT = 0.2
CALORIES_PER_G_PROTEIN = 4
MAX_SCORE = 100


def calculate_density_score(
    recipe: RecipeInput,
    micronutrients: MicronutrientProfile,
    omega3: Omega3Profile,
    antioxidants: AntioxidantProfile,
) -> int:
    """Combine micronutrient variety, omega-3, antioxidants, protein and fiber.

    Contributions: diversity up to 40 points, omega-3 and antioxidants up to
    20 each, protein efficiency and fiber up to 10 each. The total is capped
    at 100.
    """
    score = _band(micronutrients.non_zero_count(), DIVERSITY_BANDS)
    score += omega3.omega3_score * OMEGA3_WEIGHT
    score += antioxidants.antioxidant_score * ANTIOXIDANT_WEIGHT
    score += _band(protein_efficiency(recipe), PROTEIN_EFFICIENCY_BANDS)
    score += _band(recipe.fiber or 0, FIBER_BANDS)
    return min(MAX_SCORE, round_half_up(score))


def protein_efficiency(recipe: RecipeInput) -> float:
    """Return the share of calories coming from protein, or 0 without data."""
    if not recipe.protein or not recipe.calories:
        return 0.0
    return recipe.protein * CALORIES_PER_G_PROTEIN / recipe.calories


def _band(value: float, bands: tuple[tuple[float, int], ...]) -> int:
    for minimum, points in bands:
        if value >= minimum:
            return points
    return 0
