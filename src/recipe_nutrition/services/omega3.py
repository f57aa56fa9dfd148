"""Omega-3 fatty acid analysis."""

from recipe_nutrition.domain.analysis import Omega3Profile
from recipe_nutrition.domain.recipes import RecipeInput
from recipe_nutrition.domain.taxonomy import (
    FATTY_FISH_SOURCES,
    PLANT_OMEGA3_SOURCES,
    count_matching,
)
from recipe_nutrition.services.rounding import round_grams, round_half_up

EPA_G_PER_FISH = 0.4
DHA_G_PER_FISH = 0.6
ALA_G_PER_PLANT = 1.5

# Total grams that earn a full content score.
FULL_SCORE_G = 2.0
MARINE_QUALITY_BONUS = 20
MAX_SCORE = 100


def analyze_omega3(recipe: RecipeInput) -> Omega3Profile:
    """Estimate EPA, DHA and ALA and score omega-3 content from 0 to 100.

    Fatty fish supply EPA and DHA, plant sources supply ALA. Marine sources
    earn a flat quality bonus on top of the content score.
    """
    texts = recipe.ingredient_texts()
    fish_count = count_matching(texts, FATTY_FISH_SOURCES)
    plant_count = count_matching(texts, PLANT_OMEGA3_SOURCES)

    epa = fish_count * EPA_G_PER_FISH
    dha = fish_count * DHA_G_PER_FISH
    ala = plant_count * ALA_G_PER_PLANT
    total = epa + dha + ala

    score = 0.0
    if total > 0:
        content_score = min(MAX_SCORE, total / FULL_SCORE_G * 100)
        quality_bonus = MARINE_QUALITY_BONUS if epa + dha > 0 else 0
        score = min(MAX_SCORE, content_score + quality_bonus)

    return Omega3Profile(
        total_omega3=round_grams(total),
        epa=round_grams(epa),
        dha=round_grams(dha),
        ala=round_grams(ala),
        omega3_score=round_half_up(score),
    )
