"""Micronutrient estimation from ingredient keywords."""

from recipe_nutrition.domain.analysis import (
    MicronutrientProfile,
    MineralProfile,
    VitaminProfile,
)
from recipe_nutrition.domain.recipes import RecipeInput
from recipe_nutrition.domain.taxonomy import (
    B_VITAMIN_SOURCES,
    CALCIUM_SOURCES,
    IRON_SOURCES,
    MAGNESIUM_SOURCES,
    PHOSPHORUS_SOURCES,
    POTASSIUM_SOURCES,
    VITAMIN_A_SOURCES,
    VITAMIN_B12_SOURCES,
    VITAMIN_C_SOURCES,
    ZINC_SOURCES,
    contains_any,
    count_matching,
)
from recipe_nutrition.services.rounding import round_grams

# Estimated contribution per matching ingredient.
VITAMIN_C_MG = 30
VITAMIN_A_IU = 500
THIAMINE_MG = 0.2
RIBOFLAVIN_MG = 0.3
NIACIN_MG = 2.0
VITAMIN_B6_MG = 0.3
FOLATE_MCG = 40
CALCIUM_MG = 100
IRON_MG = 2.0
POTASSIUM_MG = 300
MAGNESIUM_MG = 50
ZINC_MG = 1.5
PHOSPHORUS_MG = 100

# Flat amount when any animal source is present.
VITAMIN_B12_MCG = 2.0


def estimate_micronutrients(recipe: RecipeInput) -> MicronutrientProfile:
    """Estimate vitamins and minerals from ingredient names.

    Each category counts the ingredients that mention at least one of its
    keywords and scales the count by a fixed per-serving amount. The estimate
    is additive, so longer ingredient lists tend to score higher. Vitamins
    D, E and K and the trace minerals copper, manganese and selenium have no
    keyword table and are always reported as zero.
    """
    texts = recipe.ingredient_texts()
    b_vitamin_count = count_matching(texts, B_VITAMIN_SOURCES)
    has_animal_source = any(
        contains_any(text, VITAMIN_B12_SOURCES) for text in texts
    )

    vitamins = VitaminProfile(
        vitamin_a=_scaled(texts, VITAMIN_A_SOURCES, VITAMIN_A_IU),
        vitamin_c=_scaled(texts, VITAMIN_C_SOURCES, VITAMIN_C_MG),
        thiamine=round_grams(b_vitamin_count * THIAMINE_MG),
        riboflavin=round_grams(b_vitamin_count * RIBOFLAVIN_MG),
        niacin=round_grams(b_vitamin_count * NIACIN_MG),
        vitamin_b6=round_grams(b_vitamin_count * VITAMIN_B6_MG),
        folate=round_grams(b_vitamin_count * FOLATE_MCG),
        vitamin_b12=VITAMIN_B12_MCG if has_animal_source else 0.0,
    )
    minerals = MineralProfile(
        calcium=_scaled(texts, CALCIUM_SOURCES, CALCIUM_MG),
        iron=_scaled(texts, IRON_SOURCES, IRON_MG),
        magnesium=_scaled(texts, MAGNESIUM_SOURCES, MAGNESIUM_MG),
        phosphorus=_scaled(texts, PHOSPHORUS_SOURCES, PHOSPHORUS_MG),
        potassium=_scaled(texts, POTASSIUM_SOURCES, POTASSIUM_MG),
        zinc=_scaled(texts, ZINC_SOURCES, ZINC_MG),
    )
    return MicronutrientProfile(vitamins=vitamins, minerals=minerals)


def _scaled(texts: list[str], keywords: tuple[str, ...], per_source: float) -> float:
    return round_grams(count_matching(texts, keywords) * per_source)
