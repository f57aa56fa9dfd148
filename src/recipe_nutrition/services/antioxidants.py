"""Antioxidant and ORAC analysis."""

from dataclasses import dataclass

from recipe_nutrition.domain.analysis import AntioxidantProfile
from recipe_nutrition.domain.recipes import RecipeInput
from recipe_nutrition.domain.taxonomy import (
    ANTIOXIDANT_VITAMIN_C_SOURCES,
    ANTIOXIDANT_VITAMIN_E_SOURCES,
    CAROTENOID_SOURCES,
    ORAC_PER_100G,
    POLYPHENOL_SOURCES,
    contains_any,
)
from recipe_nutrition.services.rounding import round_half_up

# Fraction of the per-100g ORAC value credited to one ingredient.
SERVING_SCALE = 0.1

POLYPHENOLS_MG = 50
FLAVONOIDS_MG = 30
CAROTENOIDS_MG = 5
VITAMIN_C_MG = 30
VITAMIN_E_MG = 2

# (exclusive lower bound on ORAC, score), highest band first.
SCORE_BANDS = (
    (5000, 100),
    (2000, 75),
    (1000, 50),
    (500, 30),
    (0, 15),
)
VARIETY_MIN_KINDS = 3
VARIETY_BONUS = 10
MAX_SCORE = 100


@dataclass
class _Totals:
    orac: float = 0.0
    polyphenols: float = 0.0
    flavonoids: float = 0.0
    carotenoids: float = 0.0
    vitamin_c: float = 0.0
    vitamin_e: float = 0.0

    def variety(self) -> int:
        values = (
            self.polyphenols,
            self.flavonoids,
            self.carotenoids,
            self.vitamin_c,
            self.vitamin_e,
        )
        return sum(1 for value in values if value > 0)


def analyze_antioxidants(recipe: RecipeInput) -> AntioxidantProfile:
    """Estimate ORAC and antioxidant sub-types, then score from 0 to 100.

    Every ORAC food found in an ingredient adds a serving-scaled share of its
    ORAC value. Each such match also credits the secondary antioxidant
    categories the ingredient text belongs to; one ingredient can credit
    several categories.
    """
    totals = _Totals()
    for text in recipe.ingredient_texts():
        for food, orac in ORAC_PER_100G.items():
            if food in text:
                _add_match(totals, text, orac)

    orac_value = round_half_up(totals.orac)
    return AntioxidantProfile(
        total_antioxidants=orac_value,
        orac_value=orac_value,
        polyphenols=round_half_up(totals.polyphenols),
        flavonoids=round_half_up(totals.flavonoids),
        carotenoids=round_half_up(totals.carotenoids),
        vitamin_c=round_half_up(totals.vitamin_c),
        vitamin_e=round_half_up(totals.vitamin_e),
        antioxidant_score=score_antioxidants(totals.orac, totals.variety()),
    )


def score_antioxidants(orac_value: float, variety: int = 0) -> int:
    """Map an ORAC estimate to a banded score with a variety bonus."""
    score = orac_band(orac_value)
    if variety >= VARIETY_MIN_KINDS:
        score = min(MAX_SCORE, score + VARIETY_BONUS)
    return score


def orac_band(orac_value: float) -> int:
    """Return the step score for an ORAC estimate."""
    for threshold, score in SCORE_BANDS:
        if orac_value > threshold:
            return score
    return 0


def _add_match(totals: _Totals, text: str, orac: int) -> None:
    totals.orac += orac * SERVING_SCALE
    if contains_any(text, POLYPHENOL_SOURCES):
        totals.polyphenols += POLYPHENOLS_MG
        totals.flavonoids += FLAVONOIDS_MG
    if contains_any(text, CAROTENOID_SOURCES):
        totals.carotenoids += CAROTENOIDS_MG
    if contains_any(text, ANTIOXIDANT_VITAMIN_C_SOURCES):
        totals.vitamin_c += VITAMIN_C_MG
    if contains_any(text, ANTIOXIDANT_VITAMIN_E_SOURCES):
        totals.vitamin_e += VITAMIN_E_MG
