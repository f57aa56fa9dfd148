"""Tests for antioxidant analysis."""

import pytest

from recipe_nutrition.domain.recipes import RecipeInput
from recipe_nutrition.services.antioxidants import (
    analyze_antioxidants,
    orac_band,
    score_antioxidants,
)
from tests.conftest import make_recipe


def test_berries_are_high_orac() -> None:
    profile = analyze_antioxidants(make_recipe("blueberry", "strawberry"))

    assert profile.orac_value == 897
    assert profile.total_antioxidants == profile.orac_value
    assert profile.polyphenols == 100
    assert profile.flavonoids == 60
    assert profile.vitamin_c == 60
    # 30 for the band plus the variety bonus.
    assert profile.antioxidant_score == 40


def test_spices_push_orac_to_top_band() -> None:
    profile = analyze_antioxidants(make_recipe("turmeric", "ginger", "cinnamon"))

    assert profile.orac_value == 31951
    assert profile.antioxidant_score == 100


def test_carotenoids_from_orange_vegetables() -> None:
    profile = analyze_antioxidants(make_recipe("carrot", "sweet potato"))

    assert profile.carotenoids == 5
    assert profile.orac_value == 70
    assert profile.antioxidant_score == 15


def test_secondary_categories_count_per_orac_match() -> None:
    # "spinach" and "kale" both have ORAC entries, so each credits spinach's
    # secondary categories once.
    profile = analyze_antioxidants(make_recipe("spinach and kale salad"))

    assert profile.orac_value == 328
    assert profile.vitamin_c == 60
    assert profile.vitamin_e == 4


def test_no_orac_foods_scores_zero() -> None:
    profile = analyze_antioxidants(make_recipe("almond", "rice"))

    assert profile.orac_value == 0
    assert profile.vitamin_e == 0
    assert profile.antioxidant_score == 0


def test_empty_recipe_is_zero() -> None:
    profile = analyze_antioxidants(RecipeInput())

    assert profile.orac_value == 0
    assert profile.antioxidant_score == 0


@pytest.mark.parametrize(
    ("orac", "expected"),
    [
        (0, 0),
        (1, 15),
        (500, 15),
        (501, 30),
        (1000, 30),
        (1001, 50),
        (2001, 75),
        (5000, 75),
        (5001, 100),
    ],
)
def test_orac_band_edges(orac: float, expected: int) -> None:
    assert orac_band(orac) == expected


def test_band_is_monotonic() -> None:
    scores = [orac_band(value) for value in range(0, 7000, 50)]

    assert scores == sorted(scores)


def test_variety_bonus_is_capped() -> None:
    assert score_antioxidants(6000, variety=5) == 100
    assert score_antioxidants(3000, variety=3) == 85
    assert score_antioxidants(3000, variety=2) == 75
    assert score_antioxidants(0, variety=2) == 0
