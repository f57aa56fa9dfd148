"""Tests for key nutrient and nutrient gap extraction."""

from recipe_nutrition.domain.analysis import (
    AntioxidantProfile,
    MicronutrientProfile,
    MineralProfile,
    Omega3Profile,
    VitaminProfile,
)
from recipe_nutrition.services.insights import key_nutrients, nutrient_gaps


def test_identifies_key_nutrients_in_order() -> None:
    micronutrients = MicronutrientProfile(
        vitamins=VitaminProfile(vitamin_a=600, vitamin_c=35),
        minerals=MineralProfile(calcium=120, iron=2.5, potassium=350),
    )
    omega3 = Omega3Profile(total_omega3=0.8, epa=0.3, dha=0.5, omega3_score=40)
    antioxidants = AntioxidantProfile(
        total_antioxidants=1500, orac_value=1500, antioxidant_score=50
    )

    result = key_nutrients(micronutrients, omega3, antioxidants)

    assert result == [
        "Vitamin C",
        "Vitamin A",
        "Calcium",
        "Iron",
        "Potassium",
        "Omega-3 Fatty Acids",
        "Antioxidants",
    ]


def test_b_vitamins_key_from_b12_alone() -> None:
    micronutrients = MicronutrientProfile(vitamins=VitaminProfile(vitamin_b12=2))

    result = key_nutrients(micronutrients, Omega3Profile(), AntioxidantProfile())

    assert result == ["B Vitamins"]


def test_identifies_gaps() -> None:
    micronutrients = MicronutrientProfile(
        vitamins=VitaminProfile(vitamin_a=100, vitamin_c=5, folate=10, vitamin_b12=0.5),
        minerals=MineralProfile(calcium=20, iron=0.5, potassium=100),
    )
    omega3 = Omega3Profile(total_omega3=0.05, ala=0.05)
    antioxidants = AntioxidantProfile(total_antioxidants=200, orac_value=200)

    gaps = nutrient_gaps(micronutrients, omega3, antioxidants)

    assert gaps == [
        "Vitamin C",
        "Vitamin A",
        "B Vitamins",
        "Calcium",
        "Iron",
        "Omega-3 Fatty Acids",
        "Antioxidants",
    ]


def test_potassium_is_never_a_gap() -> None:
    gaps = nutrient_gaps(MicronutrientProfile(), Omega3Profile(), AntioxidantProfile())

    assert "Potassium" not in gaps
    assert len(gaps) == 7


def test_middle_values_are_neither_key_nor_gap() -> None:
    micronutrients = MicronutrientProfile(
        vitamins=VitaminProfile(vitamin_a=300, vitamin_c=20, folate=30),
        minerals=MineralProfile(calcium=60, iron=1.5),
    )
    omega3 = Omega3Profile(total_omega3=0.3, ala=0.3, omega3_score=15)
    antioxidants = AntioxidantProfile(total_antioxidants=700, orac_value=700)

    assert key_nutrients(micronutrients, omega3, antioxidants) == []
    assert nutrient_gaps(micronutrients, omega3, antioxidants) == []


def test_b_vitamin_gap_requires_both_low() -> None:
    micronutrients = MicronutrientProfile(vitamins=VitaminProfile(vitamin_b12=2))

    gaps = nutrient_gaps(micronutrients, Omega3Profile(), AntioxidantProfile())

    assert "B Vitamins" not in gaps
