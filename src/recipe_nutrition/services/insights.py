"""Human-readable strengths and gaps derived from analysis profiles."""

from recipe_nutrition.domain.analysis import (
    AntioxidantProfile,
    MicronutrientProfile,
    Omega3Profile,
)

VITAMIN_C = "Vitamin C"
VITAMIN_A = "Vitamin A"
B_VITAMINS = "B Vitamins"
CALCIUM = "Calcium"
IRON = "Iron"
POTASSIUM = "Potassium"
OMEGA3 = "Omega-3 Fatty Acids"
ANTIOXIDANTS = "Antioxidants"


def key_nutrients(
    micronutrients: MicronutrientProfile,
    omega3: Omega3Profile,
    antioxidants: AntioxidantProfile,
) -> list[str]:
    """Return nutrients the recipe is notably rich in, in a fixed order."""
    vitamins = micronutrients.vitamins
    minerals = micronutrients.minerals
    checks = (
        (VITAMIN_C, vitamins.vitamin_c >= 30),
        (VITAMIN_A, vitamins.vitamin_a >= 500),
        (B_VITAMINS, vitamins.folate >= 40 or vitamins.vitamin_b12 >= 2),
        (CALCIUM, minerals.calcium >= 100),
        (IRON, minerals.iron >= 2),
        (POTASSIUM, minerals.potassium >= 300),
        (OMEGA3, omega3.total_omega3 >= 0.5),
        (ANTIOXIDANTS, antioxidants.orac_value >= 1000),
    )
    return [label for label, passed in checks if passed]


def nutrient_gaps(
    micronutrients: MicronutrientProfile,
    omega3: Omega3Profile,
    antioxidants: AntioxidantProfile,
) -> list[str]:
    """Return nutrients the recipe lacks, in a fixed order.

    Gap thresholds are looser than the key-nutrient thresholds, so a value
    can be neither key nor gap.
    """
    vitamins = micronutrients.vitamins
    minerals = micronutrients.minerals
    checks = (
        (VITAMIN_C, vitamins.vitamin_c < 15),
        (VITAMIN_A, vitamins.vitamin_a < 250),
        (B_VITAMINS, vitamins.folate < 20 and vitamins.vitamin_b12 < 1),
        (CALCIUM, minerals.calcium < 50),
        (IRON, minerals.iron < 1),
        (OMEGA3, omega3.total_omega3 < 0.1),
        (ANTIOXIDANTS, antioxidants.orac_value < 500),
    )
    return [label for label, passed in checks if passed]
