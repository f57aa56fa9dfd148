"""Domain models for nutritional analysis results."""

from dataclasses import astuple, dataclass, field


@dataclass(frozen=True)
class VitaminProfile:
    """Estimated vitamin quantities (IU, mg or mcg per vitamin)."""

    vitamin_a: float = 0.0
    vitamin_c: float = 0.0
    vitamin_d: float = 0.0
    vitamin_e: float = 0.0
    vitamin_k: float = 0.0
    thiamine: float = 0.0
    riboflavin: float = 0.0
    niacin: float = 0.0
    vitamin_b6: float = 0.0
    folate: float = 0.0
    vitamin_b12: float = 0.0


@dataclass(frozen=True)
class MineralProfile:
    """Estimated mineral quantities (mg, selenium in mcg)."""

    calcium: float = 0.0
    iron: float = 0.0
    magnesium: float = 0.0
    phosphorus: float = 0.0
    potassium: float = 0.0
    zinc: float = 0.0
    copper: float = 0.0
    manganese: float = 0.0
    selenium: float = 0.0


@dataclass(frozen=True)
class MicronutrientProfile:
    """Vitamins and minerals estimated for a recipe."""

    vitamins: VitaminProfile = field(default_factory=VitaminProfile)
    minerals: MineralProfile = field(default_factory=MineralProfile)

    def non_zero_count(self) -> int:
        """Count vitamin and mineral fields with a non-zero estimate."""
        values = astuple(self.vitamins) + astuple(self.minerals)
        return sum(1 for value in values if value > 0)


@dataclass(frozen=True)
class Omega3Profile:
    """Omega-3 fatty acids in grams with a 0-100 score."""

    total_omega3: float = 0.0
    epa: float = 0.0
    dha: float = 0.0
    ala: float = 0.0
    omega3_score: int = 0


@dataclass(frozen=True)
class AntioxidantProfile:
    """ORAC estimate, antioxidant sub-estimates in mg and a 0-100 score."""

    total_antioxidants: int = 0
    orac_value: int = 0
    polyphenols: int = 0
    flavonoids: int = 0
    carotenoids: int = 0
    vitamin_c: int = 0
    vitamin_e: int = 0
    antioxidant_score: int = 0


@dataclass(frozen=True)
class NutritionalAnalysisResult:
    """Aggregate output of a recipe analysis."""

    micronutrients: MicronutrientProfile
    omega3: Omega3Profile
    antioxidants: AntioxidantProfile
    nutritional_density_score: int
    key_nutrients: tuple[str, ...]
    nutrient_gaps: tuple[str, ...]
