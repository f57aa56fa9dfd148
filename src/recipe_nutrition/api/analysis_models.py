"""Pydantic models for serializing analysis results to clients."""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from recipe_nutrition.domain.analysis import NutritionalAnalysisResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VitaminsResponse(_CamelModel):
    """Vitamin estimates."""

    vitamin_a: float
    vitamin_c: float
    vitamin_d: float
    vitamin_e: float
    vitamin_k: float
    thiamine: float
    riboflavin: float
    niacin: float
    vitamin_b6: float
    folate: float
    vitamin_b12: float


class MineralsResponse(_CamelModel):
    """Mineral estimates."""

    calcium: float
    iron: float
    magnesium: float
    phosphorus: float
    potassium: float
    zinc: float
    copper: float
    manganese: float
    selenium: float


class MicronutrientsResponse(_CamelModel):
    """Vitamins and minerals."""

    vitamins: VitaminsResponse
    minerals: MineralsResponse


class Omega3Response(_CamelModel):
    """Omega-3 estimates."""

    total_omega3: float
    epa: float
    dha: float
    ala: float
    omega3_score: int


class AntioxidantsResponse(_CamelModel):
    """Antioxidant estimates."""

    total_antioxidants: int
    orac_value: int
    polyphenols: int
    flavonoids: int
    carotenoids: int
    vitamin_c: int
    vitamin_e: int
    antioxidant_score: int


class NutritionalAnalysisResponse(_CamelModel):
    """Full analysis in the client-facing camelCase shape."""

    micronutrients: MicronutrientsResponse
    omega3: Omega3Response
    antioxidants: AntioxidantsResponse
    nutritional_density_score: int
    key_nutrients: list[str]
    nutrient_gaps: list[str]

    @classmethod
    def from_domain(
        cls, result: NutritionalAnalysisResult
    ) -> "NutritionalAnalysisResponse":
        """Build a response from a domain analysis result."""
        return cls.model_validate(asdict(result))
