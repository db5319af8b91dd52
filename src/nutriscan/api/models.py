"""Pydantic models for the HTTP API, using the app's camelCase JSON names."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from nutriscan.domain.classification import (
    Classification,
    ClassificationResult,
)
from nutriscan.domain.products import (
    UNKNOWN_BRAND_NAME,
    UNKNOWN_PRODUCT_NAME,
    NutritionFacts,
    Product,
)
from nutriscan.domain.profiles import (
    DEFAULT_FITNESS_GOALS,
    DietaryRestriction,
    FitnessGoal,
    HealthCondition,
    UserProfile,
)
from nutriscan.services.scans import ScanReport


AllergenName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class NutritionFactsModel(_ApiModel):
    """Nutrition facts payload (kcal, g, g, g, g, mg)."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    sugar: float = Field(ge=0)
    sodium: float = Field(ge=0)

    def to_domain(self) -> NutritionFacts:
        return NutritionFacts(**self.model_dump())

    @classmethod
    def from_domain(cls, facts: NutritionFacts) -> "NutritionFactsModel":
        return cls(
            calories=facts.calories,
            protein=facts.protein,
            carbs=facts.carbs,
            fat=facts.fat,
            sugar=facts.sugar,
            sodium=facts.sodium,
        )


class ProductModel(_ApiModel):
    """Product payload."""

    name: str = UNKNOWN_PRODUCT_NAME
    brand: str = UNKNOWN_BRAND_NAME
    ingredients: list[str]
    nutritional_info: NutritionFactsModel = Field(alias="nutritionalInfo")

    def to_domain(self) -> Product:
        return Product(
            name=self.name,
            brand=self.brand,
            ingredients=tuple(self.ingredients),
            nutritional_info=self.nutritional_info.to_domain(),
        )

    @classmethod
    def from_domain(cls, product: Product) -> "ProductModel":
        return cls(
            name=product.name,
            brand=product.brand,
            ingredients=list(product.ingredients),
            nutritional_info=NutritionFactsModel.from_domain(product.nutritional_info),
        )


class ProfileFacetsModel(_ApiModel):
    """The profile facets the classifier reads."""

    allergens: list[AllergenName] = Field(default_factory=list)
    dietary_restrictions: list[DietaryRestriction] = Field(
        default_factory=list, alias="dietaryRestrictions"
    )
    health_conditions: list[HealthCondition] = Field(
        default_factory=list, alias="healthConditions"
    )
    fitness_goals: list[FitnessGoal] = Field(
        default_factory=lambda: list(DEFAULT_FITNESS_GOALS), alias="fitnessGoals"
    )


class ProfileModel(ProfileFacetsModel):
    """Full user profile."""

    name: str = ""
    age: int = Field(default=30, ge=0)
    height: float = Field(default=170, ge=0)
    weight: float = Field(default=70, ge=0)
    additional_notes: str = Field(default="", alias="additionalNotes")
    custom_allergens: dict[str, str] = Field(
        default_factory=dict, alias="customAllergens"
    )
    available_allergens: dict[str, str] = Field(
        default_factory=dict, alias="availableAllergens"
    )

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "ProfileModel":
        return cls(
            name=profile.name,
            age=profile.age,
            height=profile.height,
            weight=profile.weight,
            allergens=list(profile.allergens),
            dietary_restrictions=list(profile.dietary_restrictions),
            health_conditions=list(profile.health_conditions),
            fitness_goals=list(profile.fitness_goals),
            additional_notes=profile.additional_notes,
            custom_allergens=dict(profile.custom_allergens),
            available_allergens=profile.available_allergens(),
        )


class ProfileUpdate(_ApiModel):
    """Partial profile update; only fields that are sent are applied."""

    name: str | None = None
    age: int | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)
    allergens: list[AllergenName] | None = None
    dietary_restrictions: list[DietaryRestriction] | None = Field(
        default=None, alias="dietaryRestrictions"
    )
    health_conditions: list[HealthCondition] | None = Field(
        default=None, alias="healthConditions"
    )
    fitness_goals: list[FitnessGoal] | None = Field(default=None, alias="fitnessGoals")
    additional_notes: str | None = Field(default=None, alias="additionalNotes")


class CustomAllergenRequest(_ApiModel):
    """Free-text allergen to add to a profile."""

    label: str = Field(min_length=1)


class BarcodeScanRequest(_ApiModel):
    """A barcode already decoded on the device."""

    barcode: str
    profile_id: str = Field(default="default", alias="profileId")


class IngredientScanRequest(_ApiModel):
    """Ingredients already read off a label on the device."""

    ingredients: list[str]
    profile_id: str = Field(default="default", alias="profileId")


class ClassifyRequest(_ApiModel):
    """Classify an explicit product against explicit profile facets."""

    product: ProductModel
    profile: ProfileFacetsModel = Field(default_factory=ProfileFacetsModel)


class FitnessCompatibilityModel(_ApiModel):
    """Fitness compatibility payload."""

    compatible: bool
    reasons: list[str]


class ClassificationResultModel(_ApiModel):
    """Classification payload; absent optional fields are omitted."""

    classification: Classification
    reasons: list[str]
    warnings: list[str] | None = None
    alternatives: list[str] | None = None
    fitness_compatibility: FitnessCompatibilityModel | None = Field(
        default=None, alias="fitnessCompatibility"
    )

    @classmethod
    def from_domain(cls, result: ClassificationResult) -> "ClassificationResultModel":
        fitness = result.fitness_compatibility
        return cls(
            classification=result.classification,
            reasons=list(result.reasons),
            warnings=list(result.warnings) if result.warnings is not None else None,
            alternatives=(
                list(result.alternatives) if result.alternatives is not None else None
            ),
            fitness_compatibility=(
                FitnessCompatibilityModel(
                    compatible=fitness.compatible, reasons=list(fitness.reasons)
                )
                if fitness is not None
                else None
            ),
        )


class ScanReportModel(_ApiModel):
    """Scan response."""

    product: ProductModel
    result: ClassificationResultModel
    nutrition_score: int = Field(alias="nutritionScore")

    @classmethod
    def from_domain(cls, report: ScanReport) -> "ScanReportModel":
        return cls(
            product=ProductModel.from_domain(report.product),
            result=ClassificationResultModel.from_domain(report.result),
            nutrition_score=report.nutrition_score,
        )


class ScoreResponse(_ApiModel):
    """Nutrition score response."""

    score: int
