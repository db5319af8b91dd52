"""Reference tables mapping profile values to ingredient terms.

All terms are lower-case. Table order is significant: matchers walk the
tables in insertion order, which fixes the order of reasons and warnings.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from nutriscan.domain.classification import Severity


@dataclass(frozen=True)
class IngredientIssue:
    """Why a generally problematic ingredient is flagged."""

    issue: str
    severity: Severity


@dataclass(frozen=True)
class TargetRange:
    """Numeric bounds for a nutrient; either side may be absent."""

    min: float | None = None
    max: float | None = None


@dataclass(frozen=True)
class NutritionTarget:
    """Per-goal nutrient targets (g, except calories in kcal)."""

    protein: TargetRange | None = None
    carbs: TargetRange | None = None
    fat: TargetRange | None = None
    sugar: TargetRange | None = None
    calories: TargetRange | None = None


@dataclass(frozen=True)
class FitnessGoalProfile:
    """Guidance for a fitness goal.

    Only ``nutrition_target`` is used when classifying; ``good`` and
    ``avoid`` are kept for display.
    """

    good: tuple[str, ...]
    avoid: tuple[str, ...]
    nutrition_target: NutritionTarget


PROBLEMATIC_INGREDIENTS: Mapping[str, IngredientIssue] = MappingProxyType(
    {
        "high fructose corn syrup": IngredientIssue(
            "May contribute to obesity and metabolic syndrome", "high"
        ),
        "artificial sweeteners": IngredientIssue(
            "May affect gut microbiome", "medium"
        ),
        "sodium benzoate": IngredientIssue(
            "May cause allergic reactions in some individuals", "medium"
        ),
        "msg": IngredientIssue("May cause headaches in sensitive individuals", "medium"),
        "trans fats": IngredientIssue("Increases risk of heart disease", "high"),
        "yellow 5": IngredientIssue(
            "May cause allergic reactions or hyperactivity", "medium"
        ),
        "red 40": IngredientIssue(
            "May cause allergic reactions or hyperactivity", "medium"
        ),
        "bha": IngredientIssue("Potential carcinogen", "high"),
        "bht": IngredientIssue("Potential endocrine disruptor", "high"),
        "partially hydrogenated oils": IngredientIssue(
            "Contains trans fats which increase heart disease risk", "high"
        ),
    }
)

ALLERGEN_TERMS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "peanuts": ("peanuts", "peanut oil", "peanut flour", "arachis oil"),
        "dairy": (
            "milk",
            "cream",
            "butter",
            "cheese",
            "yogurt",
            "whey",
            "casein",
            "lactose",
        ),
        "gluten": ("wheat", "barley", "rye", "malt", "seitan", "triticale"),
        "shellfish": ("shrimp", "crab", "lobster", "crayfish", "prawn"),
        "eggs": ("egg", "albumin", "globulin", "ovomucin", "vitellin"),
        "soy": ("soy", "soya", "edamame", "tofu", "miso", "tempeh"),
        "tree nuts": ("almond", "hazelnut", "walnut", "cashew", "pecan", "pistachio"),
        "fish": ("fish", "cod", "salmon", "trout", "tuna", "bass", "flounder"),
    }
)

DIETARY_RESTRICTION_TERMS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "vegan": (
            "meat",
            "chicken",
            "beef",
            "pork",
            "fish",
            "seafood",
            "dairy",
            "eggs",
            "honey",
            "gelatin",
            "whey",
            "casein",
        ),
        "vegetarian": (
            "meat",
            "chicken",
            "beef",
            "pork",
            "fish",
            "seafood",
            "gelatin",
        ),
        "keto": (
            "sugar",
            "high fructose corn syrup",
            "honey",
            "agave",
            "maple syrup",
            "flour",
            "rice",
            "potato",
        ),
        "paleo": ("dairy", "grains", "legumes", "refined sugar", "refined oils"),
        "low carb": (
            "sugar",
            "flour",
            "corn syrup",
            "rice",
            "potato",
            "bread",
            "pasta",
        ),
        "low fat": ("oil", "butter", "lard", "cream", "full fat"),
        "low sugar": (
            "sugar",
            "corn syrup",
            "fructose",
            "sucrose",
            "dextrose",
            "maltose",
            "honey",
        ),
        "low sodium": (
            "salt",
            "sodium chloride",
            "monosodium glutamate",
            "baking soda",
            "sodium nitrite",
        ),
    }
)

HEALTH_CONDITION_TERMS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "diabetes": (
            "sugar",
            "high fructose corn syrup",
            "corn syrup",
            "honey",
            "agave nectar",
            "white flour",
        ),
        "hypertension": (
            "salt",
            "sodium",
            "msg",
            "baking soda",
            "sodium nitrite",
            "sodium benzoate",
        ),
        "high cholesterol": (
            "trans fats",
            "saturated fats",
            "hydrogenated oils",
            "lard",
            "butter",
            "full fat dairy",
        ),
        "heart disease": (
            "trans fats",
            "sodium",
            "hydrogenated oils",
            "artificial flavors",
            "high fructose corn syrup",
        ),
        "celiac": ("wheat", "barley", "rye", "malt", "seitan", "triticale"),
        "IBS": (
            "dairy",
            "gluten",
            "fructose",
            "caffeine",
            "alcohol",
            "artificial sweeteners",
        ),
    }
)

FITNESS_GOAL_PROFILES: Mapping[str, FitnessGoalProfile] = MappingProxyType(
    {
        "weight loss": FitnessGoalProfile(
            good=("protein", "fiber", "water"),
            avoid=(
                "added sugar",
                "high fructose corn syrup",
                "trans fats",
                "refined carbs",
            ),
            nutrition_target=NutritionTarget(
                sugar=TargetRange(max=25),
                calories=TargetRange(max=300),
            ),
        ),
        "muscle gain": FitnessGoalProfile(
            good=("protein", "complete proteins", "creatine", "amino acids"),
            avoid=("added sugar", "trans fats"),
            nutrition_target=NutritionTarget(
                protein=TargetRange(min=20, max=50),
                calories=TargetRange(min=200),
            ),
        ),
        "maintenance": FitnessGoalProfile(
            good=("balanced nutrients", "protein", "fiber", "healthy fats"),
            avoid=("excessive sugar", "trans fats"),
            nutrition_target=NutritionTarget(sugar=TargetRange(max=30)),
        ),
        "endurance": FitnessGoalProfile(
            good=("complex carbs", "electrolytes", "protein"),
            avoid=("excessive fat", "fiber before exercise"),
            nutrition_target=NutritionTarget(carbs=TargetRange(min=30)),
        ),
        "general health": FitnessGoalProfile(
            good=("whole foods", "fruits", "vegetables", "lean protein", "fiber"),
            avoid=("artificial ingredients", "high sugar", "trans fats"),
            nutrition_target=NutritionTarget(sugar=TargetRange(max=25)),
        ),
    }
)
