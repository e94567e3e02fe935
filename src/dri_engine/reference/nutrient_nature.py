"""Nutrient nature registry.

The nature decides how amounts are judged:

- beneficial: more is better (protein, fiber, vitamins, most minerals)
- risk: less is better (sodium, saturated and trans fat, sugars)
- neutral: depends on personal goals (calories, total fat and carbs, caffeine)

Sources: FDA Daily Values, WHO healthy diet fact sheet, AHA dietary
recommendations.
"""

from collections.abc import Mapping
from types import MappingProxyType

from dri_engine.domain.evaluation import NutrientNature

_BENEFICIAL = (
    "protein",
    "fiber",
    "potassium",
    "calcium",
    "iron",
    "magnesium",
    "zinc",
    "phosphorus",
    "selenium",
    "copper",
    "manganese",
    "vitaminA",
    "vitaminD",
    "vitaminE",
    "vitaminK",
    "vitaminC",
    "thiamin",
    "riboflavin",
    "niacin",
    "vitaminB6",
    "folate",
    "vitaminB12",
    "choline",
)

_RISK = (
    "sodium",
    "saturatedFat",
    "transFat",
    "cholesterol",
    "sugar",
    "addedSugar",
)

# Neutral amounts need a goal-specific range, not a universal pass/fail.
_NEUTRAL = (
    "calories",
    "carbs",
    "fat",
    "monounsaturatedFat",
    "polyunsaturatedFat",
    "caffeine",
    "alcohol",
    "water",
)

NUTRIENT_NATURE: Mapping[str, NutrientNature] = MappingProxyType(
    {
        **dict.fromkeys(_BENEFICIAL, NutrientNature.BENEFICIAL),
        **dict.fromkeys(_RISK, NutrientNature.RISK),
        **dict.fromkeys(_NEUTRAL, NutrientNature.NEUTRAL),
    }
)


def get_nutrient_nature(nutrient_id: str) -> NutrientNature:
    """Return the nature of a nutrient; unknown nutrients are neutral."""
    return NUTRIENT_NATURE.get(nutrient_id, NutrientNature.NEUTRAL)


def is_beneficial_nutrient(nutrient_id: str) -> bool:
    """Return True when higher intake of the nutrient is desirable."""
    return get_nutrient_nature(nutrient_id) is NutrientNature.BENEFICIAL


def is_risk_nutrient(nutrient_id: str) -> bool:
    """Return True when intake of the nutrient should be limited."""
    return get_nutrient_nature(nutrient_id) is NutrientNature.RISK


def get_nutrients_by_nature(nature: NutrientNature) -> list[str]:
    """Return the nutrient ids registered with a nature."""
    return [
        nutrient_id for nutrient_id, value in NUTRIENT_NATURE.items() if value == nature
    ]
