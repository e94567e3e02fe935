"""DRI reference data for adults.

Values follow the NIH Office of Dietary Supplements DRI tables, the USDA
Dietary Guidelines 2020-2025 and FDA Daily Values. Limits for sugars,
saturated fat, cholesterol, caffeine and alcohol follow WHO, AHA and FDA
guidance and are modeled as upper limits.

The table is built once at import time and exposed as a read-only mapping.
"""

from collections.abc import Mapping
from types import MappingProxyType

from dri_engine.domain.dri import (
    Amdr,
    NutrientDriDefinition,
    ReferenceType,
    SexValues,
    SpecialAdjustment,
    Unit,
    UpperLimitValues,
    ValuesByAge,
)
from dri_engine.domain.profile import AgeBracket

KCAL_PER_GRAM_PROTEIN = 4.0
KCAL_PER_GRAM_CARBS = 4.0
KCAL_PER_GRAM_FAT = 9.0


def _ages(
    age_19_30: float, age_31_50: float, age_51_70: float, age_70_plus: float
) -> ValuesByAge:
    values = (age_19_30, age_31_50, age_51_70, age_70_plus)
    return MappingProxyType(dict(zip(AgeBracket, values, strict=True)))


def _flat(value: float) -> ValuesByAge:
    return _ages(value, value, value, value)


def _by_sex(male: ValuesByAge, female: ValuesByAge) -> SexValues:
    return SexValues(male=male, female=female)


def _ul(value: ValuesByAge) -> UpperLimitValues:
    return UpperLimitValues(both=value)


def _adjust(
    condition: str, type_: str, value: float, target: str = "base"
) -> SpecialAdjustment:
    return SpecialAdjustment.create(condition, type_, value, target)


def _life_stage(pregnant: float, lactating: float) -> tuple[SpecialAdjustment, ...]:
    """Replacement base values for pregnancy and lactation."""
    return (
        _adjust("pregnant", "replace", pregnant),
        _adjust("lactating", "replace", lactating),
    )


_MACRONUTRIENTS = (
    NutrientDriDefinition(
        nutrient_id="calories",
        name="Calories",
        unit=Unit.KCAL,
        # Self-referential range: resolves to the supplied calorie target.
        amdr=Amdr(min_pct_kcal=100, max_pct_kcal=100, kcal_per_unit=1.0),
    ),
    NutrientDriDefinition(
        nutrient_id="protein",
        name="Protein",
        unit=Unit.G,
        rda=_by_sex(_flat(56), _flat(46)),
        amdr=Amdr(
            min_pct_kcal=10, max_pct_kcal=35, kcal_per_unit=KCAL_PER_GRAM_PROTEIN
        ),
        special_adjustments=(
            _adjust("athlete", "multiplier", 1.6),
            _adjust("pregnant", "absolute", 25),
            _adjust("lactating", "absolute", 25),
        ),
    ),
    NutrientDriDefinition(
        nutrient_id="carbs",
        name="Carbohydrates",
        unit=Unit.G,
        rda=_by_sex(_flat(130), _flat(130)),
        amdr=Amdr(min_pct_kcal=45, max_pct_kcal=65, kcal_per_unit=KCAL_PER_GRAM_CARBS),
        special_adjustments=(
            _adjust("pregnant", "absolute", 45),
            _adjust("lactating", "absolute", 80),
        ),
    ),
    NutrientDriDefinition(
        nutrient_id="fat",
        name="Total Fat",
        unit=Unit.G,
        amdr=Amdr(min_pct_kcal=20, max_pct_kcal=35, kcal_per_unit=KCAL_PER_GRAM_FAT),
    ),
    NutrientDriDefinition(
        nutrient_id="fiber",
        name="Fiber",
        unit=Unit.G,
        ai=_by_sex(_ages(38, 38, 30, 30), _ages(25, 25, 21, 21)),
        primary_reference=ReferenceType.AI,
        special_adjustments=_life_stage(pregnant=28, lactating=29),
    ),
    NutrientDriDefinition(
        nutrient_id="sugar",
        name="Sugar",
        unit=Unit.G,
        # WHO: under 10% of energy from free sugars, 50 g at 2000 kcal.
        ul=_ul(_flat(50)),
    ),
    NutrientDriDefinition(
        nutrient_id="addedSugar",
        name="Added Sugar",
        unit=Unit.G,
        # AHA limits.
        ul=UpperLimitValues(male=_flat(36), female=_flat(25)),
    ),
)

_FAT_SUBTYPES = (
    NutrientDriDefinition(
        nutrient_id="saturatedFat",
        name="Saturated Fat",
        unit=Unit.G,
        ul=_ul(_ages(22, 22, 20, 20)),
        special_adjustments=(_adjust("heartDisease", "replace", 15, "upperLimit"),),
    ),
    NutrientDriDefinition(
        nutrient_id="transFat",
        name="Trans Fat",
        unit=Unit.G,
        ul=_ul(_flat(2)),
    ),
    NutrientDriDefinition(
        nutrient_id="cholesterol",
        name="Cholesterol",
        unit=Unit.MG,
        ul=_ul(_flat(300)),
        special_adjustments=(_adjust("heartDisease", "replace", 200, "upperLimit"),),
    ),
    NutrientDriDefinition(
        nutrient_id="monounsaturatedFat",
        name="Monounsaturated Fat",
        unit=Unit.G,
    ),
    NutrientDriDefinition(
        nutrient_id="polyunsaturatedFat",
        name="Polyunsaturated Fat",
        unit=Unit.G,
    ),
)

_MINERALS = (
    NutrientDriDefinition(
        nutrient_id="sodium",
        name="Sodium",
        unit=Unit.MG,
        ai=_by_sex(_ages(1500, 1500, 1300, 1200), _ages(1500, 1500, 1300, 1200)),
        ul=_ul(_flat(2300)),
        primary_reference=ReferenceType.AI,
        special_adjustments=(
            _adjust("hypertension", "replace", 1500, "upperLimit"),
            _adjust("heartDisease", "replace", 1500, "upperLimit"),
        ),
    ),
    NutrientDriDefinition(
        nutrient_id="potassium",
        name="Potassium",
        unit=Unit.MG,
        ai=_by_sex(_flat(3400), _flat(2600)),
        primary_reference=ReferenceType.AI,
        special_adjustments=(
            _adjust("ckd", "replace", 2000),
            *_life_stage(pregnant=2900, lactating=2800),
        ),
    ),
    NutrientDriDefinition(
        nutrient_id="calcium",
        name="Calcium",
        unit=Unit.MG,
        rda=_by_sex(_ages(1000, 1000, 1000, 1200), _ages(1000, 1000, 1200, 1200)),
        ul=_ul(_ages(2500, 2500, 2000, 2000)),
        special_adjustments=_life_stage(pregnant=1000, lactating=1000),
    ),
    NutrientDriDefinition(
        nutrient_id="iron",
        name="Iron",
        unit=Unit.MG,
        rda=_by_sex(_flat(8), _ages(18, 18, 8, 8)),
        ul=_ul(_flat(45)),
        special_adjustments=_life_stage(pregnant=27, lactating=9),
    ),
    NutrientDriDefinition(
        nutrient_id="magnesium",
        name="Magnesium",
        unit=Unit.MG,
        rda=_by_sex(_ages(400, 420, 420, 420), _ages(310, 320, 320, 320)),
        # Applies to supplemental magnesium only.
        ul=_ul(_flat(350)),
        special_adjustments=_life_stage(pregnant=350, lactating=310),
    ),
    NutrientDriDefinition(
        nutrient_id="zinc",
        name="Zinc",
        unit=Unit.MG,
        rda=_by_sex(_flat(11), _flat(8)),
        ul=_ul(_flat(40)),
        special_adjustments=_life_stage(pregnant=11, lactating=12),
    ),
    NutrientDriDefinition(
        nutrient_id="phosphorus",
        name="Phosphorus",
        unit=Unit.MG,
        rda=_by_sex(_flat(700), _flat(700)),
        ul=_ul(_ages(4000, 4000, 4000, 3000)),
        special_adjustments=(
            _adjust("ckd", "replace", 800, "upperLimit"),
            *_life_stage(pregnant=700, lactating=700),
        ),
    ),
    NutrientDriDefinition(
        nutrient_id="selenium",
        name="Selenium",
        unit=Unit.MCG,
        rda=_by_sex(_flat(55), _flat(55)),
        ul=_ul(_flat(400)),
        special_adjustments=_life_stage(pregnant=60, lactating=70),
    ),
    NutrientDriDefinition(
        nutrient_id="copper",
        name="Copper",
        unit=Unit.MCG,
        rda=_by_sex(_flat(900), _flat(900)),
        ul=_ul(_flat(10000)),
        special_adjustments=_life_stage(pregnant=1000, lactating=1300),
    ),
    NutrientDriDefinition(
        nutrient_id="manganese",
        name="Manganese",
        unit=Unit.MG,
        ai=_by_sex(_flat(2.3), _flat(1.8)),
        ul=_ul(_flat(11)),
        primary_reference=ReferenceType.AI,
        special_adjustments=_life_stage(pregnant=2.0, lactating=2.6),
    ),
)

_FAT_SOLUBLE_VITAMINS = (
    NutrientDriDefinition(
        nutrient_id="vitaminA",
        name="Vitamin A",
        # RAE
        unit=Unit.MCG,
        rda=_by_sex(_flat(900), _flat(700)),
        ul=_ul(_flat(3000)),
        special_adjustments=_life_stage(pregnant=770, lactating=1300),
    ),
    NutrientDriDefinition(
        nutrient_id="vitaminD",
        name="Vitamin D",
        unit=Unit.MCG,
        rda=_by_sex(_ages(15, 15, 15, 20), _ages(15, 15, 15, 20)),
        ul=_ul(_flat(100)),
        special_adjustments=_life_stage(pregnant=15, lactating=15),
    ),
    NutrientDriDefinition(
        nutrient_id="vitaminE",
        name="Vitamin E",
        # Alpha-tocopherol
        unit=Unit.MG,
        rda=_by_sex(_flat(15), _flat(15)),
        ul=_ul(_flat(1000)),
        special_adjustments=_life_stage(pregnant=15, lactating=19),
    ),
    NutrientDriDefinition(
        nutrient_id="vitaminK",
        name="Vitamin K",
        unit=Unit.MCG,
        ai=_by_sex(_flat(120), _flat(90)),
        primary_reference=ReferenceType.AI,
        special_adjustments=_life_stage(pregnant=90, lactating=90),
    ),
)

_WATER_SOLUBLE_VITAMINS = (
    NutrientDriDefinition(
        nutrient_id="vitaminC",
        name="Vitamin C",
        unit=Unit.MG,
        rda=_by_sex(_flat(90), _flat(75)),
        ul=_ul(_flat(2000)),
        special_adjustments=_life_stage(pregnant=85, lactating=120),
    ),
    NutrientDriDefinition(
        nutrient_id="thiamin",
        name="Thiamin (B1)",
        unit=Unit.MG,
        rda=_by_sex(_flat(1.2), _flat(1.1)),
        special_adjustments=_life_stage(pregnant=1.4, lactating=1.4),
    ),
    NutrientDriDefinition(
        nutrient_id="riboflavin",
        name="Riboflavin (B2)",
        unit=Unit.MG,
        rda=_by_sex(_flat(1.3), _flat(1.1)),
        special_adjustments=_life_stage(pregnant=1.4, lactating=1.6),
    ),
    NutrientDriDefinition(
        nutrient_id="niacin",
        name="Niacin (B3)",
        # NE
        unit=Unit.MG,
        rda=_by_sex(_flat(16), _flat(14)),
        ul=_ul(_flat(35)),
        special_adjustments=_life_stage(pregnant=18, lactating=17),
    ),
    NutrientDriDefinition(
        nutrient_id="vitaminB6",
        name="Vitamin B6",
        unit=Unit.MG,
        rda=_by_sex(_ages(1.3, 1.3, 1.7, 1.7), _ages(1.3, 1.3, 1.5, 1.5)),
        ul=_ul(_flat(100)),
        special_adjustments=_life_stage(pregnant=1.9, lactating=2.0),
    ),
    NutrientDriDefinition(
        nutrient_id="folate",
        name="Folate",
        # DFE
        unit=Unit.MCG,
        rda=_by_sex(_flat(400), _flat(400)),
        ul=_ul(_flat(1000)),
        special_adjustments=_life_stage(pregnant=600, lactating=500),
    ),
    NutrientDriDefinition(
        nutrient_id="vitaminB12",
        name="Vitamin B12",
        unit=Unit.MCG,
        rda=_by_sex(_flat(2.4), _flat(2.4)),
        special_adjustments=_life_stage(pregnant=2.6, lactating=2.8),
    ),
    NutrientDriDefinition(
        nutrient_id="choline",
        name="Choline",
        unit=Unit.MG,
        ai=_by_sex(_flat(550), _flat(425)),
        ul=_ul(_flat(3500)),
        primary_reference=ReferenceType.AI,
        special_adjustments=_life_stage(pregnant=450, lactating=550),
    ),
)

_OTHER = (
    NutrientDriDefinition(
        nutrient_id="caffeine",
        name="Caffeine",
        unit=Unit.MG,
        ul=_ul(_flat(400)),
        special_adjustments=(
            _adjust("pregnant", "replace", 200, "upperLimit"),
            _adjust("lactating", "replace", 300, "upperLimit"),
        ),
    ),
    NutrientDriDefinition(
        nutrient_id="alcohol",
        name="Alcohol",
        unit=Unit.G,
        # One standard drink is about 14 g.
        ul=UpperLimitValues(male=_flat(28), female=_flat(14)),
        special_adjustments=(
            _adjust("pregnant", "replace", 0, "upperLimit"),
            _adjust("lactating", "replace", 0, "upperLimit"),
        ),
    ),
    NutrientDriDefinition(
        nutrient_id="water",
        name="Water",
        # Total water from food and beverages.
        unit=Unit.G,
        ai=_by_sex(_flat(3700), _flat(2700)),
        primary_reference=ReferenceType.AI,
        special_adjustments=(
            *_life_stage(pregnant=3000, lactating=3800),
            _adjust("athlete", "multiplier", 1.5),
        ),
    ),
)

DRI_TABLE: Mapping[str, NutrientDriDefinition] = MappingProxyType(
    {
        definition.nutrient_id: definition
        for group in (
            _MACRONUTRIENTS,
            _FAT_SUBTYPES,
            _MINERALS,
            _FAT_SOLUBLE_VITAMINS,
            _WATER_SOLUBLE_VITAMINS,
            _OTHER,
        )
        for definition in group
    }
)


def get_dri_definition(nutrient_id: str) -> NutrientDriDefinition | None:
    """Return the DRI definition for a nutrient, if one exists."""
    return DRI_TABLE.get(nutrient_id)


def get_defined_nutrients() -> list[str]:
    """Return all nutrient ids with a DRI definition, in table order."""
    return list(DRI_TABLE)
