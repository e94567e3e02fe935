"""Patient profile domain models."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class Sex(StrEnum):
    """Biological sex used by the DRI tables."""

    MALE = "male"
    FEMALE = "female"


class AgeBracket(StrEnum):
    """Adult age brackets of the DRI tables, in ascending order."""

    AGE_19_30 = "19-30"
    AGE_31_50 = "31-50"
    AGE_51_70 = "51-70"
    AGE_70_PLUS = "70+"


class LifeStage(StrEnum):
    """Life stage for special DRI adjustments."""

    NON_PREGNANT = "non_pregnant"
    PREGNANT = "pregnant"
    LACTATING = "lactating"


class ActivityLevel(StrEnum):
    """Physical activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    HIGH = "high"
    ATHLETE = "athlete"


class NutritionGoal(StrEnum):
    """Dietary goal reported by the patient."""

    WEIGHT_LOSS = "weight_loss"
    MAINTENANCE = "maintenance"
    WEIGHT_GAIN = "weight_gain"
    MUSCLE_GAIN = "muscle_gain"
    PERFORMANCE = "performance"


class Condition(StrEnum):
    """Condition tags that can trigger a special adjustment."""

    PREGNANT = "pregnant"
    LACTATING = "lactating"
    ATHLETE = "athlete"
    HYPERTENSION = "hypertension"
    CKD = "ckd"
    DIABETES = "diabetes"
    HEART_DISEASE = "heartDisease"


@dataclass(frozen=True)
class HealthFlags:
    """Health condition flags reported for a patient."""

    hypertension: bool = False
    ckd: bool = False
    diabetes: bool = False
    heart_disease: bool = False

    def active_conditions(self) -> frozenset[Condition]:
        """Return the condition tags for every flag that is set."""
        flags = {
            Condition.HYPERTENSION: self.hypertension,
            Condition.CKD: self.ckd,
            Condition.DIABETES: self.diabetes,
            Condition.HEART_DISEASE: self.heart_disease,
        }
        return frozenset(condition for condition, active in flags.items() if active)


@dataclass(frozen=True)
class PatientProfile:
    """Raw patient profile as supplied by the caller.

    Either ``age_years`` or ``date_of_birth`` must be provided. ``sex`` is kept
    as a plain string so that unsupported values can be rejected explicitly by
    the resolver instead of failing during parsing.

    Weight, height and goal are carried for calorie estimation upstream and do
    not affect DRI lookups.
    """

    sex: str
    age_years: int | None = None
    date_of_birth: date | None = None
    life_stage: LifeStage = LifeStage.NON_PREGNANT
    activity_level: ActivityLevel | None = None
    health: HealthFlags = field(default_factory=HealthFlags)
    weight_kg: float | None = None
    height_cm: float | None = None
    goal: NutritionGoal | None = None


@dataclass(frozen=True)
class DriUserProfile:
    """Profile resolved into DRI lookup keys and active conditions."""

    sex: Sex
    age_years: int
    age_bracket: AgeBracket
    life_stage: LifeStage = LifeStage.NON_PREGNANT
    activity_level: ActivityLevel | None = None
    conditions: frozenset[Condition] = frozenset()

    def has_condition(self, condition: Condition) -> bool:
        """Return True when the condition is active for this profile."""
        return condition in self.conditions
