"""Nutrient evaluation domain models."""

from dataclasses import dataclass, field
from enum import StrEnum

from dri_engine.domain.dri import DailyNutrientTarget
from dri_engine.domain.profile import AgeBracket, Sex


class NutrientNature(StrEnum):
    """Whether more of a nutrient is desirable."""

    BENEFICIAL = "beneficial"
    RISK = "risk"
    NEUTRAL = "neutral"


class NutrientClassification(StrEnum):
    """Classification of a nutrient amount against its target."""

    BENEFICIAL_HIGH = "beneficial_high"
    BENEFICIAL_MODERATE = "beneficial_moderate"
    BENEFICIAL_LOW = "beneficial_low"
    RISK_HIGH = "risk_high"
    RISK_MODERATE = "risk_moderate"
    RISK_LOW = "risk_low"
    NEUTRAL = "neutral"
    NOT_APPLICABLE = "not_applicable"
    INSUFFICIENT_DATA = "insufficient_data"


class SeverityLevel(StrEnum):
    """UI styling level for a classification."""

    SUCCESS = "success"
    INFO = "info"
    NEUTRAL = "neutral"
    WARNING = "warning"
    ERROR = "error"
    MUTED = "muted"


@dataclass(frozen=True)
class Severity:
    """Styling level and ordering priority of a classification."""

    level: SeverityLevel
    priority: int


@dataclass(frozen=True)
class NutrientIntake:
    """Observed amount of a nutrient; ``amount`` is None when data is missing."""

    nutrient_id: str
    amount: float | None
    unit: str


@dataclass(frozen=True)
class NutrientEvaluation:
    """Evaluation of one nutrient amount for a patient."""

    nutrient_id: str
    name: str
    amount: float | None
    unit: str
    target: DailyNutrientTarget | None
    percent_of_target: float | None
    percent_of_upper_limit: float | None
    classification: NutrientClassification
    nature: NutrientNature
    severity: Severity


@dataclass(frozen=True)
class Highlights:
    """Nutrients worth calling out in a summary."""

    beneficial: tuple[NutrientEvaluation, ...] = ()
    concerns: tuple[NutrientEvaluation, ...] = ()


@dataclass(frozen=True)
class ProfileSummary:
    """Profile keys used for an evaluation."""

    age_bracket: AgeBracket
    sex: Sex
    calorie_target: float | None


@dataclass(frozen=True)
class FoodEvaluationResult:
    """Evaluations for one intake event or one day, ordered by priority."""

    evaluations: tuple[NutrientEvaluation, ...]
    profile: ProfileSummary
    highlights: Highlights = field(default_factory=Highlights)
