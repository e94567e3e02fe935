"""Nature-aware classification of nutrient amounts."""

from dri_engine.domain.dri import DailyNutrientTarget, NotDefined
from dri_engine.domain.evaluation import NutrientClassification, NutrientNature
from dri_engine.reference.thresholds import CLASSIFICATION_THRESHOLDS

_BANDS = {
    NutrientNature.BENEFICIAL: (
        NutrientClassification.BENEFICIAL_HIGH,
        NutrientClassification.BENEFICIAL_MODERATE,
        NutrientClassification.BENEFICIAL_LOW,
    ),
    NutrientNature.RISK: (
        NutrientClassification.RISK_HIGH,
        NutrientClassification.RISK_MODERATE,
        NutrientClassification.RISK_LOW,
    ),
}


def percent_of(amount: float, reference: float | None) -> float | None:
    """Return amount as a percentage of reference; None for a zero reference."""
    if not reference:
        return None
    return amount / reference * 100


def classification_denominator(
    target: DailyNutrientTarget, nature: NutrientNature
) -> float | None:
    """Return the reference an amount is measured against.

    Risk nutrients are measured against the upper limit when one exists;
    everything else against the primary value.
    """
    if nature is NutrientNature.RISK and target.upper_limit is not None:
        return target.upper_limit
    return target.value


def classify_percent(pct: float, nature: NutrientNature) -> NutrientClassification:
    """Map a percent of reference onto a classification band (inclusive)."""
    bands = _BANDS.get(nature)
    if bands is None:
        return NutrientClassification.NEUTRAL
    high, moderate, low = bands
    thresholds = CLASSIFICATION_THRESHOLDS[nature]
    if pct >= thresholds.high:
        return high
    if pct >= thresholds.moderate:
        return moderate
    return low


def classify(
    amount: float,
    target: DailyNutrientTarget | NotDefined,
    nature: NutrientNature,
) -> NutrientClassification:
    """Classify an observed amount against a daily target."""
    if isinstance(target, NotDefined) or not target.value:
        return NutrientClassification.INSUFFICIENT_DATA
    if nature is NutrientNature.NEUTRAL:
        return NutrientClassification.NEUTRAL
    pct = percent_of(amount, classification_denominator(target, nature))
    if pct is None:
        return NutrientClassification.INSUFFICIENT_DATA
    return classify_percent(pct, nature)
