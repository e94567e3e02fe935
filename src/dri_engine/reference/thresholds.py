"""Classification thresholds and severity map.

Cut-points are percentages of the daily reference. FDA labeling treats 20%
DV or more as "high" and 5% or more as a "good source"; the engine uses 20
and 10 for both natures. Boundaries are inclusive.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from dri_engine.domain.evaluation import (
    NutrientClassification,
    NutrientNature,
    Severity,
    SeverityLevel,
)


class ThresholdLevel(StrEnum):
    """Threshold band names."""

    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"


@dataclass(frozen=True)
class ClassificationThresholds:
    """Percent-of-reference cut-points for one nature."""

    high: float
    moderate: float

    @property
    def low(self) -> float:
        """Amounts below this percentage are classified as low."""
        return self.moderate


BENEFICIAL_THRESHOLDS = ClassificationThresholds(high=20.0, moderate=10.0)
RISK_THRESHOLDS = ClassificationThresholds(high=20.0, moderate=10.0)

CLASSIFICATION_THRESHOLDS: Mapping[NutrientNature, ClassificationThresholds] = (
    MappingProxyType(
        {
            NutrientNature.BENEFICIAL: BENEFICIAL_THRESHOLDS,
            NutrientNature.RISK: RISK_THRESHOLDS,
        }
    )
)


def get_threshold(nature: NutrientNature, level: ThresholdLevel) -> float:
    """Return the threshold percentage for a nature and band."""
    thresholds = CLASSIFICATION_THRESHOLDS.get(nature)
    if thresholds is None:
        raise ValueError(f"No thresholds for {nature} nutrients")
    if level is ThresholdLevel.HIGH:
        return thresholds.high
    if level is ThresholdLevel.MODERATE:
        return thresholds.moderate
    return thresholds.low


CLASSIFICATION_SEVERITY: Mapping[NutrientClassification, Severity] = MappingProxyType(
    {
        NutrientClassification.BENEFICIAL_HIGH: Severity(SeverityLevel.SUCCESS, 3),
        NutrientClassification.BENEFICIAL_MODERATE: Severity(SeverityLevel.INFO, 2),
        NutrientClassification.BENEFICIAL_LOW: Severity(SeverityLevel.NEUTRAL, 1),
        NutrientClassification.RISK_HIGH: Severity(SeverityLevel.ERROR, 3),
        NutrientClassification.RISK_MODERATE: Severity(SeverityLevel.WARNING, 2),
        NutrientClassification.RISK_LOW: Severity(SeverityLevel.SUCCESS, 1),
        NutrientClassification.NEUTRAL: Severity(SeverityLevel.NEUTRAL, 0),
        NutrientClassification.NOT_APPLICABLE: Severity(SeverityLevel.MUTED, 0),
        NutrientClassification.INSUFFICIENT_DATA: Severity(SeverityLevel.MUTED, 0),
    }
)


def get_classification_severity(classification: NutrientClassification) -> Severity:
    """Return the UI severity for a classification."""
    return CLASSIFICATION_SEVERITY.get(
        classification, CLASSIFICATION_SEVERITY[NutrientClassification.NEUTRAL]
    )
