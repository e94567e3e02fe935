"""Tests for nature-aware classification."""

import pytest

from dri_engine.domain.dri import DailyNutrientTarget, NotDefined, ReferenceType, Unit
from dri_engine.domain.evaluation import (
    NutrientClassification,
    NutrientNature,
    SeverityLevel,
)
from dri_engine.domain.profile import Sex
from dri_engine.reference.thresholds import (
    ThresholdLevel,
    get_classification_severity,
    get_threshold,
)
from dri_engine.services.classification import (
    classification_denominator,
    classify,
    classify_percent,
    percent_of,
)
from tests.conftest import make_profile


def _target(value: float, upper_limit: float | None = None) -> DailyNutrientTarget:
    return DailyNutrientTarget(
        nutrient_id="test",
        unit=Unit.MG,
        reference_type=ReferenceType.RDA,
        value=value,
        upper_limit=upper_limit,
    )


@pytest.mark.parametrize(
    ("pct", "beneficial", "risk"),
    [
        (
            20.0,
            NutrientClassification.BENEFICIAL_HIGH,
            NutrientClassification.RISK_HIGH,
        ),
        (
            19.999,
            NutrientClassification.BENEFICIAL_MODERATE,
            NutrientClassification.RISK_MODERATE,
        ),
        (
            10.0,
            NutrientClassification.BENEFICIAL_MODERATE,
            NutrientClassification.RISK_MODERATE,
        ),
        (
            9.999,
            NutrientClassification.BENEFICIAL_LOW,
            NutrientClassification.RISK_LOW,
        ),
        (0.0, NutrientClassification.BENEFICIAL_LOW, NutrientClassification.RISK_LOW),
    ],
)
def test_classify_percent_bands(pct, beneficial, risk) -> None:
    assert classify_percent(pct, NutrientNature.BENEFICIAL) is beneficial
    assert classify_percent(pct, NutrientNature.RISK) is risk
    neutral = classify_percent(pct, NutrientNature.NEUTRAL)
    assert neutral is NutrientClassification.NEUTRAL


def test_inclusive_high_boundary() -> None:
    result = classify(10, _target(50), NutrientNature.BENEFICIAL)

    assert result is NutrientClassification.BENEFICIAL_HIGH


@pytest.mark.parametrize("nature", [NutrientNature.BENEFICIAL, NutrientNature.RISK])
def test_classification_is_monotonic(nature) -> None:
    target = _target(100)
    order = {
        NutrientClassification.BENEFICIAL_LOW: 0,
        NutrientClassification.BENEFICIAL_MODERATE: 1,
        NutrientClassification.BENEFICIAL_HIGH: 2,
        NutrientClassification.RISK_LOW: 0,
        NutrientClassification.RISK_MODERATE: 1,
        NutrientClassification.RISK_HIGH: 2,
    }

    ranks = [order[classify(amount, target, nature)] for amount in range(0, 60, 3)]

    assert ranks == sorted(ranks)


def test_risk_nutrient_measured_against_upper_limit(calculator) -> None:
    target = calculator.compute_target("sodium", make_profile(Sex.MALE, 35))

    assert isinstance(target, DailyNutrientTarget)
    assert classification_denominator(target, NutrientNature.RISK) == 2300
    assert classify(2600, target, NutrientNature.RISK) is (
        NutrientClassification.RISK_HIGH
    )
    assert classify(200, target, NutrientNature.RISK) is (
        NutrientClassification.RISK_LOW
    )


def test_beneficial_nutrient_measured_against_primary_value() -> None:
    target = _target(2.4, upper_limit=100)

    assert classification_denominator(target, NutrientNature.BENEFICIAL) == 2.4
    assert classify(0.5, target, NutrientNature.BENEFICIAL) is (
        NutrientClassification.BENEFICIAL_HIGH
    )


def test_undefined_target_is_insufficient_data() -> None:
    result = classify(
        50,
        NotDefined(nutrient_id="unobtainium", reason="no DRI entry"),
        NutrientNature.BENEFICIAL,
    )

    assert result is NutrientClassification.INSUFFICIENT_DATA


def test_zero_denominator_is_insufficient_data() -> None:
    assert classify(1, _target(0), NutrientNature.RISK) is (
        NutrientClassification.INSUFFICIENT_DATA
    )
    assert percent_of(5, 0) is None
    assert percent_of(5, None) is None
    assert percent_of(5, 50) == pytest.approx(10)


def test_neutral_nature_is_not_judged() -> None:
    assert classify(5000, _target(2000), NutrientNature.NEUTRAL) is (
        NutrientClassification.NEUTRAL
    )


def test_threshold_lookup() -> None:
    assert get_threshold(NutrientNature.BENEFICIAL, ThresholdLevel.HIGH) == 20.0
    assert get_threshold(NutrientNature.RISK, ThresholdLevel.MODERATE) == 10.0
    assert get_threshold(NutrientNature.RISK, ThresholdLevel.LOW) == 10.0
    with pytest.raises(ValueError):
        get_threshold(NutrientNature.NEUTRAL, ThresholdLevel.HIGH)


def test_severity_levels() -> None:
    risk_high = get_classification_severity(NutrientClassification.RISK_HIGH)
    risk_low = get_classification_severity(NutrientClassification.RISK_LOW)
    missing = get_classification_severity(NutrientClassification.INSUFFICIENT_DATA)

    assert risk_high.level is SeverityLevel.ERROR
    assert risk_high.priority == 3
    assert risk_low.level is SeverityLevel.SUCCESS
    assert missing.level is SeverityLevel.MUTED
    assert missing.priority == 0


def test_exact_high_boundary_with_table_targets(calculator) -> None:
    profile = make_profile(Sex.FEMALE, 25)
    protein = calculator.compute_target("protein", profile)
    sodium = calculator.compute_target("sodium", profile)

    assert percent_of(9.2, 46) == 20.0
    assert classify(9.2, protein, NutrientNature.BENEFICIAL) is (
        NutrientClassification.BENEFICIAL_HIGH
    )
    assert classify(460, sodium, NutrientNature.RISK) is (
        NutrientClassification.RISK_HIGH
    )
