"""Evaluation of nutrient intakes against personalized targets."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from dri_engine.domain.dri import DailyNutrientTarget, NutrientDriDefinition
from dri_engine.domain.errors import DuplicateNutrientError, UnitMismatchError
from dri_engine.domain.evaluation import (
    FoodEvaluationResult,
    Highlights,
    NutrientClassification,
    NutrientEvaluation,
    NutrientIntake,
    NutrientNature,
    ProfileSummary,
)
from dri_engine.domain.profile import DriUserProfile, PatientProfile
from dri_engine.reference.nutrient_nature import get_nutrient_nature
from dri_engine.reference.thresholds import get_classification_severity
from dri_engine.services.classification import classify, percent_of
from dri_engine.services.priority import sort_by_priority
from dri_engine.services.profiles import ProfileResolver
from dri_engine.services.targets import TargetCalculator

_logger = logging.getLogger(__name__)


@dataclass
class EvaluationService:
    """Evaluates a food item or a day of intake for a patient."""

    profile_resolver: ProfileResolver
    target_calculator: TargetCalculator

    def evaluate(
        self,
        profile: PatientProfile,
        intakes: Sequence[NutrientIntake],
        calorie_target: float | None = None,
    ) -> FoodEvaluationResult:
        """Resolve the profile and evaluate every intake."""
        resolved = self.profile_resolver.resolve(profile)
        return self.evaluate_resolved(resolved, intakes, calorie_target)

    def evaluate_resolved(
        self,
        profile: DriUserProfile,
        intakes: Sequence[NutrientIntake],
        calorie_target: float | None = None,
    ) -> FoodEvaluationResult:
        """Evaluate intakes for an already resolved profile."""
        _ensure_unique(intakes)
        evaluations = sort_by_priority(
            self._evaluate_intake(intake, profile, calorie_target)
            for intake in intakes
        )
        highlights = Highlights(
            beneficial=_with_classification(
                evaluations, NutrientClassification.BENEFICIAL_HIGH
            ),
            concerns=_with_classification(
                evaluations, NutrientClassification.RISK_HIGH
            ),
        )
        _logger.info(
            "Evaluated %s nutrients (%s highlights, %s concerns)",
            len(evaluations),
            len(highlights.beneficial),
            len(highlights.concerns),
        )
        return FoodEvaluationResult(
            evaluations=tuple(evaluations),
            profile=ProfileSummary(
                age_bracket=profile.age_bracket,
                sex=profile.sex,
                calorie_target=calorie_target,
            ),
            highlights=highlights,
        )

    def _evaluate_intake(
        self,
        intake: NutrientIntake,
        profile: DriUserProfile,
        calorie_target: float | None,
    ) -> NutrientEvaluation:
        nature = get_nutrient_nature(intake.nutrient_id)
        definition = self.target_calculator.table.get(intake.nutrient_id)
        if definition is None:
            return _build_evaluation(
                intake,
                name=intake.nutrient_id,
                unit=intake.unit,
                target=None,
                classification=NutrientClassification.NOT_APPLICABLE,
                nature=nature,
            )

        _check_unit(intake, definition)
        target = self.target_calculator.compute_target(
            intake.nutrient_id, profile, calorie_target
        )
        resolved_target = target if isinstance(target, DailyNutrientTarget) else None
        if intake.amount is None:
            classification = NutrientClassification.INSUFFICIENT_DATA
        else:
            classification = classify(intake.amount, target, nature)
        return _build_evaluation(
            intake,
            name=definition.name,
            unit=definition.unit,
            target=resolved_target,
            classification=classification,
            nature=nature,
        )


def _build_evaluation(
    intake: NutrientIntake,
    *,
    name: str,
    target: DailyNutrientTarget | None,
    classification: NutrientClassification,
    unit: str,
    nature: NutrientNature,
) -> NutrientEvaluation:
    percent_of_target = None
    percent_of_upper_limit = None
    if target is not None and intake.amount is not None:
        percent_of_target = percent_of(intake.amount, target.value)
        percent_of_upper_limit = percent_of(intake.amount, target.upper_limit)
    return NutrientEvaluation(
        nutrient_id=intake.nutrient_id,
        name=name,
        amount=intake.amount,
        unit=unit,
        target=target,
        percent_of_target=percent_of_target,
        percent_of_upper_limit=percent_of_upper_limit,
        classification=classification,
        nature=nature,
        severity=get_classification_severity(classification),
    )


def _check_unit(intake: NutrientIntake, definition: NutrientDriDefinition) -> None:
    if intake.unit.strip().lower() != definition.unit:
        raise UnitMismatchError(
            intake.nutrient_id, expected=definition.unit, actual=intake.unit
        )


def _with_classification(
    evaluations: Sequence[NutrientEvaluation],
    classification: NutrientClassification,
) -> tuple[NutrientEvaluation, ...]:
    return tuple(
        evaluation
        for evaluation in evaluations
        if evaluation.classification is classification
    )


def _ensure_unique(intakes: Sequence[NutrientIntake]) -> None:
    seen: set[str] = set()
    for intake in intakes:
        if intake.nutrient_id in seen:
            raise DuplicateNutrientError(intake.nutrient_id)
        seen.add(intake.nutrient_id)
