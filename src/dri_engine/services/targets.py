"""Personalized daily target computation."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from dri_engine.domain.dri import (
    AdjustmentTarget,
    DailyNutrientTarget,
    NotDefined,
    NutrientDriDefinition,
    ReferenceType,
)
from dri_engine.domain.profile import DriUserProfile
from dri_engine.reference.dri_table import DRI_TABLE

_logger = logging.getLogger(__name__)


@dataclass
class TargetCalculator:
    """Computes daily nutrient targets from the DRI table.

    Special adjustments are applied in declaration order. When several active
    conditions adjust the same field, the last declared adjustment wins.
    """

    table: Mapping[str, NutrientDriDefinition] = field(
        default_factory=lambda: DRI_TABLE
    )

    def compute_target(
        self,
        nutrient_id: str,
        profile: DriUserProfile,
        calorie_target: float | None = None,
    ) -> DailyNutrientTarget | NotDefined:
        """Compute the target for one nutrient, or NotDefined when none applies."""
        _validate_calorie_target(calorie_target)
        definition = self.table.get(nutrient_id)
        if definition is None:
            return NotDefined(nutrient_id=nutrient_id, reason="no DRI entry")

        base = definition.base_value(profile.sex, profile.age_bracket)
        upper_limit = definition.upper_limit(profile.sex, profile.age_bracket)
        base, upper_limit = _apply_adjustments(definition, profile, base, upper_limit)

        amdr_min = amdr_max = None
        if definition.amdr is not None and calorie_target is not None:
            amdr_min, amdr_max = definition.amdr.to_amounts(calorie_target)

        if base is not None and definition.base_reference is not None:
            value, reference_type = base, definition.base_reference
        elif amdr_min is not None and amdr_max is not None:
            value, reference_type = (amdr_min + amdr_max) / 2, ReferenceType.AMDR
        elif upper_limit is not None:
            value, reference_type = upper_limit, ReferenceType.UL
        elif definition.amdr is not None:
            return NotDefined(
                nutrient_id=nutrient_id, reason="AMDR requires a calorie target"
            )
        else:
            return NotDefined(nutrient_id=nutrient_id, reason="no applicable reference")

        return DailyNutrientTarget(
            nutrient_id=nutrient_id,
            unit=definition.unit,
            reference_type=reference_type,
            value=value,
            upper_limit=upper_limit,
            amdr_min=amdr_min,
            amdr_max=amdr_max,
            source=f"{reference_type} {profile.sex} {profile.age_bracket}",
        )

    def compute_targets(
        self,
        profile: DriUserProfile,
        nutrient_ids: Iterable[str] | None = None,
        calorie_target: float | None = None,
    ) -> dict[str, DailyNutrientTarget | NotDefined]:
        """Compute targets for several nutrients, defaulting to the whole table."""
        ids = list(self.table) if nutrient_ids is None else list(nutrient_ids)
        return {
            nutrient_id: self.compute_target(nutrient_id, profile, calorie_target)
            for nutrient_id in ids
        }


def _apply_adjustments(
    definition: NutrientDriDefinition,
    profile: DriUserProfile,
    base: float | None,
    upper_limit: float | None,
) -> tuple[float | None, float | None]:
    values = {AdjustmentTarget.BASE: base, AdjustmentTarget.UPPER_LIMIT: upper_limit}
    for adjustment in definition.special_adjustments:
        if not profile.has_condition(adjustment.condition):
            continue
        current = values[adjustment.target]
        values[adjustment.target] = adjustment.operation.apply(current)
        _logger.debug(
            "Adjusted %s %s for %s via %s: %s -> %s",
            definition.nutrient_id,
            adjustment.target,
            adjustment.condition,
            adjustment.operation.tag,
            current,
            values[adjustment.target],
        )
    return values[AdjustmentTarget.BASE], values[AdjustmentTarget.UPPER_LIMIT]


def _validate_calorie_target(calorie_target: float | None) -> None:
    if calorie_target is not None and calorie_target <= 0:
        raise ValueError(f"calorie_target must be positive, got {calorie_target}")
