"""DRI reference domain models."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from dri_engine.domain.errors import UnknownAdjustmentError
from dri_engine.domain.profile import AgeBracket, Condition, Sex

ValuesByAge = Mapping[AgeBracket, float]


class ReferenceType(StrEnum):
    """DRI reference type that supplied a target value."""

    RDA = "RDA"
    AI = "AI"
    UL = "UL"
    AMDR = "AMDR"


class Unit(StrEnum):
    """Canonical nutrient units."""

    KCAL = "kcal"
    G = "g"
    MG = "mg"
    MCG = "mcg"


class AdjustmentTarget(StrEnum):
    """Target field of a special adjustment."""

    BASE = "base"
    UPPER_LIMIT = "upperLimit"


@dataclass(frozen=True)
class SexValues:
    """RDA or AI values split by sex."""

    male: ValuesByAge
    female: ValuesByAge

    def lookup(self, sex: Sex, bracket: AgeBracket) -> float | None:
        """Return the value for a sex and age bracket, if defined."""
        table = self.male if sex is Sex.MALE else self.female
        return table.get(bracket)


@dataclass(frozen=True)
class UpperLimitValues:
    """Tolerable upper intake levels.

    A ``both`` table applies regardless of sex; sex-specific tables take
    precedence when present.
    """

    male: ValuesByAge | None = None
    female: ValuesByAge | None = None
    both: ValuesByAge | None = None

    def lookup(self, sex: Sex, bracket: AgeBracket) -> float | None:
        """Return the upper limit for a sex and age bracket, if defined."""
        table = self.male if sex is Sex.MALE else self.female
        if table is None:
            table = self.both
        if table is None:
            return None
        return table.get(bracket)


@dataclass(frozen=True)
class Amdr:
    """Acceptable Macronutrient Distribution Range as percent of energy."""

    min_pct_kcal: float
    max_pct_kcal: float
    kcal_per_unit: float

    def to_amounts(self, calorie_target: float) -> tuple[float, float]:
        """Convert the percent range into absolute amounts for a calorie target."""
        low = self.min_pct_kcal / 100 * calorie_target / self.kcal_per_unit
        high = self.max_pct_kcal / 100 * calorie_target / self.kcal_per_unit
        return low, high


@dataclass(frozen=True)
class Multiplier:
    """Scale the current value."""

    value: float
    tag: ClassVar[str] = "multiplier"

    def apply(self, current: float | None) -> float | None:
        if current is None:
            return None
        return current * self.value


@dataclass(frozen=True)
class Absolute:
    """Add a fixed amount to the current value."""

    value: float
    tag: ClassVar[str] = "absolute"

    def apply(self, current: float | None) -> float | None:
        if current is None:
            return None
        return current + self.value


@dataclass(frozen=True)
class Replace:
    """Discard the current value and substitute a fixed one."""

    value: float
    tag: ClassVar[str] = "replace"

    def apply(self, current: float | None) -> float | None:  # noqa: ARG002
        return self.value


AdjustmentOperation = Multiplier | Absolute | Replace

_OPERATIONS: Mapping[str, type[AdjustmentOperation]] = {
    operation.tag: operation for operation in (Multiplier, Absolute, Replace)
}


def build_operation(tag: str, value: float) -> AdjustmentOperation:
    """Build an adjustment operation from its tag."""
    operation = _OPERATIONS.get(tag)
    if operation is None:
        raise UnknownAdjustmentError(f"Unknown adjustment type: {tag!r}")
    return operation(value)


@dataclass(frozen=True)
class SpecialAdjustment:
    """Conditional adjustment of a base value or upper limit."""

    condition: Condition
    operation: AdjustmentOperation
    target: AdjustmentTarget = AdjustmentTarget.BASE

    @classmethod
    def create(
        cls, condition: str, type_: str, value: float, target: str = "base"
    ) -> "SpecialAdjustment":
        """Create an adjustment from string tags, rejecting unknown ones."""
        try:
            resolved_condition = Condition(condition)
        except ValueError as exc:
            raise UnknownAdjustmentError(
                f"Unknown adjustment condition: {condition!r}"
            ) from exc
        try:
            resolved_target = AdjustmentTarget(target)
        except ValueError as exc:
            raise UnknownAdjustmentError(
                f"Unknown adjustment target: {target!r}"
            ) from exc
        return cls(
            condition=resolved_condition,
            operation=build_operation(type_, value),
            target=resolved_target,
        )


@dataclass(frozen=True)
class NutrientDriDefinition:
    """Complete DRI definition for a single nutrient."""

    nutrient_id: str
    name: str
    unit: Unit
    rda: SexValues | None = None
    ai: SexValues | None = None
    ul: UpperLimitValues | None = None
    amdr: Amdr | None = None
    primary_reference: ReferenceType | None = None
    special_adjustments: tuple[SpecialAdjustment, ...] = ()

    def __post_init__(self) -> None:
        if self.primary_reference is ReferenceType.RDA and self.rda is None:
            raise ValueError(f"{self.nutrient_id}: primary RDA without RDA values")
        if self.primary_reference is ReferenceType.AI and self.ai is None:
            raise ValueError(f"{self.nutrient_id}: primary AI without AI values")
        if self.primary_reference in {ReferenceType.UL, ReferenceType.AMDR}:
            raise ValueError(f"{self.nutrient_id}: primary reference must be RDA or AI")
        for adjustment in self.special_adjustments:
            missing_base = self.base_reference is None
            if adjustment.target is AdjustmentTarget.BASE and missing_base:
                raise ValueError(
                    f"{self.nutrient_id}: {adjustment.condition} adjusts a missing base"
                )
            if adjustment.target is AdjustmentTarget.UPPER_LIMIT and self.ul is None:
                raise ValueError(
                    f"{self.nutrient_id}: {adjustment.condition} adjusts a missing UL"
                )

    @property
    def base_reference(self) -> ReferenceType | None:
        """Reference type that supplies the base value, if any."""
        if self.primary_reference is not None:
            return self.primary_reference
        if self.rda is not None:
            return ReferenceType.RDA
        if self.ai is not None:
            return ReferenceType.AI
        return None

    @property
    def references(self) -> tuple[ReferenceType, ...]:
        """All reference types declared for this nutrient."""
        declared = (
            (ReferenceType.RDA, self.rda),
            (ReferenceType.AI, self.ai),
            (ReferenceType.UL, self.ul),
            (ReferenceType.AMDR, self.amdr),
        )
        return tuple(reference for reference, values in declared if values is not None)

    def base_value(self, sex: Sex, bracket: AgeBracket) -> float | None:
        """Return the unadjusted base value for a sex and age bracket."""
        if self.base_reference is ReferenceType.RDA and self.rda is not None:
            return self.rda.lookup(sex, bracket)
        if self.base_reference is ReferenceType.AI and self.ai is not None:
            return self.ai.lookup(sex, bracket)
        return None

    def upper_limit(self, sex: Sex, bracket: AgeBracket) -> float | None:
        """Return the unadjusted upper limit for a sex and age bracket."""
        if self.ul is None:
            return None
        return self.ul.lookup(sex, bracket)


@dataclass(frozen=True)
class DailyNutrientTarget:
    """Personalized daily target after all adjustments."""

    nutrient_id: str
    unit: Unit
    reference_type: ReferenceType
    value: float
    upper_limit: float | None = None
    amdr_min: float | None = None
    amdr_max: float | None = None
    source: str = ""


@dataclass(frozen=True)
class NotDefined:
    """Typed absence of a target for a nutrient."""

    nutrient_id: str
    reason: str
