"""Profile resolution for DRI lookups."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from dri_engine.domain.errors import ProfileOutOfRangeError
from dri_engine.domain.profile import (
    ActivityLevel,
    AgeBracket,
    Condition,
    DriUserProfile,
    LifeStage,
    PatientProfile,
    Sex,
)

MIN_ADULT_AGE = 19
ELDERLY_AGE = 65

_BRACKET_UPPER_BOUNDS = (
    (30, AgeBracket.AGE_19_30),
    (50, AgeBracket.AGE_31_50),
    (70, AgeBracket.AGE_51_70),
)

_LIFE_STAGE_CONDITIONS = {
    LifeStage.PREGNANT: Condition.PREGNANT,
    LifeStage.LACTATING: Condition.LACTATING,
}

_logger = logging.getLogger(__name__)


def calculate_age(date_of_birth: date, today: date) -> int:
    """Return completed years between a date of birth and a reference date."""
    years = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return years


def age_bracket_for(age_years: int) -> AgeBracket:
    """Map an adult age onto its DRI bracket.

    Pediatric DRI tables are not modeled, so ages below 19 are rejected.
    """
    if age_years < MIN_ADULT_AGE:
        raise ProfileOutOfRangeError(
            f"Age {age_years} is below the modeled adult range ({MIN_ADULT_AGE}+)"
        )
    for upper_bound, bracket in _BRACKET_UPPER_BOUNDS:
        if age_years <= upper_bound:
            return bracket
    return AgeBracket.AGE_70_PLUS


def is_pediatric(age_years: int) -> bool:
    """Return True for ages covered by pediatric tables."""
    return age_years < MIN_ADULT_AGE


def is_elderly(age_years: int) -> bool:
    """Return True for ages of 65 and over."""
    return age_years >= ELDERLY_AGE


@dataclass
class ProfileResolver:
    """Resolves raw patient profiles into DRI lookup keys."""

    today: Callable[[], date] = date.today

    def resolve(self, profile: PatientProfile) -> DriUserProfile:
        """Resolve sex, age bracket and active conditions for a profile."""
        sex = _parse_sex(profile.sex)
        age_years = self._resolve_age(profile)
        bracket = age_bracket_for(age_years)
        conditions = set(profile.health.active_conditions())

        life_stage_condition = _LIFE_STAGE_CONDITIONS.get(profile.life_stage)
        if life_stage_condition is not None:
            if sex is Sex.FEMALE:
                conditions.add(life_stage_condition)
            else:
                _logger.warning(
                    "Ignoring life stage %s for a %s profile", profile.life_stage, sex
                )
        if profile.activity_level is ActivityLevel.ATHLETE:
            conditions.add(Condition.ATHLETE)

        return DriUserProfile(
            sex=sex,
            age_years=age_years,
            age_bracket=bracket,
            life_stage=profile.life_stage,
            activity_level=profile.activity_level,
            conditions=frozenset(conditions),
        )

    def _resolve_age(self, profile: PatientProfile) -> int:
        if profile.age_years is not None:
            age_years = profile.age_years
        elif profile.date_of_birth is not None:
            today = self.today()
            if profile.date_of_birth > today:
                raise ProfileOutOfRangeError(
                    f"Date of birth {profile.date_of_birth} is in the future"
                )
            age_years = calculate_age(profile.date_of_birth, today)
        else:
            raise ProfileOutOfRangeError("Profile needs age_years or date_of_birth")
        if age_years < 0:
            raise ProfileOutOfRangeError(f"Age {age_years} is negative")
        return age_years


def _parse_sex(raw: str) -> Sex:
    """Parse sex; only the values modeled by the DRI tables are accepted."""
    try:
        return Sex(raw.strip().lower())
    except ValueError as exc:
        raise ProfileOutOfRangeError(
            f"Unsupported sex {raw!r}: DRI tables model only 'male' and 'female'"
        ) from exc
