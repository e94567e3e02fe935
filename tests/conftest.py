"""Shared test fixtures."""

from datetime import date

import pytest

from dri_engine.config import Settings
from dri_engine.containers import AppContainer
from dri_engine.domain.profile import (
    ActivityLevel,
    AgeBracket,
    Condition,
    DriUserProfile,
    LifeStage,
    Sex,
)
from dri_engine.services.evaluation import EvaluationService
from dri_engine.services.profiles import ProfileResolver
from dri_engine.services.targets import TargetCalculator

TODAY = date(2025, 6, 15)


def fixed_today() -> date:
    return TODAY


def make_profile(
    sex: Sex = Sex.FEMALE,
    age_years: int = 25,
    *conditions: Condition,
    life_stage: LifeStage = LifeStage.NON_PREGNANT,
    activity_level: ActivityLevel | None = None,
) -> DriUserProfile:
    """Build a resolved profile directly, bypassing the resolver."""
    bracket = AgeBracket.AGE_19_30
    if age_years > 70:
        bracket = AgeBracket.AGE_70_PLUS
    elif age_years > 50:
        bracket = AgeBracket.AGE_51_70
    elif age_years > 30:
        bracket = AgeBracket.AGE_31_50
    return DriUserProfile(
        sex=sex,
        age_years=age_years,
        age_bracket=bracket,
        life_stage=life_stage,
        activity_level=activity_level,
        conditions=frozenset(conditions),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_token=None,
        default_nutrient_ids=None,
        log_level="INFO",
        environment="test",
    )


@pytest.fixture
def resolver() -> ProfileResolver:
    return ProfileResolver(today=fixed_today)


@pytest.fixture
def calculator() -> TargetCalculator:
    return TargetCalculator()


@pytest.fixture
def evaluation_service(
    resolver: ProfileResolver, calculator: TargetCalculator
) -> EvaluationService:
    return EvaluationService(profile_resolver=resolver, target_calculator=calculator)


@pytest.fixture
def container(
    settings: Settings,
    resolver: ProfileResolver,
    calculator: TargetCalculator,
    evaluation_service: EvaluationService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        profile_resolver=resolver,
        target_calculator=calculator,
        evaluation_service=evaluation_service,
    )
