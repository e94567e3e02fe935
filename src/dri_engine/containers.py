"""Dependency container wiring for the application."""

from dataclasses import dataclass

from dri_engine.config import Settings
from dri_engine.services.evaluation import EvaluationService
from dri_engine.services.profiles import ProfileResolver
from dri_engine.services.targets import TargetCalculator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_resolver: ProfileResolver
    target_calculator: TargetCalculator
    evaluation_service: EvaluationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    profile_resolver = ProfileResolver()
    target_calculator = TargetCalculator()
    evaluation_service = EvaluationService(
        profile_resolver=profile_resolver,
        target_calculator=target_calculator,
    )
    return AppContainer(
        settings=resolved_settings,
        profile_resolver=profile_resolver,
        target_calculator=target_calculator,
        evaluation_service=evaluation_service,
    )
