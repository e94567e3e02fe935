"""Priority ordering of nutrient evaluations."""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from dri_engine.domain.evaluation import NutrientClassification
from dri_engine.reference.thresholds import get_classification_severity


class Classified(Protocol):
    """Anything carrying a classification."""

    @property
    def classification(self) -> NutrientClassification:
        """Return the classification."""


T = TypeVar("T", bound=Classified)


def priority_of(classification: NutrientClassification) -> int:
    """Return the ordering priority of a classification."""
    return get_classification_severity(classification).priority


def sort_by_priority(items: Iterable[T]) -> list[T]:
    """Return items ordered by descending priority, keeping input order on ties."""
    return sorted(items, key=lambda item: -priority_of(item.classification))
