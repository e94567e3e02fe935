"""Engine error hierarchy."""


class DriEngineError(Exception):
    """Base class for deterministic engine failures."""


class ProfileOutOfRangeError(DriEngineError):
    """Raised when a profile falls outside the modeled age/sex brackets."""


class UnitMismatchError(DriEngineError):
    """Raised when an intake unit differs from the nutrient's canonical unit."""

    def __init__(self, nutrient_id: str, expected: str, actual: str) -> None:
        self.nutrient_id = nutrient_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Unit mismatch for {nutrient_id}: expected {expected}, got {actual}"
        )


class DuplicateNutrientError(DriEngineError):
    """Raised when the same nutrient is submitted more than once."""

    def __init__(self, nutrient_id: str) -> None:
        self.nutrient_id = nutrient_id
        super().__init__(f"Nutrient submitted more than once: {nutrient_id}")


class UnknownAdjustmentError(DriEngineError):
    """Raised when an adjustment declares an unknown tag."""
