"""Pydantic models for the HTTP request payloads."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dri_engine.domain.evaluation import NutrientIntake
from dri_engine.domain.profile import (
    ActivityLevel,
    HealthFlags,
    LifeStage,
    NutritionGoal,
    PatientProfile,
)


class HealthFlagsPayload(BaseModel):
    """Health condition flags payload."""

    model_config = ConfigDict(populate_by_name=True)

    hypertension: bool = False
    ckd: bool = False
    diabetes: bool = False
    heart_disease: bool = Field(default=False, alias="heartDisease")


class ProfilePayload(BaseModel):
    """Patient profile payload."""

    sex: str
    age_years: int | None = None
    date_of_birth: date | None = None
    life_stage: LifeStage = LifeStage.NON_PREGNANT
    activity_level: ActivityLevel | None = None
    health: HealthFlagsPayload = Field(default_factory=HealthFlagsPayload)
    weight_kg: float | None = Field(default=None, gt=0)
    height_cm: float | None = Field(default=None, gt=0)
    goal: NutritionGoal | None = None

    @model_validator(mode="after")
    def _require_age(self) -> "ProfilePayload":
        if self.age_years is None and self.date_of_birth is None:
            raise ValueError("Either age_years or date_of_birth is required")
        return self

    def to_domain(self) -> PatientProfile:
        return PatientProfile(
            sex=self.sex,
            age_years=self.age_years,
            date_of_birth=self.date_of_birth,
            life_stage=self.life_stage,
            activity_level=self.activity_level,
            health=HealthFlags(
                hypertension=self.health.hypertension,
                ckd=self.health.ckd,
                diabetes=self.health.diabetes,
                heart_disease=self.health.heart_disease,
            ),
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            goal=self.goal,
        )


class IntakePayload(BaseModel):
    """Observed nutrient amount; a null amount marks missing food data."""

    nutrient_id: str
    amount: float | None = Field(default=None, ge=0)
    unit: str

    def to_domain(self) -> NutrientIntake:
        return NutrientIntake(
            nutrient_id=self.nutrient_id, amount=self.amount, unit=self.unit
        )


class TargetsRequest(BaseModel):
    """Request body for daily target computation."""

    profile: ProfilePayload
    nutrient_ids: list[str] | None = None
    calorie_target: float | None = Field(default=None, gt=0)


class EvaluateRequest(BaseModel):
    """Request body for intake evaluation."""

    profile: ProfilePayload
    intakes: list[IntakePayload]
    calorie_target: float | None = Field(default=None, gt=0)
