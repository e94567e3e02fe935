"""Nutrient target and evaluation endpoints with optional token auth."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from dri_engine.api.models import EvaluateRequest, TargetsRequest
from dri_engine.config import parse_nutrient_ids
from dri_engine.domain.dri import NotDefined
from dri_engine.reference.nutrient_nature import get_nutrient_nature

if TYPE_CHECKING:
    from dri_engine.containers import AppContainer
    from dri_engine.domain.dri import NutrientDriDefinition


def _get_api_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str | None = Depends(_get_api_token),
) -> None:
    """Ensure requests include the configured API token, when one is set."""
    if api_token and x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(tags=["nutrition"], dependencies=[Depends(require_api_token)])


@router.get("/nutrients")
async def list_nutrients(request: Request) -> dict[str, object]:
    """Return every nutrient of the reference table."""
    container: AppContainer = request.app.state.container
    table = container.target_calculator.table
    return {"nutrients": [_serialize_definition(item) for item in table.values()]}


@router.post("/targets")
async def compute_targets(payload: TargetsRequest, request: Request) -> dict[str, Any]:
    """Return personalized daily targets for a profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_resolver.resolve(payload.profile.to_domain())
    nutrient_ids = payload.nutrient_ids
    if nutrient_ids is None:
        nutrient_ids = parse_nutrient_ids(container.settings.default_nutrient_ids)
    results = container.target_calculator.compute_targets(
        profile, nutrient_ids, payload.calorie_target
    )
    targets = []
    not_defined = []
    for result in results.values():
        if isinstance(result, NotDefined):
            not_defined.append(asdict(result))
        else:
            targets.append(asdict(result))
    return {"targets": targets, "not_defined": not_defined}


@router.post("/evaluate")
async def evaluate(payload: EvaluateRequest, request: Request) -> dict[str, Any]:
    """Evaluate intakes against the profile's daily targets."""
    container: AppContainer = request.app.state.container
    result = container.evaluation_service.evaluate(
        payload.profile.to_domain(),
        [intake.to_domain() for intake in payload.intakes],
        payload.calorie_target,
    )
    return asdict(result)


def _serialize_definition(definition: NutrientDriDefinition) -> dict[str, object]:
    return {
        "id": definition.nutrient_id,
        "name": definition.name,
        "unit": definition.unit,
        "nature": get_nutrient_nature(definition.nutrient_id),
        "references": list(definition.references),
    }
