"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient

from dri_engine.api.app import create_app
from dri_engine.api.models import ProfilePayload
from dri_engine.domain.profile import NutritionGoal
from dri_engine.reference.dri_table import DRI_TABLE

PROFILE = {"sex": "female", "age_years": 25}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_nutrients(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/nutrients")

    assert response.status_code == 200
    nutrients = {item["id"]: item for item in response.json()["nutrients"]}
    assert set(nutrients) == set(DRI_TABLE)
    assert nutrients["sodium"] == {
        "id": "sodium",
        "name": "Sodium",
        "unit": "mg",
        "nature": "risk",
        "references": ["AI", "UL"],
    }


def test_targets_for_selected_nutrients(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/targets",
        json={
            "profile": {**PROFILE, "life_stage": "pregnant"},
            "nutrient_ids": ["protein", "fat", "unobtainium"],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["targets"][0]["nutrient_id"] == "protein"
    assert data["targets"][0]["value"] == 71
    assert data["targets"][0]["reference_type"] == "RDA"
    assert data["not_defined"] == [
        {"nutrient_id": "fat", "reason": "AMDR requires a calorie target"},
        {"nutrient_id": "unobtainium", "reason": "no DRI entry"},
    ]


def test_targets_use_configured_default_nutrients(container) -> None:
    container.settings.default_nutrient_ids = "sodium, calories"
    client = TestClient(create_app(container))

    response = client.post(
        "/targets", json={"profile": PROFILE, "calorie_target": 1800}
    )

    assert response.status_code == 200
    data = response.json()
    assert [item["nutrient_id"] for item in data["targets"]] == ["sodium", "calories"]
    assert data["targets"][1]["value"] == 1800
    assert data["not_defined"] == []


def test_evaluate(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/evaluate",
        json={
            "profile": {
                **PROFILE,
                "health": {"hypertension": True, "heartDisease": False},
            },
            "intakes": [
                {"nutrient_id": "protein", "amount": 2, "unit": "g"},
                {"nutrient_id": "sodium", "amount": 600, "unit": "mg"},
                {"nutrient_id": "fiber", "amount": None, "unit": "g"},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert [item["nutrient_id"] for item in data["evaluations"]] == [
        "sodium",
        "protein",
        "fiber",
    ]
    sodium = data["evaluations"][0]
    assert sodium["classification"] == "risk_high"
    assert sodium["severity"] == {"level": "error", "priority": 3}
    assert sodium["target"]["upper_limit"] == 1500
    assert data["highlights"]["concerns"][0]["nutrient_id"] == "sodium"
    assert data["profile"] == {
        "age_bracket": "19-30",
        "sex": "female",
        "calorie_target": None,
    }


def test_engine_errors_map_to_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/evaluate",
        json={
            "profile": PROFILE,
            "intakes": [{"nutrient_id": "sodium", "amount": 1, "unit": "g"}],
        },
    )

    assert response.status_code == 422
    assert response.json() == {
        "error": "UnitMismatchError",
        "detail": "Unit mismatch for sodium: expected mg, got g",
    }


def test_out_of_range_profile_maps_to_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/targets", json={"profile": {"sex": "female", "age_years": 15}}
    )

    assert response.status_code == 422
    assert response.json()["error"] == "ProfileOutOfRangeError"


def test_payload_validation(container) -> None:
    client = TestClient(create_app(container))

    missing_age = client.post("/targets", json={"profile": {"sex": "female"}})
    negative_amount = client.post(
        "/evaluate",
        json={
            "profile": PROFILE,
            "intakes": [{"nutrient_id": "iron", "amount": -1, "unit": "mg"}],
        },
    )
    zero_calories = client.post(
        "/targets", json={"profile": PROFILE, "calorie_target": 0}
    )

    assert missing_age.status_code == 422
    assert negative_amount.status_code == 422
    assert zero_calories.status_code == 422


def test_api_token_required_when_configured(container) -> None:
    container.settings.api_token = "secret"
    client = TestClient(create_app(container))

    assert client.get("/health").status_code == 200
    assert client.get("/nutrients").status_code == 401
    assert (
        client.get("/nutrients", headers={"X-Api-Token": "wrong"}).status_code == 401
    )
    assert (
        client.get("/nutrients", headers={"X-Api-Token": "secret"}).status_code == 200
    )


def test_explicit_empty_nutrient_list_returns_no_targets(container) -> None:
    container.settings.default_nutrient_ids = "sodium"
    client = TestClient(create_app(container))

    response = client.post("/targets", json={"profile": PROFILE, "nutrient_ids": []})

    assert response.status_code == 200
    assert response.json() == {"targets": [], "not_defined": []}


def test_profile_body_metrics_and_goal(container) -> None:
    client = TestClient(create_app(container))
    profile = {**PROFILE, "weight_kg": 61.5, "height_cm": 168, "goal": "maintenance"}

    accepted = client.post(
        "/targets", json={"profile": profile, "nutrient_ids": ["protein"]}
    )
    rejected = client.post(
        "/targets", json={"profile": {**profile, "weight_kg": 0}}
    )

    assert accepted.status_code == 200
    assert accepted.json()["targets"][0]["value"] == 46
    assert rejected.status_code == 422
    domain = ProfilePayload.model_validate(profile).to_domain()
    assert domain.weight_kg == 61.5
    assert domain.height_cm == 168
    assert domain.goal is NutritionGoal.MAINTENANCE
